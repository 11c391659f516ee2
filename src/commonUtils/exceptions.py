from typing import List, Optional

from pydantic import BaseModel


class FieldError(BaseModel):
    field: str
    message: str


class RelayError(Exception):
    """Base class for every error raised by the relay services."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SubmissionValidationError(RelayError):
    """Contact payload failed one or more field constraints."""

    def __init__(self, errors: List[FieldError]):
        super().__init__("Validation error")
        self.errors = errors


class ConfigurationError(RelayError):
    """A required external-service identifier is missing."""


class MailTransportError(RelayError):
    """SMTP delivery failed."""


class MailchimpError(RelayError):
    """
    Error reported by the Mailchimp Marketing API.

    status is the HTTP status of the API response (None when the request never
    got a response), title is the problem-detail title from the response body.
    """

    def __init__(self, message: str, status: Optional[int] = None, title: Optional[str] = None):
        super().__init__(message)
        self.status = status
        self.title = title

    @property
    def is_not_found(self) -> bool:
        return self.status == 404

    @property
    def is_member_exists(self) -> bool:
        return self.status == 400 and self.title == "Member Exists"


class AudienceConflictError(MailchimpError):
    """Subscribe attempted for an email that is already in the audience."""
