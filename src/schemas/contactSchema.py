from typing import Any, List

from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, ConfigDict, Field, StrictBool, ValidationError, field_validator
from pydantic_core import PydanticCustomError

from src.commonUtils.exceptions import FieldError, SubmissionValidationError

MESSAGE_MIN_LENGTH = 20
MESSAGE_MAX_LENGTH = 1000


class ContactForm(BaseModel):
    """Contact form submission as posted by the website."""
    model_config = ConfigDict(populate_by_name=True)

    name: str
    email: str
    phone: str
    contact_about: str = Field(..., alias="contactAbout")
    message: str
    agree_to_policy: StrictBool = Field(..., alias="agreeToPolicy")

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        if len(value) < 2:
            raise PydanticCustomError("name_too_short", "Name must be at least 2 characters.")
        return value

    @field_validator("email")
    @classmethod
    def check_email(cls, value: str) -> str:
        try:
            validate_email(value, check_deliverability=False)
        except EmailNotValidError:
            raise PydanticCustomError("invalid_email", "Please enter a valid email address.")
        return value

    @field_validator("phone")
    @classmethod
    def check_phone(cls, value: str) -> str:
        if len(value) < 10:
            raise PydanticCustomError("invalid_phone", "Please enter a valid phone number.")
        return value

    @field_validator("contact_about")
    @classmethod
    def check_topic(cls, value: str) -> str:
        if not value:
            raise PydanticCustomError("missing_topic", "Please select a topic.")
        return value

    @field_validator("message")
    @classmethod
    def check_message(cls, value: str) -> str:
        if len(value) < MESSAGE_MIN_LENGTH:
            raise PydanticCustomError(
                "message_too_short", f"Message must be at least {MESSAGE_MIN_LENGTH} characters."
            )
        if len(value) > MESSAGE_MAX_LENGTH:
            raise PydanticCustomError(
                "message_too_long", f"Message must not exceed {MESSAGE_MAX_LENGTH} characters."
            )
        return value

    @field_validator("agree_to_policy")
    @classmethod
    def check_policy(cls, value: bool) -> bool:
        if value is not True:
            raise PydanticCustomError("policy_not_accepted", "You must agree to the policies to continue.")
        return value


def to_field_errors(exc: ValidationError) -> List[FieldError]:
    """Flatten pydantic errors into dotted-path field errors."""
    return [
        FieldError(field=".".join(str(part) for part in error["loc"]), message=error["msg"])
        for error in exc.errors()
    ]


def validate_contact_submission(payload: Any) -> ContactForm:
    """
    Validate an untyped contact payload.

    Every field is checked in one pass; all violations are reported together
    in a SubmissionValidationError.
    """
    try:
        return ContactForm.model_validate(payload)
    except ValidationError as e:
        raise SubmissionValidationError(to_field_errors(e)) from e
