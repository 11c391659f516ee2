import hashlib
import logging
from typing import Any, Dict, Optional, Tuple

from src.commonUtils.exceptions import AudienceConflictError, ConfigurationError, MailchimpError
from src.crud.mailchimpService import MailchimpClient
from src.schemas.newsletterSchema import MemberStatus

logger = logging.getLogger(__name__)

CONTACT_FORM_TAG = "contact-form"


def member_hash(email: str) -> str:
    """Mailchimp identifies members by the MD5 hex digest of the lowercased address."""
    return hashlib.md5(email.lower().encode("utf-8")).hexdigest()


def split_name(name: str) -> Tuple[str, str]:
    """First whitespace-separated token is the first name, the rest is the last name."""
    parts = name.split()
    if not parts:
        return "", ""
    return parts[0], " ".join(parts[1:])


class AudienceEnrollmentService:
    """Best-effort enrollment of contact form submitters into the newsletter audience."""

    def __init__(self, mailchimp: MailchimpClient, list_id: Optional[str]):
        self.mailchimp = mailchimp
        self.list_id = list_id

    async def enroll_contact(self, email: str, name: str, phone: str) -> None:
        """
        Make sure the submitter is in the audience list.

        Never raises: failures are logged and dropped so they cannot affect the
        outcome already reported for the contact form.
        """
        if not self.list_id:
            logger.info("Mailchimp audience ID not configured - skipping newsletter enrollment")
            return

        try:
            subscriber_hash = member_hash(email)

            if await self._is_member(subscriber_hash):
                logger.info(f"{email} is already in the audience - nothing to do")
                return

            first_name, last_name = split_name(name)
            await self.mailchimp.add_list_member(
                self.list_id,
                {
                    "email_address": email,
                    "status": MemberStatus.SUBSCRIBED.value,
                    "merge_fields": {
                        "FNAME": first_name,
                        "LNAME": last_name,
                        "PHONE": phone,
                    },
                    "tags": [CONTACT_FORM_TAG],
                },
            )
            logger.info(f"✅ Added {email} to the newsletter from the contact form")
        except Exception as e:
            logger.error(f"Failed to add to newsletter: {e}", exc_info=True)

    async def _is_member(self, subscriber_hash: str) -> bool:
        # Any lookup failure counts as "not a member"; only the log line differs
        try:
            await self.mailchimp.get_list_member(self.list_id, subscriber_hash)
            return True
        except Exception as e:
            if isinstance(e, MailchimpError) and e.is_not_found:
                logger.info(f"Member {subscriber_hash} not found in audience")
            else:
                logger.warning(f"Member lookup for {subscriber_hash} failed: {e}")
            return False


class NewsletterService:
    """Explicit newsletter subscribe/unsubscribe against the configured audience."""

    def __init__(self, mailchimp: MailchimpClient, list_id: Optional[str]):
        self.mailchimp = mailchimp
        self.list_id = list_id

    def _require_list_id(self) -> str:
        if not self.list_id:
            raise ConfigurationError("Mailchimp audience ID is not configured")
        return self.list_id

    async def subscribe(self, email: str, first_name: Optional[str] = None,
                        last_name: Optional[str] = None) -> Dict[str, Any]:
        list_id = self._require_list_id()
        try:
            return await self.mailchimp.add_list_member(
                list_id,
                {
                    "email_address": email,
                    "status": MemberStatus.SUBSCRIBED.value,
                    "merge_fields": {
                        "FNAME": first_name or "",
                        "LNAME": last_name or "",
                    },
                },
            )
        except MailchimpError as e:
            if e.is_member_exists:
                raise AudienceConflictError(e.message, status=e.status, title=e.title) from e
            raise

    async def unsubscribe(self, email: str) -> Dict[str, Any]:
        list_id = self._require_list_id()
        return await self.mailchimp.update_list_member(
            list_id,
            member_hash(email),
            {"status": MemberStatus.UNSUBSCRIBED.value},
        )
