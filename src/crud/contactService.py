import logging
from typing import Optional

from fastapi import BackgroundTasks

from src.commonUtils.emailUtil import NotificationSender
from src.crud.audienceService import AudienceEnrollmentService
from src.schemas.contactSchema import ContactForm

logger = logging.getLogger(__name__)


class ContactRelayService:
    """Relays a validated contact form to email, then to the newsletter audience."""

    def __init__(self, sender: NotificationSender, enrollment: AudienceEnrollmentService):
        self.sender = sender
        self.enrollment = enrollment

    async def submit(self, form: ContactForm, background_tasks: Optional[BackgroundTasks] = None) -> None:
        """
        Send the notification email and then enroll the submitter.

        A failed send raises MailTransportError and enrollment is never
        attempted. Enrollment is best-effort and runs after the send, as a
        background task when one is available.
        """
        await self.sender.send(form)

        if background_tasks is not None:
            background_tasks.add_task(self.enrollment.enroll_contact, form.email, form.name, form.phone)
        else:
            await self.enrollment.enroll_contact(form.email, form.name, form.phone)
        logger.info(f"Contact form from {form.email} relayed")
