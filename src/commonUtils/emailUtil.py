# src/commonUtils/emailUtil.py - SMTP delivery of contact form notifications

import logging
from typing import Optional

from fastapi_mail import FastMail, MessageSchema, MessageType

from src.commonUtils.email_renderer import EmailRenderer, get_email_renderer
from src.commonUtils.exceptions import ConfigurationError, MailTransportError
from src.schemas.contactSchema import ContactForm

logger = logging.getLogger(__name__)


class NotificationSender:
    """Delivers contact form submissions to the site owner's inbox."""

    def __init__(self, mailer: Optional[FastMail], recipient: Optional[str],
                 renderer: Optional[EmailRenderer] = None):
        self.mailer = mailer
        self.recipient = recipient
        self.renderer = renderer or get_email_renderer()

    def build_message(self, form: ContactForm) -> MessageSchema:
        if not self.recipient:
            raise ConfigurationError("Contact form recipient is not configured")

        return MessageSchema(
            subject=f"New Contact Form Submission: {form.name} {form.email}",
            recipients=[self.recipient],
            body=self.renderer.contact_notification_email(
                name=form.name,
                email=form.email,
                phone=form.phone,
                topic=form.contact_about,
                message=form.message,
                agreed_to_policy=form.agree_to_policy,
            ),
            subtype=MessageType.html,
            reply_to=[form.email],
        )

    async def send(self, form: ContactForm) -> None:
        """Send the notification; any transport failure is raised as MailTransportError."""
        if self.mailer is None:
            raise ConfigurationError("Mail transport is not configured")

        message = self.build_message(form)
        logger.info(f"📧 Sending contact notification to {self.recipient} | Subject: {message.subject}")
        try:
            await self.mailer.send_message(message)
        except Exception as e:
            logger.error(f"Failed to send contact notification to {self.recipient}: {str(e)}")
            raise MailTransportError(str(e)) from e
        logger.info(f"Contact notification sent successfully to {self.recipient}")
