from typing import Optional

from fastapi import Depends, Request
from fastapi_mail import FastMail

from src.commonUtils.emailUtil import NotificationSender
from src.commonUtils.exceptions import ConfigurationError
from src.config.settings import Settings, get_settings
from src.crud.audienceService import AudienceEnrollmentService, NewsletterService
from src.crud.contactService import ContactRelayService
from src.crud.mailchimpService import MailchimpClient


# Collaborators are created once in the app lifespan and kept on app.state
def get_mailchimp(request: Request) -> MailchimpClient:
    mailchimp = getattr(request.app.state, "mailchimp", None)
    if mailchimp is None:
        raise ConfigurationError("Mailchimp client is not initialised")
    return mailchimp


def get_mailer(request: Request) -> Optional[FastMail]:
    return getattr(request.app.state, "mailer", None)


def get_newsletter_service(
        mailchimp: MailchimpClient = Depends(get_mailchimp),
        settings: Settings = Depends(get_settings),
) -> NewsletterService:
    return NewsletterService(mailchimp=mailchimp, list_id=settings.MAILCHIMP_AUDIENCE_ID)


def get_enrollment_service(
        mailchimp: MailchimpClient = Depends(get_mailchimp),
        settings: Settings = Depends(get_settings),
) -> AudienceEnrollmentService:
    return AudienceEnrollmentService(mailchimp=mailchimp, list_id=settings.MAILCHIMP_AUDIENCE_ID)


def get_notification_sender(
        mailer: Optional[FastMail] = Depends(get_mailer),
        settings: Settings = Depends(get_settings),
) -> NotificationSender:
    return NotificationSender(mailer=mailer, recipient=settings.contact_recipient)


def get_contact_relay_service(
        sender: NotificationSender = Depends(get_notification_sender),
        enrollment: AudienceEnrollmentService = Depends(get_enrollment_service),
) -> ContactRelayService:
    return ContactRelayService(sender=sender, enrollment=enrollment)
