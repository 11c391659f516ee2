import logging
from typing import Optional

import httpx
from fastapi_mail import FastMail

from src.crud.mailchimpService import MailchimpClient
from .settings import Settings

logger = logging.getLogger(__name__)


def get_mailchimp_client(settings: Settings, http_client: httpx.AsyncClient) -> MailchimpClient:
    """Get configured Mailchimp Marketing API client"""
    if not settings.MAILCHIMP_API_KEY or not settings.MAILCHIMP_SERVER_PREFIX:
        logger.warning("⚠️ MAILCHIMP_API_KEY / MAILCHIMP_SERVER_PREFIX not set - Mailchimp calls will fail")
    return MailchimpClient(
        http_client=http_client,
        api_key=settings.MAILCHIMP_API_KEY,
        server_prefix=settings.MAILCHIMP_SERVER_PREFIX,
    )


def get_mailer(settings: Settings) -> Optional[FastMail]:
    """Get SMTP mailer, or None when the Gmail account is not configured"""
    if not settings.mail_configured:
        logger.warning("⚠️ GMAIL_USER / GMAIL_APP_PASSWORD not set - contact form emails disabled")
        return None
    return FastMail(settings.mail_config)
