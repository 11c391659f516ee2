import logging

from fastapi import APIRouter, Depends, status

from src.commonUtils.exceptions import AudienceConflictError, ConfigurationError, MailchimpError
from src.commonUtils.responses import error_response
from src.crud.audienceService import NewsletterService
from src.crud.mailchimpService import MailchimpClient
from src.dependencies.relay_dependencies import get_mailchimp, get_newsletter_service
from src.schemas.newsletterSchema import SubscribeRequest

logger = logging.getLogger(__name__)
router = APIRouter()


@router.get("/ping")
async def ping_mailchimp(mailchimp: MailchimpClient = Depends(get_mailchimp)):
    """Verify the API key and server prefix by pinging Mailchimp."""
    try:
        response = await mailchimp.ping()
        return {
            "success": True,
            "message": "Successfully connected to Mailchimp!",
            "data": response,
        }
    except MailchimpError as e:
        logger.error(f"Mailchimp ping failed: {e.message}")
        return error_response(500, "Failed to connect to Mailchimp", e.message)


@router.post("/newsletter/subscribe", status_code=status.HTTP_201_CREATED)
async def subscribe_to_newsletter(
        payload: SubscribeRequest,
        newsletter: NewsletterService = Depends(get_newsletter_service),
):
    if not payload.email:
        return error_response(400, "Email is required")

    try:
        response = await newsletter.subscribe(payload.email, payload.first_name, payload.last_name)
        return {
            "success": True,
            "message": "Successfully subscribed to newsletter!",
            "status": response.get("status"),
        }
    except ConfigurationError as e:
        logger.error(f"Newsletter subscribe rejected: {e.message}")
        return error_response(500, e.message)
    except AudienceConflictError:
        return error_response(400, "This email is already subscribed to the newsletter")
    except MailchimpError as e:
        logger.error(f"Newsletter subscribe failed for {payload.email}: {e.message}")
        return error_response(500, "Failed to subscribe to newsletter", e.message)


@router.delete("/newsletter/unsubscribe/{email}")
async def unsubscribe_from_newsletter(
        email: str,
        newsletter: NewsletterService = Depends(get_newsletter_service),
):
    if not email.strip():
        return error_response(400, "Email is required")

    try:
        await newsletter.unsubscribe(email)
        return {
            "success": True,
            "message": "Successfully unsubscribed from newsletter",
        }
    except ConfigurationError as e:
        logger.error(f"Newsletter unsubscribe rejected: {e.message}")
        return error_response(500, e.message)
    except MailchimpError as e:
        logger.error(f"Newsletter unsubscribe failed for {email}: {e.message}")
        return error_response(500, "Failed to unsubscribe from newsletter", e.message)
