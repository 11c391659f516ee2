import logging
from typing import Any

from fastapi import APIRouter, BackgroundTasks, Body, Depends

from src.commonUtils.exceptions import ConfigurationError, MailTransportError, SubmissionValidationError
from src.commonUtils.responses import error_response
from src.crud.contactService import ContactRelayService
from src.dependencies.relay_dependencies import get_contact_relay_service
from src.schemas.contactSchema import validate_contact_submission

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/contact")
async def submit_contact_form(
        background_tasks: BackgroundTasks,
        payload: Any = Body(None),
        relay: ContactRelayService = Depends(get_contact_relay_service),
):
    """
    Email the submission to the site owner, then add the submitter to the
    newsletter audience in the background.
    """
    try:
        form = validate_contact_submission(payload)
    except SubmissionValidationError as e:
        return error_response(
            400,
            "Validation error",
            errors=[error.model_dump() for error in e.errors],
        )

    try:
        await relay.submit(form, background_tasks)
    except (MailTransportError, ConfigurationError) as e:
        logger.error(f"Contact form error: {e.message}")
        return error_response(500, "Failed to submit contact form", e.message)

    return {
        "success": True,
        "message": "Contact form submitted successfully!",
    }
