from datetime import datetime, timezone
from typing import Optional

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
import logging

from src.commonUtils.enumUtils import ErrorKind
from src.config.settings import Settings
from src.crud.contactService import ContactService
from src.dependencies.contact_dependencies import get_app_settings, get_contact_service
from src.schemas.contactSchema import ContactForm, ContactResponse

logger = logging.getLogger(__name__)
router = APIRouter()


@router.post("/send-email", response_model=ContactResponse, response_model_exclude_none=True)
async def send_email(
        form: Optional[ContactForm] = None,
        contact_service: ContactService = Depends(get_contact_service),
        settings: Settings = Depends(get_app_settings),
):
    """
    Relay a contact form submission: one notification to the admin address
    and one confirmation to the submitter.
    """
    logger.info(f"📩 [{datetime.now(timezone.utc).isoformat()}] POST /api/send-email")
    # An empty body is treated like {} so it reports the missing fields
    result = await contact_service.handle(form or ContactForm())

    if result.ok:
        return ContactResponse(success=True, message=result.message)

    status_code = 400 if result.error_kind == ErrorKind.VALIDATION else 500
    body = {"success": False, "message": result.message}

    # Provider detail only leaks to clients in development
    if status_code == 500 and settings.is_development and result.error_detail:
        body["error"] = result.error_detail

    return JSONResponse(status_code=status_code, content=body)
