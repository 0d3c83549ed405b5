from fastapi import Depends, Request

from src.commonUtils.email_renderer import EmailRenderer
from src.commonUtils.emailUtil import BrevoEmailClient
from src.config.settings import Settings
from src.crud.contactService import ContactService


def get_app_settings(request: Request) -> Settings:
    """Settings validated at startup and attached to the app"""
    return request.app.state.settings


def get_email_client(request: Request) -> BrevoEmailClient:
    return request.app.state.email_client


def get_email_renderer(settings: Settings = Depends(get_app_settings)) -> EmailRenderer:
    return EmailRenderer(
        sender_email=settings.BREVO_SENDER_EMAIL,
        sender_name=settings.BREVO_SENDER_NAME,
        admin_email=settings.BREVO_ADMIN_EMAIL,
    )


def get_contact_service(
        email_client: BrevoEmailClient = Depends(get_email_client),
        renderer: EmailRenderer = Depends(get_email_renderer),
) -> ContactService:
    return ContactService(email_client=email_client, renderer=renderer)
