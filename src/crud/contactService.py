import logging
import re
from typing import List, Optional

from src.commonUtils.email_renderer import EmailRenderer
from src.commonUtils.emailUtil import BrevoEmailClient
from src.commonUtils.enumUtils import ErrorKind
from src.schemas.contactSchema import ContactForm
from src.schemas.resultSchema import OperationResult

logger = logging.getLogger(__name__)

# Coarse local@domain.tld check, not RFC 5322
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

MISSING_FIELDS_MESSAGE = "Missing required fields: name, email, requirements"
INVALID_EMAIL_MESSAGE = "Invalid email format"
SEND_FAILED_MESSAGE = "Failed to send email. Please try again later."
SEND_OK_MESSAGE = "Emails sent successfully!"


def _is_missing(value: Optional[str]) -> bool:
    # Empty counts as missing; whitespace is left for the email check to reject
    return not value


def _message_id(outcome: OperationResult) -> Optional[str]:
    return (outcome.data or {}).get("messageId")


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.fullmatch(email) is not None


class ContactService:
    """Validates a contact form submission and relays it as two emails."""

    def __init__(self, email_client: BrevoEmailClient, renderer: EmailRenderer):
        self.email_client = email_client
        self.renderer = renderer

    def validate(self, form: ContactForm) -> Optional[OperationResult]:
        """Return a validation failure, or None when the form can be sent."""
        if _is_missing(form.name) or _is_missing(form.email) or _is_missing(form.requirements):
            return OperationResult.failure(ErrorKind.VALIDATION, MISSING_FIELDS_MESSAGE)

        if not is_valid_email(form.email):
            return OperationResult.failure(ErrorKind.VALIDATION, INVALID_EMAIL_MESSAGE)

        return None

    async def handle(self, form: ContactForm) -> OperationResult:
        logger.info(f"📨 From: {form.email} | Name: {form.name}")

        invalid = self.validate(form)
        if invalid is not None:
            logger.info(f"Rejected submission: {invalid.message}")
            return invalid

        # Admin first, then the submitter. Both are attempted either way.
        outcomes: List[OperationResult] = []
        for outbound in (self.renderer.admin_notification_email(form),
                         self.renderer.user_confirmation_email(form)):
            outcome = await self.email_client.send_transactional_email(outbound)
            if outcome.ok:
                logger.info(f"Brevo accepted email to {outbound.to[0].email} | messageId: {_message_id(outcome)}")
            outcomes.append(outcome)

        failures = [outcome for outcome in outcomes if not outcome.ok]
        if failures:
            detail = failures[0].error_detail or failures[0].message
            logger.error(f"Email sending error ({len(failures)} of {len(outcomes)} failed): {detail}")
            return OperationResult.failure(ErrorKind.PROVIDER, SEND_FAILED_MESSAGE, detail)

        return OperationResult.success(
            SEND_OK_MESSAGE,
            data={"messageIds": [_message_id(outcome) for outcome in outcomes]},
        )
