# src/commonUtils/emailUtil.py - Brevo transactional email client

from typing import Optional

import httpx
import logging

from src.commonUtils.enumUtils import ErrorKind
from src.schemas.emailSchema import OutboundEmail
from src.schemas.resultSchema import OperationResult

logger = logging.getLogger(__name__)


class BrevoEmailClient:
    """Sends transactional emails through the Brevo HTTP API."""

    def __init__(self, api_key: str, endpoint: str,
                 transport: Optional[httpx.AsyncBaseTransport] = None):
        self.api_key = api_key
        self.endpoint = endpoint
        # Tests swap in an httpx.MockTransport here
        self.transport = transport

    @property
    def headers(self) -> dict:
        return {
            "api-key": self.api_key,
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

    async def send_transactional_email(self, email: OutboundEmail) -> OperationResult:
        """
        Core email sending utility. Never raises for provider or network
        failures; the outcome is returned as an OperationResult.
        """
        recipient = email.to[0].email
        logger.info(f"📧 Sending email to {recipient} | Subject: {email.subject}")
        try:
            async with httpx.AsyncClient(transport=self.transport) as client:
                response = await client.post(
                    self.endpoint,
                    json=email.model_dump(),
                    headers=self.headers,
                )
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            detail = f"Brevo API error {e.response.status_code}: {e.response.text}"
            logger.error(f"Failed to send email to {recipient}: {detail}")
            return OperationResult.failure(ErrorKind.PROVIDER, "Brevo rejected the email", detail)
        except httpx.RequestError as e:
            detail = f"{e.__class__.__name__}: {e}"
            logger.error(f"Failed to reach Brevo while sending to {recipient}: {detail}")
            return OperationResult.failure(ErrorKind.PROVIDER, "Brevo is unreachable", detail)

        logger.info(f"Email sent successfully to {recipient}")
        return OperationResult.success("Email sent", data=_json_or_none(response))


def _json_or_none(response: httpx.Response) -> Optional[dict]:
    # Brevo answers 201 {"messageId": ...}; anything else is kept out of the result
    try:
        payload = response.json()
    except ValueError:
        return None
    return payload if isinstance(payload, dict) else None
