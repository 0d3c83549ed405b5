from typing import List

from pydantic import BaseModel, Field


class EmailContact(BaseModel):
    email: str
    name: str


class OutboundEmail(BaseModel):
    """Body of a Brevo transactional email request (POST /v3/smtp/email)."""
    sender: EmailContact
    to: List[EmailContact] = Field(..., min_length=1)
    subject: str
    htmlContent: str
