from pydantic import BaseModel, Field
from typing import Optional


class ContactForm(BaseModel):
    """Contact form submission.

    Every field is optional at the schema level so that missing required fields
    are reported by ContactService with the documented 400 message instead of a
    framework validation error.
    """
    name: Optional[str] = Field(None, description="Submitter's full name (required)")
    email: Optional[str] = Field(None, description="Submitter's email address (required)")
    phone: Optional[str] = Field(None, description="Contact phone number")
    company: Optional[str] = Field(None, description="Company or trading name")
    requirements: Optional[str] = Field(None, description="Free text, may contain line breaks (required)")
    budget: Optional[str] = Field(None, description="Budget range")
    timeline: Optional[str] = Field(None, description="Expected timeline")


class ContactResponse(BaseModel):
    success: bool
    message: str
    error: Optional[str] = None


class HealthResponse(BaseModel):
    status: str = "ok"
    message: str = "Server is running"
