"""Pydantic DTOs for contact form intake.

``ContactSubmissionCreate`` deliberately has no ``status`` field: new leads
always start as ``new``. Unknown keys in the payload are ignored.
"""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field

from business_site.domain.entities import ContactStatus


class ContactSubmissionCreate(BaseModel):
    """Schema for a contact form submission."""

    name: str = Field(..., min_length=1, max_length=255, examples=["John Smith"])
    email: EmailStr = Field(..., examples=["john@example.com"])
    phone: str = Field(..., min_length=1, max_length=50, examples=["(555) 010-2030"])
    service_type: str | None = Field(..., max_length=255, examples=["Water Heater"])
    message: str = Field(..., min_length=1, examples=["Water heater is leaking."])
    is_emergency: bool = False


class ContactSubmissionResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    email: str
    phone: str
    service_type: str | None
    message: str
    is_emergency: bool
    status: ContactStatus
    created_at: datetime

    model_config = {"from_attributes": True}
