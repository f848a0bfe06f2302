"""Pydantic DTOs for the business profile."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field


class BusinessInfoUpdate(BaseModel):
    """Schema for updating the business profile. All fields are optional.

    Only fields present in the payload are applied. An explicit ``null`` for
    ``emergency_phone`` or ``license_number`` clears the stored value.
    """

    business_name: str | None = Field(None, min_length=1, max_length=255)
    tagline: str | None = Field(None, max_length=255)
    about_text: str | None = None
    phone: str | None = Field(None, max_length=50)
    email: EmailStr | None = None
    address: str | None = None
    emergency_phone: str | None = Field(None, max_length=50)
    years_experience: int | None = Field(None, ge=0)
    license_number: str | None = Field(None, max_length=100)

    def provided_fields(self) -> dict:
        """Return only the fields the caller actually sent.

        Explicit nulls on non-nullable columns are dropped.
        """
        nullable = {"emergency_phone", "license_number"}
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in nullable
        }


class BusinessInfoResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    business_name: str
    tagline: str
    about_text: str
    phone: str
    email: str
    address: str
    emergency_phone: str | None
    years_experience: int
    license_number: str | None
    updated_at: datetime

    model_config = {"from_attributes": True}
