"""Pydantic DTOs (Data Transfer Objects) for the service catalog."""

from datetime import datetime

from pydantic import BaseModel, Field


class ServiceCreate(BaseModel):
    """Schema for creating a new service."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Drain Cleaning"])
    description: str = Field(..., min_length=1, examples=["Fast, thorough clearing of blocked drains."])
    icon: str = Field(..., min_length=1, max_length=100, examples=["wrench"])
    price_range: str | None = Field(
        ..., max_length=100, examples=["$100-200"],
        description="Null means 'Contact for quote'",
    )
    is_emergency: bool = Field(..., examples=[False])


class ServiceResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    name: str
    description: str
    icon: str
    price_range: str | None
    is_emergency: bool
    created_at: datetime

    model_config = {"from_attributes": True}
