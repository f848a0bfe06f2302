"""Pydantic DTOs (Data Transfer Objects) for the Testimonial feature."""

from datetime import datetime

from pydantic import BaseModel, Field

from business_site.domain.entities import MAX_RATING, MIN_RATING


class TestimonialCreate(BaseModel):
    """Schema for creating a new testimonial."""

    customer_name: str = Field(..., min_length=1, max_length=255, examples=["Jane D."])
    rating: int = Field(..., ge=MIN_RATING, le=MAX_RATING, examples=[5])
    review_text: str = Field(..., min_length=1, examples=["Fixed our leak in under an hour."])
    location: str | None = Field(..., max_length=255, examples=["Springfield"])
    service_type: str | None = Field(..., max_length=255, examples=["Leak Repair"])
    is_featured: bool = Field(..., examples=[True])


class TestimonialResponse(BaseModel):
    """Schema returned to the client."""

    id: int
    customer_name: str
    rating: int
    review_text: str
    location: str | None
    service_type: str | None
    is_featured: bool
    created_at: datetime

    model_config = {"from_attributes": True}
