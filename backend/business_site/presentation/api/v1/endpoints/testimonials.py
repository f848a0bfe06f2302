"""Testimonial endpoints."""

from fastapi import APIRouter, Depends, status

from business_site.application.schemas import TestimonialCreate, TestimonialResponse
from business_site.application.services import TestimonialService
from business_site.infrastructure.dependencies import get_testimonial_service

router = APIRouter(prefix="/testimonials", tags=["Testimonials"])


@router.get("", response_model=list[TestimonialResponse])
async def list_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
) -> list[TestimonialResponse]:
    """List all testimonials, featured first, then by rating."""
    testimonials = await service.list_testimonials()
    return [TestimonialResponse.model_validate(t, from_attributes=True) for t in testimonials]


@router.get("/featured", response_model=list[TestimonialResponse])
async def list_featured_testimonials(
    service: TestimonialService = Depends(get_testimonial_service),
) -> list[TestimonialResponse]:
    """List featured testimonials by rating, newest first within a rating."""
    testimonials = await service.list_featured_testimonials()
    return [TestimonialResponse.model_validate(t, from_attributes=True) for t in testimonials]


@router.post("", response_model=TestimonialResponse, status_code=status.HTTP_201_CREATED)
async def create_testimonial(
    data: TestimonialCreate,
    service: TestimonialService = Depends(get_testimonial_service),
) -> TestimonialResponse:
    """Record a customer testimonial."""
    testimonial = await service.create_testimonial(data)
    return TestimonialResponse.model_validate(testimonial, from_attributes=True)
