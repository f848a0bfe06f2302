"""Application service (use case) for Testimonial operations."""

from business_site.application.interfaces import TestimonialRepository
from business_site.application.schemas import TestimonialCreate
from business_site.domain.entities import Testimonial


class TestimonialService:
    """Orchestrates testimonial logic. Rating bounds are enforced by the DTO."""

    def __init__(self, repository: TestimonialRepository):
        self._repository = repository

    async def list_testimonials(self) -> list[Testimonial]:
        return await self._repository.get_all()

    async def list_featured_testimonials(self) -> list[Testimonial]:
        return await self._repository.get_featured()

    async def create_testimonial(self, data: TestimonialCreate) -> Testimonial:
        testimonial = Testimonial(
            customer_name=data.customer_name,
            rating=data.rating,
            review_text=data.review_text,
            location=data.location,
            service_type=data.service_type,
            is_featured=data.is_featured,
        )
        return await self._repository.create(testimonial)
