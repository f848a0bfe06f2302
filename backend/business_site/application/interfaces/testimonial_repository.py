"""Abstract repository interface (port) for Testimonial persistence."""

from abc import ABC, abstractmethod

from business_site.domain.entities import Testimonial


class TestimonialRepository(ABC):
    """Port for testimonial persistence — implemented in the infrastructure layer."""

    @abstractmethod
    async def create(self, testimonial: Testimonial) -> Testimonial:
        """Persist a new testimonial and return it."""
        ...

    @abstractmethod
    async def get_all(self) -> list[Testimonial]:
        """Retrieve all testimonials, featured first, then by rating (highest first)."""
        ...

    @abstractmethod
    async def get_featured(self) -> list[Testimonial]:
        """Retrieve featured testimonials ordered by rating, then newest first."""
        ...
