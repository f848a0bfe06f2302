"""Unit tests for the TestimonialService."""

import pytest
from pydantic import ValidationError

from business_site.application.interfaces import TestimonialRepository
from business_site.application.schemas import TestimonialCreate
from business_site.application.services import TestimonialService
from business_site.domain.entities import Testimonial


class FakeTestimonialRepository(TestimonialRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._testimonials: list[Testimonial] = []
        self._next_id = 1

    async def create(self, testimonial: Testimonial) -> Testimonial:
        testimonial.id = self._next_id
        self._next_id += 1
        self._testimonials.append(testimonial)
        return testimonial

    async def get_all(self) -> list[Testimonial]:
        return sorted(
            self._testimonials, key=lambda t: (t.is_featured, t.rating), reverse=True
        )

    async def get_featured(self) -> list[Testimonial]:
        featured = [t for t in self._testimonials if t.is_featured]
        return sorted(featured, key=lambda t: (t.rating, t.created_at), reverse=True)


def _payload(**overrides) -> dict:
    payload = {
        "customer_name": "Maria G.",
        "rating": 5,
        "review_text": "Showed up within the hour.",
        "location": "Springfield",
        "service_type": "Leak Repair",
        "is_featured": True,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def service() -> TestimonialService:
    return TestimonialService(FakeTestimonialRepository())


@pytest.mark.asyncio
async def test_create_testimonial_copies_input(service: TestimonialService):
    created = await service.create_testimonial(TestimonialCreate(**_payload()))

    assert created.id is not None
    assert created.customer_name == "Maria G."
    assert created.rating == 5
    assert created.review_text == "Showed up within the hour."
    assert created.location == "Springfield"
    assert created.service_type == "Leak Repair"
    assert created.is_featured is True


@pytest.mark.asyncio
async def test_create_testimonial_keeps_nulls(service: TestimonialService):
    created = await service.create_testimonial(
        TestimonialCreate(**_payload(location=None, service_type=None, is_featured=False))
    )

    assert created.location is None
    assert created.service_type is None
    assert created.is_featured is False


@pytest.mark.asyncio
async def test_list_featured_only_returns_featured(service: TestimonialService):
    await service.create_testimonial(TestimonialCreate(**_payload(customer_name="A")))
    await service.create_testimonial(
        TestimonialCreate(**_payload(customer_name="B", is_featured=False))
    )

    featured = await service.list_featured_testimonials()
    assert [t.customer_name for t in featured] == ["A"]
    assert len(await service.list_testimonials()) == 2


@pytest.mark.parametrize("rating", [0, 6, -1])
def test_rating_out_of_range_rejected(rating: int):
    with pytest.raises(ValidationError):
        TestimonialCreate(**_payload(rating=rating))


@pytest.mark.parametrize("rating", [1, 5])
def test_rating_bounds_accepted(rating: int):
    assert TestimonialCreate(**_payload(rating=rating)).rating == rating
