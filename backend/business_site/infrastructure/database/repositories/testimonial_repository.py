"""Concrete repository implementation for Testimonial backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from business_site.application.interfaces import TestimonialRepository
from business_site.domain.entities import Testimonial
from business_site.infrastructure.database.errors import store_errors
from business_site.infrastructure.database.models import TestimonialModel


class SQLAlchemyTestimonialRepository(TestimonialRepository):
    """Implements the TestimonialRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: TestimonialModel) -> Testimonial:
        """Map ORM model → domain entity."""
        return Testimonial(
            id=model.id,
            customer_name=model.customer_name,
            rating=model.rating,
            review_text=model.review_text,
            location=model.location,
            service_type=model.service_type,
            is_featured=model.is_featured,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Testimonial) -> TestimonialModel:
        """Map domain entity → ORM model (for creation)."""
        return TestimonialModel(
            customer_name=entity.customer_name,
            rating=entity.rating,
            review_text=entity.review_text,
            location=entity.location,
            service_type=entity.service_type,
            is_featured=entity.is_featured,
        )

    async def create(self, testimonial: Testimonial) -> Testimonial:
        model = self._to_model(testimonial)
        async with store_errors("Testimonial", "create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def get_all(self) -> list[Testimonial]:
        # Rating, not recency, breaks ties within the featured/non-featured groups.
        stmt = select(TestimonialModel).order_by(
            TestimonialModel.is_featured.desc(),
            TestimonialModel.rating.desc(),
        )
        async with store_errors("Testimonial", "list"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]

    async def get_featured(self) -> list[Testimonial]:
        stmt = (
            select(TestimonialModel)
            .where(TestimonialModel.is_featured.is_(True))
            .order_by(
                TestimonialModel.rating.desc(),
                TestimonialModel.created_at.desc(),
            )
        )
        async with store_errors("Testimonial", "list featured"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
