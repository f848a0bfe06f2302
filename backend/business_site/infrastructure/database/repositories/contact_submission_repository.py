"""Concrete repository implementation for ContactSubmission backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from business_site.application.interfaces import ContactSubmissionRepository
from business_site.domain.entities import ContactSubmission
from business_site.infrastructure.database.errors import store_errors
from business_site.infrastructure.database.models import ContactSubmissionModel


class SQLAlchemyContactSubmissionRepository(ContactSubmissionRepository):
    """Implements the ContactSubmissionRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ContactSubmissionModel) -> ContactSubmission:
        """Map ORM model → domain entity."""
        return ContactSubmission(
            id=model.id,
            name=model.name,
            email=model.email,
            phone=model.phone,
            service_type=model.service_type,
            message=model.message,
            is_emergency=model.is_emergency,
            status=model.status,
            created_at=model.created_at,
        )

    def _to_model(self, entity: ContactSubmission) -> ContactSubmissionModel:
        """Map domain entity → ORM model (for creation)."""
        return ContactSubmissionModel(
            name=entity.name,
            email=entity.email,
            phone=entity.phone,
            service_type=entity.service_type,
            message=entity.message,
            is_emergency=entity.is_emergency,
            status=entity.status,
        )

    async def create(self, submission: ContactSubmission) -> ContactSubmission:
        model = self._to_model(submission)
        async with store_errors("ContactSubmission", "create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def get_all(self) -> list[ContactSubmission]:
        stmt = select(ContactSubmissionModel).order_by(
            ContactSubmissionModel.is_emergency.desc(),
            ContactSubmissionModel.created_at.desc(),
        )
        async with store_errors("ContactSubmission", "list"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
