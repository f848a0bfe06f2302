"""Concrete repository implementation backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from business_site.application.interfaces import ServiceRepository
from business_site.domain.entities import Service
from business_site.infrastructure.database.errors import store_errors
from business_site.infrastructure.database.models import ServiceModel


class SQLAlchemyServiceRepository(ServiceRepository):
    """Implements the ServiceRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: ServiceModel) -> Service:
        """Map ORM model → domain entity."""
        return Service(
            id=model.id,
            name=model.name,
            description=model.description,
            icon=model.icon,
            price_range=model.price_range,
            is_emergency=model.is_emergency,
            created_at=model.created_at,
        )

    def _to_model(self, entity: Service) -> ServiceModel:
        """Map domain entity → ORM model (for creation). The store assigns id and created_at."""
        return ServiceModel(
            name=entity.name,
            description=entity.description,
            icon=entity.icon,
            price_range=entity.price_range,
            is_emergency=entity.is_emergency,
        )

    async def create(self, service: Service) -> Service:
        model = self._to_model(service)
        async with store_errors("Service", "create"):
            self._session.add(model)
            await self._session.flush()
        return self._to_entity(model)

    async def get_all(self) -> list[Service]:
        stmt = select(ServiceModel).order_by(
            ServiceModel.is_emergency.desc(),
            ServiceModel.created_at.desc(),
        )
        async with store_errors("Service", "list"):
            result = await self._session.execute(stmt)
        return [self._to_entity(row) for row in result.scalars().all()]
