"""Concrete repository implementation for the BusinessInfo singleton backed by SQLAlchemy."""

from sqlalchemy import select
from sqlalchemy.dialects import postgresql, sqlite
from sqlalchemy.ext.asyncio import AsyncSession

from business_site.application.interfaces import BusinessInfoRepository
from business_site.domain.entities import BusinessInfo
from business_site.infrastructure.database.errors import store_errors
from business_site.infrastructure.database.models import BusinessInfoModel

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class SQLAlchemyBusinessInfoRepository(BusinessInfoRepository):
    """Implements the BusinessInfoRepository port using SQLAlchemy async sessions."""

    def __init__(self, session: AsyncSession):
        self._session = session

    def _to_entity(self, model: BusinessInfoModel) -> BusinessInfo:
        """Map ORM model → domain entity."""
        return BusinessInfo(
            id=model.id,
            business_name=model.business_name,
            tagline=model.tagline,
            about_text=model.about_text,
            phone=model.phone,
            email=model.email,
            address=model.address,
            emergency_phone=model.emergency_phone,
            years_experience=model.years_experience,
            license_number=model.license_number,
            singleton_key=model.singleton_key,
            updated_at=model.updated_at,
        )

    def _insert_values(self, entity: BusinessInfo) -> dict:
        return {
            "business_name": entity.business_name,
            "tagline": entity.tagline,
            "about_text": entity.about_text,
            "phone": entity.phone,
            "email": entity.email,
            "address": entity.address,
            "emergency_phone": entity.emergency_phone,
            "years_experience": entity.years_experience,
            "license_number": entity.license_number,
            "singleton_key": entity.singleton_key,
            "updated_at": entity.updated_at,
        }

    async def get_latest(self) -> BusinessInfo | None:
        stmt = (
            select(BusinessInfoModel)
            .order_by(BusinessInfoModel.updated_at.desc(), BusinessInfoModel.id.desc())
            .limit(1)
        )
        async with store_errors("BusinessInfo", "read latest"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def get_first(self) -> BusinessInfo | None:
        stmt = select(BusinessInfoModel).order_by(BusinessInfoModel.id.asc()).limit(1)
        async with store_errors("BusinessInfo", "read first"):
            result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()
        return self._to_entity(model) if model else None

    async def create_if_absent(self, info: BusinessInfo) -> BusinessInfo | None:
        dialect = self._session.get_bind().dialect.name
        dialect_insert = _UPSERT_INSERTS.get(dialect)
        if dialect_insert is None:
            raise NotImplementedError(f"Atomic upsert is not supported on '{dialect}'")

        stmt = (
            dialect_insert(BusinessInfoModel)
            .values(**self._insert_values(info))
            .on_conflict_do_nothing(index_elements=[BusinessInfoModel.singleton_key])
            .returning(BusinessInfoModel.id)
        )
        async with store_errors("BusinessInfo", "create"):
            result = await self._session.execute(stmt)
            new_id = result.scalar_one_or_none()
            if new_id is None:
                return None
            model = await self._session.get(BusinessInfoModel, new_id)
        return self._to_entity(model)

    async def update(self, info: BusinessInfo) -> BusinessInfo:
        async with store_errors("BusinessInfo", "update"):
            model = await self._session.get(BusinessInfoModel, info.id)
            if model is None:
                raise ValueError(f"BusinessInfo {info.id} not found in database")
            model.business_name = info.business_name
            model.tagline = info.tagline
            model.about_text = info.about_text
            model.phone = info.phone
            model.email = info.email
            model.address = info.address
            model.emergency_phone = info.emergency_phone
            model.years_experience = info.years_experience
            model.license_number = info.license_number
            model.updated_at = info.updated_at
            await self._session.flush()
        return self._to_entity(model)
