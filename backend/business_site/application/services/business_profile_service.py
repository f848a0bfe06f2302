"""Application service (use case) for the business profile singleton."""

import logging

from business_site.application.interfaces import BusinessInfoRepository
from business_site.application.schemas import BusinessInfoUpdate
from business_site.domain.entities import BusinessInfo

logger = logging.getLogger(__name__)


class BusinessProfileService:
    """Reads and upserts the business profile.

    Reads return the most recently updated row; writes target the row with
    the lowest id. The two rules differ when several rows exist.
    """

    def __init__(self, repository: BusinessInfoRepository):
        self._repository = repository

    async def get_business_info(self) -> BusinessInfo | None:
        return await self._repository.get_latest()

    async def update_business_info(self, data: BusinessInfoUpdate) -> BusinessInfo:
        """Apply a partial update, creating the profile from defaults when none exists."""
        changes = data.provided_fields()

        existing = await self._repository.get_first()
        if existing is None:
            created = await self._repository.create_if_absent(
                BusinessInfo.with_defaults(**changes)
            )
            if created is not None:
                logger.info("Created business profile #%s", created.id)
                return created

            # Another writer created the singleton between our read and insert.
            logger.info("Business profile created concurrently, applying update instead")
            existing = await self._repository.get_first()
            if existing is None:
                raise RuntimeError("Business profile insert conflicted but no row is visible")

        existing.update(**changes)
        updated = await self._repository.update(existing)
        logger.info(
            "Updated business profile #%s (fields: %s)",
            updated.id, ", ".join(sorted(changes)) or "none",
        )
        return updated
