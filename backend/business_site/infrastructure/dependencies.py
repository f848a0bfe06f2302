"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from business_site.application.services import (
    BusinessProfileService,
    ContactIntakeService,
    ServiceCatalogService,
    TestimonialService,
)
from business_site.infrastructure.database.session import get_db_session
from business_site.infrastructure.database.repositories import (
    SQLAlchemyBusinessInfoRepository,
    SQLAlchemyContactSubmissionRepository,
    SQLAlchemyServiceRepository,
    SQLAlchemyTestimonialRepository,
)


async def get_service_catalog_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ServiceCatalogService, None]:
    """Provides a ServiceCatalogService instance with its repository wired up."""
    repository = SQLAlchemyServiceRepository(session)
    yield ServiceCatalogService(repository)


async def get_testimonial_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[TestimonialService, None]:
    """Provides a TestimonialService instance with its repository wired up."""
    repository = SQLAlchemyTestimonialRepository(session)
    yield TestimonialService(repository)


async def get_contact_intake_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[ContactIntakeService, None]:
    """Provides a ContactIntakeService instance with its repository wired up."""
    repository = SQLAlchemyContactSubmissionRepository(session)
    yield ContactIntakeService(repository)


async def get_business_profile_service(
    session: AsyncSession = Depends(get_db_session),
) -> AsyncGenerator[BusinessProfileService, None]:
    """Provides a BusinessProfileService instance with its repository wired up."""
    repository = SQLAlchemyBusinessInfoRepository(session)
    yield BusinessProfileService(repository)
