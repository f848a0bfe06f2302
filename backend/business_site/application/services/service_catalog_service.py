"""Application service (use case) for the service catalog."""

from business_site.application.interfaces import ServiceRepository
from business_site.application.schemas import ServiceCreate
from business_site.domain.entities import Service


class ServiceCatalogService:
    """Orchestrates service catalog logic. Depends on the repository port (DI)."""

    def __init__(self, repository: ServiceRepository):
        self._repository = repository

    async def list_services(self) -> list[Service]:
        return await self._repository.get_all()

    async def create_service(self, data: ServiceCreate) -> Service:
        service = Service(
            name=data.name,
            description=data.description,
            icon=data.icon,
            price_range=data.price_range,
            is_emergency=data.is_emergency,
        )
        return await self._repository.create(service)
