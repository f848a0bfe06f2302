"""Unit tests for the ServiceCatalogService."""

import pytest
from pydantic import ValidationError

from business_site.application.interfaces import ServiceRepository
from business_site.application.schemas import ServiceCreate
from business_site.application.services import ServiceCatalogService
from business_site.domain.entities import QUOTE_ON_REQUEST, Service


class FakeServiceRepository(ServiceRepository):
    """In-memory fake repository for unit testing."""

    def __init__(self):
        self._services: list[Service] = []
        self._next_id = 1

    async def create(self, service: Service) -> Service:
        service.id = self._next_id
        self._next_id += 1
        self._services.append(service)
        return service

    async def get_all(self) -> list[Service]:
        return sorted(
            self._services,
            key=lambda s: (s.is_emergency, s.created_at),
            reverse=True,
        )


@pytest.fixture
def service() -> ServiceCatalogService:
    return ServiceCatalogService(FakeServiceRepository())


@pytest.mark.asyncio
async def test_create_service_copies_input(service: ServiceCatalogService):
    data = ServiceCreate(
        name="Drain Cleaning",
        description="Clear blocked drains",
        icon="droplet",
        price_range="$100-200",
        is_emergency=False,
    )
    created = await service.create_service(data)

    assert created.id is not None
    assert created.created_at is not None
    assert created.name == "Drain Cleaning"
    assert created.description == "Clear blocked drains"
    assert created.icon == "droplet"
    assert created.price_range == "$100-200"
    assert created.is_emergency is False


@pytest.mark.asyncio
async def test_create_service_keeps_null_price_range(service: ServiceCatalogService):
    data = ServiceCreate(
        name="Pipe Replacement",
        description="Whole-house repiping",
        icon="pipe",
        price_range=None,
        is_emergency=True,
    )
    created = await service.create_service(data)

    assert created.price_range is None
    assert created.display_price == QUOTE_ON_REQUEST
    assert created.is_emergency is True


@pytest.mark.asyncio
async def test_list_services_empty(service: ServiceCatalogService):
    assert await service.list_services() == []


def test_service_create_rejects_empty_name():
    with pytest.raises(ValidationError):
        ServiceCreate(name="", description="x", icon="y", price_range=None, is_emergency=False)


def test_service_create_requires_explicit_price_range():
    with pytest.raises(ValidationError):
        ServiceCreate(name="Leak Repair", description="x", icon="y", is_emergency=False)
