"""Service catalog endpoints."""

from fastapi import APIRouter, Depends, status

from business_site.application.schemas import ServiceCreate, ServiceResponse
from business_site.application.services import ServiceCatalogService
from business_site.infrastructure.dependencies import get_service_catalog_service

router = APIRouter(prefix="/services", tags=["Services"])


@router.get("", response_model=list[ServiceResponse])
async def list_services(
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> list[ServiceResponse]:
    """List all services, emergency services first, then newest first."""
    services = await service.list_services()
    return [ServiceResponse.model_validate(s, from_attributes=True) for s in services]


@router.post("", response_model=ServiceResponse, status_code=status.HTTP_201_CREATED)
async def create_service(
    data: ServiceCreate,
    service: ServiceCatalogService = Depends(get_service_catalog_service),
) -> ServiceResponse:
    """Add a service to the catalog."""
    created = await service.create_service(data)
    return ServiceResponse.model_validate(created, from_attributes=True)
