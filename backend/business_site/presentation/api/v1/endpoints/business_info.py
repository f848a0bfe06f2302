"""Business profile endpoints."""

from fastapi import APIRouter, Depends

from business_site.application.schemas import BusinessInfoResponse, BusinessInfoUpdate
from business_site.application.services import BusinessProfileService
from business_site.infrastructure.dependencies import get_business_profile_service

router = APIRouter(prefix="/business-info", tags=["Business Info"])


@router.get("", response_model=BusinessInfoResponse | None)
async def get_business_info(
    service: BusinessProfileService = Depends(get_business_profile_service),
) -> BusinessInfoResponse | None:
    """Retrieve the current business profile, or null if none has been set up."""
    info = await service.get_business_info()
    if info is None:
        return None
    return BusinessInfoResponse.model_validate(info, from_attributes=True)


@router.put("", response_model=BusinessInfoResponse)
async def update_business_info(
    data: BusinessInfoUpdate,
    service: BusinessProfileService = Depends(get_business_profile_service),
) -> BusinessInfoResponse:
    """Partially update the business profile, creating it from defaults if missing."""
    info = await service.update_business_info(data)
    return BusinessInfoResponse.model_validate(info, from_attributes=True)
