"""V1 API router — aggregates all v1 endpoint routers."""

from fastapi import APIRouter

from business_site.presentation.api.v1.endpoints.health import router as health_router
from business_site.presentation.api.v1.endpoints.services import router as services_router
from business_site.presentation.api.v1.endpoints.testimonials import router as testimonials_router
from business_site.presentation.api.v1.endpoints.contact import router as contact_router
from business_site.presentation.api.v1.endpoints.business_info import router as business_info_router

router = APIRouter(prefix="/v1")
router.include_router(health_router)
router.include_router(services_router)
router.include_router(testimonials_router)
router.include_router(contact_router)
router.include_router(business_info_router)
