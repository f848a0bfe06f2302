from .service_catalog_service import ServiceCatalogService
from .testimonial_service import TestimonialService
from .contact_intake_service import ContactIntakeService
from .business_profile_service import BusinessProfileService

__all__ = [
    "ServiceCatalogService",
    "TestimonialService",
    "ContactIntakeService",
    "BusinessProfileService",
]
