from .service_repository import ServiceRepository
from .testimonial_repository import TestimonialRepository
from .contact_submission_repository import ContactSubmissionRepository
from .business_info_repository import BusinessInfoRepository

__all__ = [
    "ServiceRepository",
    "TestimonialRepository",
    "ContactSubmissionRepository",
    "BusinessInfoRepository",
]
