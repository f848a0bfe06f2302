from .service_repository import SQLAlchemyServiceRepository
from .testimonial_repository import SQLAlchemyTestimonialRepository
from .contact_submission_repository import SQLAlchemyContactSubmissionRepository
from .business_info_repository import SQLAlchemyBusinessInfoRepository

__all__ = [
    "SQLAlchemyServiceRepository",
    "SQLAlchemyTestimonialRepository",
    "SQLAlchemyContactSubmissionRepository",
    "SQLAlchemyBusinessInfoRepository",
]
