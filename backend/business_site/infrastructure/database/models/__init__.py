from .service import ServiceModel
from .testimonial import TestimonialModel
from .contact_submission import ContactSubmissionModel
from .business_info import BusinessInfoModel

__all__ = [
    "ServiceModel",
    "TestimonialModel",
    "ContactSubmissionModel",
    "BusinessInfoModel",
]
