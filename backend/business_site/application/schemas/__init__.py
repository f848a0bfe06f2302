from .service import ServiceCreate, ServiceResponse
from .testimonial import TestimonialCreate, TestimonialResponse
from .contact_submission import ContactSubmissionCreate, ContactSubmissionResponse
from .business_info import BusinessInfoUpdate, BusinessInfoResponse

__all__ = [
    "ServiceCreate",
    "ServiceResponse",
    "TestimonialCreate",
    "TestimonialResponse",
    "ContactSubmissionCreate",
    "ContactSubmissionResponse",
    "BusinessInfoUpdate",
    "BusinessInfoResponse",
]
