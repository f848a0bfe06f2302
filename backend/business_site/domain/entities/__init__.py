from .service import Service, QUOTE_ON_REQUEST
from .testimonial import Testimonial, MIN_RATING, MAX_RATING
from .contact_submission import ContactSubmission, ContactStatus
from .business_info import (
    BusinessInfo,
    DEFAULT_BUSINESS_PROFILE,
    PROFILE_FIELDS,
    SINGLETON_KEY,
)

__all__ = [
    "Service",
    "QUOTE_ON_REQUEST",
    "Testimonial",
    "MIN_RATING",
    "MAX_RATING",
    "ContactSubmission",
    "ContactStatus",
    "BusinessInfo",
    "DEFAULT_BUSINESS_PROFILE",
    "PROFILE_FIELDS",
    "SINGLETON_KEY",
]
