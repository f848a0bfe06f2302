"""Domain entity: a customer review shown on the site."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

MIN_RATING = 1
MAX_RATING = 5


@dataclass
class Testimonial:
    """Core domain entity representing a customer testimonial."""

    customer_name: str
    rating: int          # 1 – 5 stars
    review_text: str
    location: str | None = None
    service_type: str | None = None
    is_featured: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
