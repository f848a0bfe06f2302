"""Domain entities — pure Python business objects, no framework dependencies."""

from dataclasses import dataclass, field
from datetime import datetime, timezone

QUOTE_ON_REQUEST = "Contact for quote"


@dataclass
class Service:
    """Core domain entity representing an offered service.

    A ``price_range`` of ``None`` means the price is quoted on request.
    """

    name: str
    description: str
    icon: str
    price_range: str | None = None
    is_emergency: bool = False
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @property
    def display_price(self) -> str:
        return self.price_range if self.price_range is not None else QUOTE_ON_REQUEST
