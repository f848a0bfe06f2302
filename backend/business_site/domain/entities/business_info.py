"""Domain entity: the business profile displayed across the site."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

# Key carried by the profile row created through the upsert path.
SINGLETON_KEY = "primary"

# Fallback identity used when the first profile is created from a partial update.
DEFAULT_BUSINESS_PROFILE: dict[str, Any] = {
    "business_name": "Reliable Plumbing Services",
    "tagline": "Your Trusted Local Plumber",
    "about_text": "We provide reliable plumbing services with over 15 years of experience.",
    "phone": "(555) 123-4567",
    "email": "info@reliableplumbing.com",
    "address": "123 Main St, City, State",
    "emergency_phone": None,
    "years_experience": 15,
    "license_number": None,
}

PROFILE_FIELDS = tuple(DEFAULT_BUSINESS_PROFILE)


@dataclass
class BusinessInfo:
    """Core domain entity for the business profile.

    Treated as a singleton: readers pick the most recently updated row,
    writers target the row with the lowest id.
    """

    business_name: str
    tagline: str
    about_text: str
    phone: str
    email: str
    address: str
    years_experience: int
    emergency_phone: str | None = None
    license_number: str | None = None
    id: int | None = None
    singleton_key: str | None = None
    updated_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @classmethod
    def with_defaults(cls, **overrides: Any) -> "BusinessInfo":
        """Build a profile from DEFAULT_BUSINESS_PROFILE overlaid with ``overrides``."""
        values = {**DEFAULT_BUSINESS_PROFILE, **overrides}
        return cls(**values, singleton_key=SINGLETON_KEY)

    def update(self, **changes: Any) -> None:
        """Apply the given profile fields and refresh the updated_at timestamp."""
        for name, value in changes.items():
            if name not in PROFILE_FIELDS:
                raise AttributeError(f"BusinessInfo has no profile field '{name}'")
            setattr(self, name, value)
        self.updated_at = datetime.now(timezone.utc)
