"""Domain entities for contact form leads."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class ContactStatus(str, Enum):
    """Triage states of a contact submission."""

    NEW = "new"
    CONTACTED = "contacted"
    QUOTED = "quoted"
    COMPLETED = "completed"
    CANCELLED = "cancelled"


@dataclass
class ContactSubmission:
    """Core domain entity: a lead captured through the contact form.

    Every submission starts as ``ContactStatus.NEW``; later triage states
    are set by staff outside of the intake flow.
    """

    name: str
    email: str
    phone: str
    message: str
    service_type: str | None = None
    is_emergency: bool = False
    status: ContactStatus = ContactStatus.NEW
    id: int | None = None
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
