"""SQLAlchemy ORM model for the ContactSubmission entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Enum as SAEnum, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from business_site.domain.entities import ContactStatus
from business_site.infrastructure.database.base import Base


class ContactSubmissionModel(Base):
    """ORM model — maps to the 'contact_submissions' table."""

    __tablename__ = "contact_submissions"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    service_type: Mapped[str | None] = mapped_column(String(255), nullable=True)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    is_emergency: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    status: Mapped[ContactStatus] = mapped_column(
        SAEnum(
            ContactStatus,
            name="contact_status",
            values_callable=lambda enum: [member.value for member in enum],
        ),
        nullable=False,
        default=ContactStatus.NEW,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_contact_submissions_triage", "is_emergency", "created_at"),
    )

    def __repr__(self) -> str:
        return (
            f"<ContactSubmissionModel(id={self.id}, name='{self.name}', "
            f"emergency={self.is_emergency}, status='{self.status}')>"
        )
