"""SQLAlchemy ORM model for the BusinessInfo entity."""

from datetime import datetime, timezone

from sqlalchemy import DateTime, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from business_site.infrastructure.database.base import Base


class BusinessInfoModel(Base):
    """ORM model — maps to the 'business_info' table.

    ``singleton_key`` is unique; rows created through the upsert path carry
    the same key so concurrent first writes cannot produce two profiles.
    NULL keys are allowed, and several of them may coexist.
    """

    __tablename__ = "business_info"

    id: Mapped[int] = mapped_column(primary_key=True, autoincrement=True)
    business_name: Mapped[str] = mapped_column(String(255), nullable=False)
    tagline: Mapped[str] = mapped_column(String(255), nullable=False)
    about_text: Mapped[str] = mapped_column(Text, nullable=False)
    phone: Mapped[str] = mapped_column(String(50), nullable=False)
    email: Mapped[str] = mapped_column(String(320), nullable=False)
    address: Mapped[str] = mapped_column(Text, nullable=False)
    emergency_phone: Mapped[str | None] = mapped_column(String(50), nullable=True)
    years_experience: Mapped[int] = mapped_column(Integer, nullable=False)
    license_number: Mapped[str | None] = mapped_column(String(100), nullable=True)
    singleton_key: Mapped[str | None] = mapped_column(String(32), nullable=True, unique=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"<BusinessInfoModel(id={self.id}, business_name='{self.business_name}')>"
