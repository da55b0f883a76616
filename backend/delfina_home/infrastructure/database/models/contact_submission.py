"""SQLAlchemy ORM model for the ContactSubmission entity."""

from datetime import datetime, timezone

from sqlalchemy import Boolean, DateTime, Index, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from delfina_home.infrastructure.database.base import Base


class ContactSubmissionModel(Base):
    """ORM model: maps to the 'contact_submissions' table."""

    __tablename__ = "contact_submissions"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False)
    message: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )
    read: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    __table_args__ = (
        Index("ix_contact_submissions_date", "date"),
    )

    def __repr__(self) -> str:
        return f"<ContactSubmissionModel(id={self.id}, email='{self.email}', read={self.read})>"
