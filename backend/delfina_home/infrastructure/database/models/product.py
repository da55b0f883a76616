"""SQLAlchemy ORM model for the Product entity."""

from datetime import datetime, timezone

from sqlalchemy import JSON, Boolean, DateTime, Index, String, Text
from sqlalchemy.dialects import postgresql
from sqlalchemy.orm import Mapped, mapped_column

from delfina_home.infrastructure.database.base import Base

# text[] on PostgreSQL, JSON elsewhere (SQLite has no array type).
_ImageList = JSON().with_variant(postgresql.ARRAY(Text), "postgresql")


class ProductModel(Base):
    """ORM model: maps to the 'products' table.

    Localized fields are stored flat, one column per language.
    """

    __tablename__ = "products"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title_sq: Mapped[str] = mapped_column(Text, nullable=False, default="")
    title_en: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description_sq: Mapped[str] = mapped_column(Text, nullable=False, default="")
    description_en: Mapped[str] = mapped_column(Text, nullable=False, default="")
    dimensions_sq: Mapped[str] = mapped_column(Text, nullable=False, default="")
    dimensions_en: Mapped[str] = mapped_column(Text, nullable=False, default="")
    materials_sq: Mapped[str] = mapped_column(Text, nullable=False, default="")
    materials_en: Mapped[str] = mapped_column(Text, nullable=False, default="")
    price: Mapped[str] = mapped_column(String(255), nullable=False, default="On Request")
    category: Mapped[str] = mapped_column(String(100), nullable=False)
    images: Mapped[list[str]] = mapped_column(_ImageList, nullable=False, default=list)
    is_featured: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    is_visible: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=lambda: datetime.now(timezone.utc),
        nullable=False,
    )

    __table_args__ = (
        Index("ix_products_created_at", "created_at"),
    )

    def __repr__(self) -> str:
        return f"<ProductModel(id={self.id}, title_en='{self.title_en}')>"
