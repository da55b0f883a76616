"""Domain entities for the furniture catalog."""

import re
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from uuid import uuid4

from delfina_home.domain.entities.localized import Language, LocalizedString

UUID_PATTERN = re.compile(
    r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$",
    re.IGNORECASE,
)

DEFAULT_PRICE = "On Request"


class Category(str, Enum):
    """Catalog categories in their canonical (Albanian) form."""

    LIVING_ROOM = "Dhoma e Ditës"
    KITCHENS = "Kuzhinat"
    BEDROOMS = "Dhomat e Gjumit"

    @property
    def english_label(self) -> str:
        return _ENGLISH_LABELS[self]


_ENGLISH_LABELS = {
    Category.LIVING_ROOM: "Living Room",
    Category.KITCHENS: "Kitchens",
    Category.BEDROOMS: "Bedrooms",
}


def category_label(category: str, language: Language) -> str:
    """Display label for a category; unknown values are shown as stored."""
    try:
        known = Category(category)
    except ValueError:
        return category
    return known.english_label if Language(language) is Language.EN else known.value


def is_valid_product_id(value: str | None) -> bool:
    return bool(value) and UUID_PATTERN.match(value) is not None


def now_millis() -> int:
    return int(datetime.now(timezone.utc).timestamp() * 1000)


@dataclass
class ProductSpecifications:
    dimensions: LocalizedString = field(default_factory=LocalizedString)
    materials: LocalizedString = field(default_factory=LocalizedString)


@dataclass
class Product:
    """Catalog entry. ``images[0]`` is the cover image shown in listings."""

    id: str = field(default_factory=lambda: str(uuid4()))
    title: LocalizedString = field(default_factory=LocalizedString)
    description: LocalizedString = field(default_factory=LocalizedString)
    specifications: ProductSpecifications = field(default_factory=ProductSpecifications)
    price: str = DEFAULT_PRICE
    category: str = Category.LIVING_ROOM.value
    images: list[str] = field(default_factory=list)
    is_featured: bool = False
    is_visible: bool = True
    created_at: int = field(default_factory=now_millis)

    @property
    def thumbnail(self) -> str | None:
        return self.images[0] if self.images else None
