from .localized import DEFAULT_LANGUAGE, Language, LocalizedString
from .product import (
    DEFAULT_PRICE,
    Category,
    Product,
    ProductSpecifications,
    category_label,
    is_valid_product_id,
    now_millis,
)
from .contact_submission import ContactSubmission
from .admin_session import AdminSession, AuthEvent
from .image_upload import ImageUpload

__all__ = [
    "DEFAULT_LANGUAGE",
    "Language",
    "LocalizedString",
    "DEFAULT_PRICE",
    "Category",
    "Product",
    "ProductSpecifications",
    "category_label",
    "is_valid_product_id",
    "now_millis",
    "ContactSubmission",
    "AdminSession",
    "AuthEvent",
    "ImageUpload",
]
