from .product_repository import ProductRepository
from .contact_submission_repository import ContactSubmissionRepository
from .key_value_store import KeyValueStore

__all__ = [
    "ProductRepository",
    "ContactSubmissionRepository",
    "KeyValueStore",
]
