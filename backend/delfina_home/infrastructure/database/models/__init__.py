from .product import ProductModel
from .contact_submission import ContactSubmissionModel

__all__ = [
    "ProductModel",
    "ContactSubmissionModel",
]
