from .product_repository import SQLAlchemyProductRepository
from .contact_submission_repository import SQLAlchemyContactSubmissionRepository

__all__ = [
    "SQLAlchemyProductRepository",
    "SQLAlchemyContactSubmissionRepository",
]
