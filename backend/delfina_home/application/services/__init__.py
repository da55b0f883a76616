from .storage_gateway import StorageGateway
from .language_context import LanguageContext
from .catalog_service import CatalogService
from .product_editor import ProductEditor
from .admin_dashboard_service import AdminDashboardService, CommitResult, DashboardSnapshot, DraftRegistry
from .contact_form import ContactForm
from .auth_service import AuthService, AuthSubscription

__all__ = [
    "StorageGateway",
    "LanguageContext",
    "CatalogService",
    "ProductEditor",
    "AdminDashboardService",
    "CommitResult",
    "DashboardSnapshot",
    "DraftRegistry",
    "ContactForm",
    "AuthService",
    "AuthSubscription",
]
