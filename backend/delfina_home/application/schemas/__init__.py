from .product import (
    LocalizedStringSchema,
    ProductSpecificationsSchema,
    ProductResponse,
    ProductDraftResponse,
    ProductDraftUpdate,
    ImageReorderRequest,
    DragEventRequest,
)
from .contact import ContactFormRequest, ContactFormState, ContactSubmissionResponse
from .auth import LoginRequest, SessionResponse
from .pages import (
    ProductCard,
    CategoryOption,
    HomePage,
    CollectionPage,
    ProductDetailPage,
    SocialLinks,
    ContactPage,
    AboutPage,
    LanguagePreference,
)
from .admin import DashboardResponse

__all__ = [
    "LocalizedStringSchema",
    "ProductSpecificationsSchema",
    "ProductResponse",
    "ProductDraftResponse",
    "ProductDraftUpdate",
    "ImageReorderRequest",
    "DragEventRequest",
    "ContactFormRequest",
    "ContactFormState",
    "ContactSubmissionResponse",
    "LoginRequest",
    "SessionResponse",
    "ProductCard",
    "CategoryOption",
    "HomePage",
    "CollectionPage",
    "ProductDetailPage",
    "SocialLinks",
    "ContactPage",
    "AboutPage",
    "LanguagePreference",
    "DashboardResponse",
]
