"""FastAPI dependency injection: wires infrastructure to application layer."""

from collections.abc import AsyncGenerator
from datetime import timedelta
from functools import lru_cache

from fastapi import Depends, HTTPException, Request, Response, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from delfina_home.config import get_settings
from delfina_home.application.services import (
    AdminDashboardService,
    AuthService,
    CatalogService,
    DraftRegistry,
    LanguageContext,
    StorageGateway,
)
from delfina_home.domain.entities import AdminSession
from delfina_home.infrastructure.database.session import async_session_factory
from delfina_home.infrastructure.database.repositories import (
    SQLAlchemyContactSubmissionRepository,
    SQLAlchemyProductRepository,
)
from delfina_home.infrastructure.storage.image_encoder import encode_data_uri
from delfina_home.infrastructure.storage.key_value_stores import CookieKeyValueStore

_bearer = HTTPBearer(auto_error=False)


@lru_cache
def get_storage_gateway() -> StorageGateway:
    """Process-wide gateway; it opens a fresh session for every operation."""
    return StorageGateway(
        session_factory=async_session_factory,
        product_repository_factory=SQLAlchemyProductRepository,
        message_repository_factory=SQLAlchemyContactSubmissionRepository,
    )


@lru_cache
def get_auth_service() -> AuthService:
    """Process-wide auth service; holds the live admin sessions."""
    settings = get_settings()
    return AuthService(
        admin_email=settings.admin_email,
        admin_password=settings.admin_password,
        secret_key=settings.auth_secret_key,
        session_ttl=timedelta(minutes=settings.session_ttl_minutes),
    )


@lru_cache
def get_draft_registry() -> DraftRegistry:
    return DraftRegistry()


def get_language_context(request: Request, response: Response) -> LanguageContext:
    """Language preference of the current visitor, persisted in a cookie."""
    return LanguageContext(CookieKeyValueStore(request, response))


async def get_catalog_service(
    gateway: StorageGateway = Depends(get_storage_gateway),
    language: LanguageContext = Depends(get_language_context),
) -> AsyncGenerator[CatalogService, None]:
    """Provides a CatalogService bound to the visitor's language."""
    yield CatalogService(gateway, language, get_settings())


async def get_admin_dashboard_service(
    gateway: StorageGateway = Depends(get_storage_gateway),
    registry: DraftRegistry = Depends(get_draft_registry),
) -> AsyncGenerator[AdminDashboardService, None]:
    """Provides an AdminDashboardService with the shared draft registry."""
    settings = get_settings()
    yield AdminDashboardService(
        gateway,
        registry,
        encode_data_uri,
        require_images=settings.require_product_images,
        max_image_bytes=settings.max_upload_size_mb * 1024 * 1024,
    )


def get_bearer_token(
    credentials: HTTPAuthorizationCredentials | None = Depends(_bearer),
) -> str | None:
    return credentials.credentials if credentials else None


def require_admin_session(
    token: str | None = Depends(get_bearer_token),
    auth: AuthService = Depends(get_auth_service),
) -> AdminSession:
    """Gate for every admin route: 401 unless the bearer token is a live session."""
    session = auth.get_session(token)
    if session is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Not authenticated",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return session
