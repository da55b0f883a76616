"""Shared fixtures: an in-memory SQLite database behind a real StorageGateway, and the app wired to it."""

from collections.abc import AsyncIterator

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from delfina_home.application.services import AuthService, DraftRegistry, StorageGateway
from delfina_home.domain.entities import LocalizedString, Product, ProductSpecifications
from delfina_home.infrastructure.database import Base
from delfina_home.infrastructure.database.repositories import (
    SQLAlchemyContactSubmissionRepository,
    SQLAlchemyProductRepository,
)
from delfina_home.infrastructure.dependencies import (
    get_auth_service,
    get_draft_registry,
    get_storage_gateway,
)
from delfina_home.main import app

ADMIN_EMAIL = "admin@example.com"
ADMIN_PASSWORD = "secret"


@pytest_asyncio.fixture
async def session_factory() -> AsyncIterator[async_sessionmaker[AsyncSession]]:
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest_asyncio.fixture
async def gateway(session_factory) -> StorageGateway:
    return StorageGateway(
        session_factory=session_factory,
        product_repository_factory=SQLAlchemyProductRepository,
        message_repository_factory=SQLAlchemyContactSubmissionRepository,
    )


def _unreachable_database():
    raise OperationalError("SELECT 1", {}, ConnectionRefusedError("connection refused"))


def make_broken_gateway() -> StorageGateway:
    """A gateway whose every session fails to open, like a dropped connection."""
    return StorageGateway(
        session_factory=_unreachable_database,
        product_repository_factory=SQLAlchemyProductRepository,
        message_repository_factory=SQLAlchemyContactSubmissionRepository,
    )


def make_product(**overrides) -> Product:
    """A fully populated product; keyword arguments replace single fields."""
    fields = dict(
        title=LocalizedString(sq="Divan Roma", en="Roma Sofa"),
        description=LocalizedString(sq="Divan prej lëkure", en="Leather sofa"),
        specifications=ProductSpecifications(
            dimensions=LocalizedString(sq="220 x 95 cm", en="220 x 95 cm"),
            materials=LocalizedString(sq="Lëkurë, dru lisi", en="Leather, oak"),
        ),
        category="Dhoma e Ditës",
        images=["data:image/png;base64,AAAA"],
    )
    fields.update(overrides)
    return Product(**fields)


# ── App wiring ──


@pytest_asyncio.fixture
async def auth() -> AuthService:
    return AuthService(ADMIN_EMAIL, ADMIN_PASSWORD, "test-key")


@pytest_asyncio.fixture
async def client(gateway, auth) -> AsyncIterator[AsyncClient]:
    """HTTP client against the app, with storage and auth swapped for test doubles."""
    registry = DraftRegistry()
    app.dependency_overrides[get_storage_gateway] = lambda: gateway
    app.dependency_overrides[get_auth_service] = lambda: auth
    app.dependency_overrides[get_draft_registry] = lambda: registry

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def admin_headers(auth) -> dict[str, str]:
    session = auth.sign_in_with_password(ADMIN_EMAIL, ADMIN_PASSWORD)
    return {"Authorization": f"Bearer {session.access_token}"}
