"""Storage gateway: the single owner of products and contact submissions.

Every operation opens its own session (one unit of work), and every failure is
logged and folded into a neutral result: an empty list or ``None`` for reads,
``False`` for writes. Callers never see the underlying error.
"""

import logging
from collections.abc import Callable
from contextlib import AbstractAsyncContextManager
from typing import Any

from delfina_home.application.interfaces import ContactSubmissionRepository, ProductRepository
from delfina_home.domain.entities import ContactSubmission, Product, is_valid_product_id

logger = logging.getLogger(__name__)

SessionFactory = Callable[[], AbstractAsyncContextManager[Any]]


class StorageGateway:
    """CRUD over the products and contact_submissions tables."""

    def __init__(
        self,
        session_factory: SessionFactory,
        product_repository_factory: Callable[[Any], ProductRepository],
        message_repository_factory: Callable[[Any], ContactSubmissionRepository],
    ) -> None:
        self._session_factory = session_factory
        self._products = product_repository_factory
        self._messages = message_repository_factory

    # ── Products ────────────────────────────────────────────────────

    async def list_products(self) -> list[Product]:
        """All products, newest first. Empty on failure."""
        try:
            async with self._session_factory() as session:
                return await self._products(session).get_all()
        except Exception:
            logger.exception("Error fetching products")
            return []

    async def get_product(self, product_id: str) -> Product | None:
        try:
            async with self._session_factory() as session:
                return await self._products(session).get_by_id(product_id)
        except Exception:
            logger.exception("Error fetching product %s", product_id)
            return None

    async def save_product(self, product: Product) -> bool:
        """Insert or fully replace a product.

        The id must be a UUID; anything else is rejected before storage is
        touched. Upsert is an existence probe followed by update or insert,
        which is not atomic: two concurrent saves of a new id can race.
        """
        if not is_valid_product_id(product.id):
            logger.error("Invalid UUID format: %r", product.id)
            return False

        try:
            async with self._session_factory() as session:
                repository = self._products(session)
                if await repository.exists(product.id):
                    await repository.update(product)
                    action = "Updated"
                else:
                    await repository.create(product)
                    action = "Created"
                await session.commit()
        except Exception:
            logger.exception("Error saving product %s", product.id)
            return False

        logger.info("%s product %s", action, product.id)
        return True

    async def delete_product(self, product_id: str) -> bool:
        try:
            async with self._session_factory() as session:
                await self._products(session).delete(product_id)
                await session.commit()
        except Exception:
            logger.exception("Error deleting product %s", product_id)
            return False

        logger.info("Deleted product %s", product_id)
        return True

    # ── Contact submissions ─────────────────────────────────────────

    async def list_messages(self) -> list[ContactSubmission]:
        """All contact submissions, most recent first. Empty on failure."""
        try:
            async with self._session_factory() as session:
                return await self._messages(session).get_all()
        except Exception:
            logger.exception("Error fetching messages")
            return []

    async def save_message(self, name: str, email: str, message: str) -> bool:
        """Store a visitor message; storage assigns id, date and ``read=False``."""
        try:
            async with self._session_factory() as session:
                await self._messages(session).create(name=name, email=email, message=message)
                await session.commit()
        except Exception:
            logger.exception("Error saving message")
            return False
        return True

    async def mark_message_read(self, message_id: str) -> bool:
        try:
            async with self._session_factory() as session:
                await self._messages(session).mark_read(message_id)
                await session.commit()
        except Exception:
            logger.exception("Error marking message %s as read", message_id)
            return False
        return True
