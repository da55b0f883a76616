"""Application service (use case) behind the admin panel."""

import asyncio
import logging
from dataclasses import dataclass, field
from uuid import uuid4

from delfina_home.application.services.product_editor import ImageEncoder, ProductEditor
from delfina_home.application.services.storage_gateway import StorageGateway
from delfina_home.domain.entities import ContactSubmission, Product
from delfina_home.domain.exceptions import EntityNotFoundError

logger = logging.getLogger(__name__)


@dataclass
class DashboardSnapshot:
    products: list[Product] = field(default_factory=list)
    messages: list[ContactSubmission] = field(default_factory=list)

    @property
    def unread_count(self) -> int:
        return sum(1 for m in self.messages if not m.read)


@dataclass
class CommitResult:
    """Outcome of saving a draft. ``products`` is the reloaded list on success."""

    saved: bool
    error: str | None = None
    products: list[Product] = field(default_factory=list)


class DraftRegistry:
    """Open editing sessions, keyed by product id. One admin, one process.

    Drafts stay here until they are committed, cancelled or their product is
    deleted; an abandoned draft is kept until the process restarts.
    """

    def __init__(self) -> None:
        self._editors: dict[str, ProductEditor] = {}

    def put(self, editor: ProductEditor) -> ProductEditor:
        self._editors[editor.draft.id] = editor
        return editor

    def get(self, draft_id: str) -> ProductEditor:
        editor = self._editors.get(draft_id)
        if editor is None:
            raise EntityNotFoundError("Draft", draft_id)
        return editor

    def discard(self, draft_id: str) -> None:
        self._editors.pop(draft_id, None)


class AdminDashboardService:
    """Orchestrates product and inbox management for a signed-in admin."""

    def __init__(
        self,
        gateway: StorageGateway,
        registry: DraftRegistry,
        encoder: ImageEncoder,
        *,
        require_images: bool = True,
        max_image_bytes: int | None = None,
    ) -> None:
        self._gateway = gateway
        self._registry = registry
        self._encoder = encoder
        self._require_images = require_images
        self._max_image_bytes = max_image_bytes

    async def refresh(self) -> DashboardSnapshot:
        """Load products and messages concurrently."""
        products, messages = await asyncio.gather(
            self._gateway.list_products(),
            self._gateway.list_messages(),
        )
        return DashboardSnapshot(products=products, messages=messages)

    async def list_products(self) -> list[Product]:
        return await self._gateway.list_products()

    async def list_messages(self) -> list[ContactSubmission]:
        return await self._gateway.list_messages()

    async def delete_product(self, product_id: str) -> bool:
        deleted = await self._gateway.delete_product(product_id)
        if deleted:
            self._registry.discard(product_id)
        return deleted

    async def mark_message_read(self, message_id: str) -> bool:
        return await self._gateway.mark_message_read(message_id)

    # ── Drafts ──────────────────────────────────────────────────────

    def _editor(self, draft: Product, *, is_new: bool) -> ProductEditor:
        return ProductEditor(
            draft,
            self._gateway,
            self._encoder,
            is_new=is_new,
            require_images=self._require_images,
            max_image_bytes=self._max_image_bytes,
        )

    def open_new_draft(self) -> ProductEditor:
        """Start a blank product with a fresh UUID and default values."""
        editor = self._editor(Product(id=str(uuid4())), is_new=True)
        logger.info("Opened new product draft %s", editor.draft.id)
        return self._registry.put(editor)

    async def open_draft(self, product_id: str) -> ProductEditor:
        """Start editing a stored product; any previous draft of it is replaced."""
        product = await self._gateway.get_product(product_id)
        if product is None:
            raise EntityNotFoundError("Product", product_id)
        return self._registry.put(self._editor(product, is_new=False))

    def get_draft(self, draft_id: str) -> ProductEditor:
        return self._registry.get(draft_id)

    def cancel_draft(self, draft_id: str) -> None:
        self._registry.get(draft_id)
        self._registry.discard(draft_id)

    async def commit_draft(self, draft_id: str) -> CommitResult:
        """Save a draft; on success close it and reload the product list."""
        editor = self._registry.get(draft_id)
        if not await editor.commit():
            return CommitResult(saved=False, error=editor.error)

        self._registry.discard(draft_id)
        return CommitResult(saved=True, products=await self._gateway.list_products())
