"""Admin product editor: a mutable draft of one product until it is saved.

The image list is the interesting part: position 0 is the cover image, so
removing or moving images changes which picture represents the product.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import replace

from delfina_home.application.services.storage_gateway import StorageGateway
from delfina_home.domain.entities import (
    Category,
    ImageUpload,
    LocalizedString,
    Product,
    is_valid_product_id,
)
from delfina_home.domain.exceptions import DraftValidationError

logger = logging.getLogger(__name__)

GENERIC_SAVE_ERROR = "Failed to save product. Please try again."
MISSING_FIELDS_ERROR = "Please fill in all required fields."
MISSING_IMAGES_ERROR = "Please add at least one product image."

ImageEncoder = Callable[[ImageUpload], Awaitable[str]]


def format_size(num_bytes: int) -> str:
    """Human-readable size: ``512 bytes``, ``500 KB``, ``1.5 MB``."""
    if num_bytes < 1024:
        return f"{num_bytes} bytes"
    value, unit = num_bytes / 1024, "KB"
    if value >= 1024:
        value, unit = value / 1024, "MB"
    return f"{value:.1f}".rstrip("0").rstrip(".") + f" {unit}"


class ProductEditor:
    """One editing session over a product draft.

    Holds the draft, the drag-and-drop indices of the image grid and the
    in-flight/closed flags. Nothing is persisted until ``commit``.
    """

    def __init__(
        self,
        draft: Product,
        gateway: StorageGateway,
        encoder: ImageEncoder,
        *,
        is_new: bool,
        require_images: bool = True,
        max_image_bytes: int | None = None,
    ) -> None:
        self.draft = draft
        self.is_new = is_new
        self.dragged_index: int | None = None
        self.drag_over_index: int | None = None
        self.saving = False
        self.closed = False
        self.error: str | None = None
        self._gateway = gateway
        self._encode = encoder
        self._require_images = require_images
        self._max_image_bytes = max_image_bytes

    @property
    def images(self) -> list[str]:
        return self.draft.images

    # ── Fields ──────────────────────────────────────────────────────

    def update_fields(
        self,
        *,
        title: LocalizedString | None = None,
        description: LocalizedString | None = None,
        dimensions: LocalizedString | None = None,
        materials: LocalizedString | None = None,
        price: str | None = None,
        category: Category | str | None = None,
        is_featured: bool | None = None,
        is_visible: bool | None = None,
    ) -> None:
        """Replace the given fields on the draft; ``None`` leaves a field as is."""
        self._ensure_open()
        if title is not None:
            self.draft.title = title
        if description is not None:
            self.draft.description = description
        if dimensions is not None:
            self.draft.specifications.dimensions = dimensions
        if materials is not None:
            self.draft.specifications.materials = materials
        if price is not None:
            self.draft.price = price
        if category is not None:
            self.draft.category = Category(category).value
        if is_featured is not None:
            self.draft.is_featured = is_featured
        if is_visible is not None:
            self.draft.is_visible = is_visible

    # ── Images ──────────────────────────────────────────────────────

    async def add_images(self, files: list[ImageUpload]) -> list[str]:
        """Encode every file as a data URI and append the batch in input order.

        Files are encoded concurrently; the whole batch is appended only once
        every encoding has finished. Empty files are skipped.
        """
        self._ensure_open()
        uploads = [f for f in files if f.content]
        for upload in uploads:
            if not upload.is_image:
                raise DraftValidationError(f"'{upload.filename}' is not an image")
            if self._max_image_bytes is not None and len(upload.content) > self._max_image_bytes:
                raise DraftValidationError(
                    f"'{upload.filename}' exceeds the {format_size(self._max_image_bytes)} upload limit"
                )

        encoded = await asyncio.gather(*(self._encode(upload) for upload in uploads))
        self.draft.images.extend(encoded)
        logger.debug("Added %d image(s) to draft %s", len(encoded), self.draft.id)
        return list(encoded)

    def remove_image(self, index: int) -> None:
        """Delete the image at ``index``; later images shift down by one."""
        self._ensure_open()
        self._check_index(index)
        del self.draft.images[index]
        self.drag_end()

    def reorder(self, from_index: int, to_index: int) -> None:
        """Take the image at ``from_index`` out and reinsert it at ``to_index``.

        ``to_index`` addresses the list after the removal, so this is a move,
        not a swap. Moving an image onto itself changes nothing.
        """
        self._ensure_open()
        self._check_index(from_index)
        self._check_index(to_index)
        if from_index == to_index:
            return
        images = self.draft.images
        images.insert(to_index, images.pop(from_index))

    def drag_start(self, index: int) -> None:
        self._check_index(index)
        self.dragged_index = index

    def drag_over(self, index: int) -> None:
        self._check_index(index)
        self.drag_over_index = index

    def drop(self, index: int) -> None:
        """Move the dragged image onto ``index`` and clear the drag state."""
        try:
            if self.dragged_index is not None:
                self.reorder(self.dragged_index, index)
        finally:
            self.drag_end()

    def drag_end(self) -> None:
        """Clear drag feedback; also called for aborted drags."""
        self.dragged_index = None
        self.drag_over_index = None

    # ── Commit ──────────────────────────────────────────────────────

    def validate(self) -> None:
        if not is_valid_product_id(self.draft.id) or self.draft.title.is_blank():
            raise DraftValidationError(MISSING_FIELDS_ERROR)
        if self._require_images and not self.draft.images:
            raise DraftValidationError(MISSING_IMAGES_ERROR)

    async def commit(self) -> bool:
        """Save the draft through the gateway.

        On success the session closes. On failure the draft is kept as is and
        ``error`` carries a generic message; nothing is retried.
        """
        self._ensure_open()
        if self.saving:
            raise DraftValidationError("A save is already in progress.")
        self.validate()

        self.saving = True
        self.error = None
        try:
            saved = await self._gateway.save_product(
                replace(self.draft, images=list(self.draft.images))
            )
        finally:
            self.saving = False

        if saved:
            self.closed = True
            self.is_new = False
        else:
            self.error = GENERIC_SAVE_ERROR
        return saved

    # ── Helpers ─────────────────────────────────────────────────────

    def _ensure_open(self) -> None:
        if self.closed:
            raise DraftValidationError("This editing session is closed.")

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.draft.images):
            raise IndexError(f"No image at position {index}")
