"""Domain value object for an image file submitted to the product editor."""

import mimetypes
from dataclasses import dataclass


@dataclass
class ImageUpload:
    filename: str
    content_type: str | None
    content: bytes

    @property
    def mime_type(self) -> str:
        """Declared content type, else a guess from the file extension."""
        if self.content_type and self.content_type != "application/octet-stream":
            return self.content_type
        return mimetypes.guess_type(self.filename)[0] or "application/octet-stream"

    @property
    def is_image(self) -> bool:
        return self.mime_type.startswith("image/")
