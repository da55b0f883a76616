"""Turns uploaded image files into ``data:`` URIs stored inline on the product.

Products keep their images as strings, so an upload is embedded as
``data:<mime>;base64,<payload>`` rather than written to disk.
"""

import asyncio
import base64
import logging

from delfina_home.domain.entities import ImageUpload

logger = logging.getLogger(__name__)


def _to_data_uri(mime_type: str, content: bytes) -> str:
    payload = base64.b64encode(content).decode("ascii")
    return f"data:{mime_type};base64,{payload}"


async def encode_data_uri(upload: ImageUpload) -> str:
    """Encode one upload off the event loop."""
    uri = await asyncio.to_thread(_to_data_uri, upload.mime_type, upload.content)
    logger.debug("Encoded %s (%d bytes)", upload.filename, len(upload.content))
    return uri
