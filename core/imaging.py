"""Shrink captured photos so they fit the proxy's request size limit."""

from __future__ import annotations

import base64
import io
import logging

from PIL import Image, ImageOps

logger = logging.getLogger(__name__)

MAX_WIDTH = 1024
JPEG_QUALITY = 70


def resize_to_width(image: Image.Image, max_width: int = MAX_WIDTH) -> Image.Image:
    """Scale down to ``max_width`` keeping the aspect ratio; narrower images are left alone."""
    src_w, src_h = image.size
    if src_w <= max_width:
        return image
    new_h = max(1, int(src_h * (max_width / src_w)))
    return image.resize((max_width, new_h), Image.LANCZOS)


def compress_image(raw: bytes, max_width: int = MAX_WIDTH, quality: int = JPEG_QUALITY) -> bytes:
    """Return ``raw`` re-encoded as a JPEG at most ``max_width`` wide.

    Phone photos are often 10MB+; the proxy forwards the image as
    ``image/jpeg`` and rejects bodies over 4MB.
    """
    with Image.open(io.BytesIO(raw)) as img:
        img = ImageOps.exif_transpose(img).convert("RGB")
        resized = resize_to_width(img, max_width)

    buf = io.BytesIO()
    resized.save(buf, format="JPEG", quality=quality, optimize=True)
    out = buf.getvalue()
    logger.info("Compressed image: %d bytes -> %d bytes", len(raw), len(out))
    return out


def to_base64(data: bytes) -> str:
    return base64.b64encode(data).decode("ascii")


def to_data_uri(image_b64: str) -> str:
    return f"data:image/jpeg;base64,{image_b64}"


def strip_data_uri(value: str) -> str:
    """Return the bare base64 part of a ``data:`` URI (or the value itself)."""
    if value.startswith("data:") and "," in value:
        return value.split(",", 1)[1]
    return value
