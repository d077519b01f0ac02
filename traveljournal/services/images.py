"""Turn uploaded photos into self-contained ``data:`` URIs."""
from __future__ import annotations

import base64
import io
import logging

from PIL import Image, ImageOps, UnidentifiedImageError

from ..errors import ImageEncodingFailure, ImageTooLarge

logger = logging.getLogger(__name__)

DEFAULT_MIME = "application/octet-stream"


def _read_limited(upload, max_bytes: int) -> bytes:
    stream = getattr(upload, "stream", upload)
    try:
        stream.seek(0)
    except (AttributeError, OSError):
        pass
    data = stream.read(max_bytes + 1)
    if len(data) > max_bytes:
        raise ImageTooLarge(f"image is larger than {max_bytes} bytes")
    return data


def _downsize(data: bytes, max_side: int) -> bytes:
    with Image.open(io.BytesIO(data)) as img:
        if max(img.size) <= max_side:
            return data
        image_format = img.format
        processed = ImageOps.exif_transpose(img)
        processed.thumbnail((max_side, max_side), Image.LANCZOS)
        if image_format == "JPEG" and processed.mode not in ("RGB", "L"):
            processed = processed.convert("RGB")
        buf = io.BytesIO()
        processed.save(buf, format=image_format)
        return buf.getvalue()


def encode_image(upload, max_bytes: int, max_side: int = 0) -> str:
    """Validate an uploaded image and return it as a base64 ``data:`` URI.

    ``upload`` is a werkzeug ``FileStorage`` or any binary file object.
    Raises ``ImageTooLarge`` when it exceeds ``max_bytes`` and
    ``ImageEncodingFailure`` when Pillow cannot decode it.
    """
    data = _read_limited(upload, max_bytes)
    if not data:
        raise ImageEncodingFailure("empty upload")

    try:
        with Image.open(io.BytesIO(data)) as img:
            image_format = img.format
            img.verify()
        if max_side > 0:
            data = _downsize(data, max_side)
    except (
        UnidentifiedImageError,
        Image.DecompressionBombError,
        OSError,
        SyntaxError,
        ValueError,
        KeyError,
    ) as exc:
        # KeyError: Pillow can read the format but has no writer for it.
        logger.warning("Rejected upload %r: %s", getattr(upload, "filename", None), exc)
        raise ImageEncodingFailure(str(exc)) from None

    mime = Image.MIME.get(image_format or "", DEFAULT_MIME)
    payload = base64.b64encode(data).decode("ascii")
    return f"data:{mime};base64,{payload}"
