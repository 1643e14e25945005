from __future__ import annotations

import base64
import io

from PIL import Image, UnidentifiedImageError

from ..core.constants import DEFAULT_PHOTO
from ..core.exceptions import ValidationError


def encode_photo(data: bytes | None) -> str:
    """Turn uploaded image bytes into a ``data:`` URL stored on the member.

    Empty uploads fall back to the default placeholder reference.
    """

    if not data:
        return DEFAULT_PHOTO

    try:
        with Image.open(io.BytesIO(data)) as img:
            fmt = (img.format or "").lower()
            img.verify()
    except (UnidentifiedImageError, OSError, SyntaxError):
        raise ValidationError("Photo must be an image file")

    mime = Image.MIME.get(fmt.upper()) or f"image/{fmt or 'png'}"
    return f"data:{mime};base64,{base64.b64encode(data).decode('ascii')}"


def read_upload(file_storage) -> str:
    """Encode a werkzeug FileStorage (or None) from a multipart form."""

    if file_storage is None or not getattr(file_storage, "filename", ""):
        return DEFAULT_PHOTO
    return encode_photo(file_storage.read())


def require_photo_reference(value) -> str:
    """Accept only the placeholder or an image ``data:`` URL."""

    if value is None or value == "":
        return DEFAULT_PHOTO
    if not isinstance(value, str):
        raise ValidationError("Photo must be an image data URL")
    value = value.strip()
    if value == DEFAULT_PHOTO or value.startswith("data:image/"):
        return value
    raise ValidationError("Photo must be an image data URL")
