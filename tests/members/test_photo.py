from __future__ import annotations

import base64
import io

import pytest
from PIL import Image

from src.gym_attendance.gym_attendance.core.constants import DEFAULT_PHOTO
from src.gym_attendance.gym_attendance.core.exceptions import ValidationError
from src.gym_attendance.gym_attendance.members.photo import encode_photo, require_photo_reference


def _png_bytes() -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", (4, 4), color=(200, 10, 10)).save(buf, format="PNG")
    return buf.getvalue()


def test_encode_png_as_data_url():
    data = _png_bytes()

    url = encode_photo(data)

    assert url.startswith("data:image/png;base64,")
    assert base64.b64decode(url.split(",", 1)[1]) == data


def test_empty_upload_uses_placeholder():
    assert encode_photo(b"") == DEFAULT_PHOTO
    assert encode_photo(None) == DEFAULT_PHOTO


def test_non_image_is_rejected():
    with pytest.raises(ValidationError):
        encode_photo(b"definitely not an image")


@pytest.mark.parametrize("value", [None, "", DEFAULT_PHOTO])
def test_photo_reference_falls_back_to_placeholder(value):
    assert require_photo_reference(value) == DEFAULT_PHOTO


def test_photo_reference_accepts_image_data_url():
    assert require_photo_reference(" data:image/gif;base64,R0lG ") == "data:image/gif;base64,R0lG"


@pytest.mark.parametrize("value", ["http://x", "photo.png", "data:text/html,<b>", b"data:image/png", 7])
def test_photo_reference_rejects_anything_else(value):
    with pytest.raises(ValidationError, match="image data URL"):
        require_photo_reference(value)
