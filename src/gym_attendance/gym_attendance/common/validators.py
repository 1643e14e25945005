from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, message: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(message)
    return str(value).strip()


def require_all_non_empty(values: dict, message: str) -> dict:
    """Strip every value; fail with one message if any is blank."""
    cleaned = {}
    for key, value in values.items():
        if value is None or not str(value).strip():
            raise ValidationError(message)
        cleaned[key] = str(value).strip()
    return cleaned
