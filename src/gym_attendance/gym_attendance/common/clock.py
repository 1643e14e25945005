from __future__ import annotations

from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    """Source of the current local time.

    Services take a clock instead of calling datetime.now() so tests can move
    "today" forward deterministically.
    """

    def now(self) -> datetime:
        raise NotImplementedError

    def today(self) -> date:
        raise NotImplementedError


class SystemClock:
    def now(self) -> datetime:
        return datetime.now()

    def today(self) -> date:
        return self.now().date()


def parse_iso_datetime(value) -> datetime | None:
    """Parse an ISO-8601 timestamp as stored in the key-value store.

    Aware timestamps (e.g. "2024-01-01T00:00:00Z") are converted to naive
    local time so they compare with SystemClock values.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    text = str(value).strip()
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    parsed = datetime.fromisoformat(text)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def to_iso(value: datetime | None) -> str | None:
    return value.isoformat() if value else None
