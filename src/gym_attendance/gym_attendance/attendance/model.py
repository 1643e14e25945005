from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from ..core.enums import AttendanceType


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one check-in or check-out event (append-only)."""

    id: str
    member_id: str
    type: AttendanceType
    timestamp: datetime
    date: str
