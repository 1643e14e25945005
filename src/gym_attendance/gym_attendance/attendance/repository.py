from __future__ import annotations

from datetime import datetime
from typing import Protocol, Sequence

from ..core.enums import AttendanceType
from .model import AttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_member(self, member_id: str) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def append(self, *, member_id: str, type: AttendanceType, timestamp: datetime) -> AttendanceRecord:
        raise NotImplementedError
