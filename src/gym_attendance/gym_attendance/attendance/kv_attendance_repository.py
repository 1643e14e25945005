from __future__ import annotations

import json
from datetime import datetime
from typing import Sequence

from ..common.clock import parse_iso_datetime
from ..core.constants import ATTENDANCE_KEY
from ..core.enums import AttendanceType
from ..storage.kv_store import KeyValueStore
from .model import AttendanceRecord
from .repository import AttendanceRepository


def record_to_dict(r: AttendanceRecord) -> dict:
    return {
        "id": r.id,
        "memberId": r.member_id,
        "type": r.type.value,
        "timestamp": r.timestamp.isoformat(),
        "date": r.date,
    }


def record_from_dict(row: dict) -> AttendanceRecord:
    timestamp = parse_iso_datetime(row["timestamp"])
    return AttendanceRecord(
        id=str(row["id"]),
        member_id=str(row["memberId"]),
        type=AttendanceType(row["type"]),
        timestamp=timestamp,
        date=row.get("date") or timestamp.strftime("%Y-%m-%d"),
    )


class KeyValueAttendanceRepository(AttendanceRepository):
    """Attendance log kept as one JSON array under ``gym_attendance``."""

    def __init__(self, store: KeyValueStore):
        self._store = store

    def _load(self) -> list[AttendanceRecord]:
        raw = self._store.get(ATTENDANCE_KEY) or "[]"
        return [record_from_dict(row) for row in json.loads(raw)]

    def list_all(self) -> Sequence[AttendanceRecord]:
        return self._load()

    def list_for_member(self, member_id: str) -> Sequence[AttendanceRecord]:
        return [r for r in self._load() if r.member_id == member_id]

    def append(self, *, member_id: str, type: AttendanceType, timestamp: datetime) -> AttendanceRecord:
        records = self._load()

        # Ids are epoch milliseconds; bump past the last one so two events in
        # the same millisecond still get distinct, increasing ids.
        last_id = max((int(r.id) for r in records if r.id.isdigit()), default=0)
        record_id = max(int(timestamp.timestamp() * 1000), last_id + 1)

        record = AttendanceRecord(
            id=str(record_id),
            member_id=member_id,
            type=type,
            timestamp=timestamp,
            date=timestamp.strftime("%Y-%m-%d"),
        )
        records.append(record)
        self._store.set(ATTENDANCE_KEY, json.dumps([record_to_dict(r) for r in records]))
        return record
