from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .attendance.kv_attendance_repository import KeyValueAttendanceRepository
from .attendance.service import AttendanceService
from .common.clock import Clock, SystemClock
from .database.connection import DBConfig, DatabaseConnection
from .members.kv_member_repository import KeyValueMemberRepository
from .members.service import MemberService
from .storage.kv_store import InMemoryKeyValueStore, KeyValueStore, init_storage
from .storage.mysql_kv_store import MySQLKeyValueStore


@dataclass(frozen=True)
class Container:
    store: KeyValueStore
    clock: Clock

    members_repo: KeyValueMemberRepository
    attendance_repo: KeyValueAttendanceRepository

    member_service: MemberService
    attendance_service: AttendanceService


def build_store(*, backend: str, db_config: Optional[dict] = None) -> KeyValueStore:
    backend = (backend or "memory").lower()
    if backend == "memory":
        return InMemoryKeyValueStore()
    if backend == "mysql":
        if not db_config:
            raise ValueError("DB_CONFIG is required for the mysql storage backend")
        return MySQLKeyValueStore(DatabaseConnection.get_instance(DBConfig.from_dict(db_config)))
    raise ValueError(f"Unknown storage backend: {backend!r}")


def build_container(
    *,
    backend: str = "memory",
    db_config: Optional[dict] = None,
    store: Optional[KeyValueStore] = None,
    clock: Optional[Clock] = None,
) -> Container:
    store = store if store is not None else build_store(backend=backend, db_config=db_config)
    clock = clock or SystemClock()
    init_storage(store)

    members_repo = KeyValueMemberRepository(store, clock)
    attendance_repo = KeyValueAttendanceRepository(store)

    member_service = MemberService(members_repo, clock)
    attendance_service = AttendanceService(attendance_repo, members_repo, clock)

    return Container(
        store=store,
        clock=clock,
        members_repo=members_repo,
        attendance_repo=attendance_repo,
        member_service=member_service,
        attendance_service=attendance_service,
    )
