from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

import pytest

from src.gym_attendance.gym_attendance.container import build_container
from src.gym_attendance.gym_attendance.storage.kv_store import InMemoryKeyValueStore


@dataclass
class FrozenClock:
    current: datetime

    def now(self) -> datetime:
        return self.current

    def today(self):
        return self.current.date()

    def advance(self, **kwargs) -> None:
        self.current = self.current + timedelta(**kwargs)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2024, 1, 1, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FrozenClock:
    return FrozenClock(fixed_now)


@pytest.fixture
def store() -> InMemoryKeyValueStore:
    return InMemoryKeyValueStore()


@pytest.fixture
def container(store, clock):
    return build_container(store=store, clock=clock)
