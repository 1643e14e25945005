from __future__ import annotations

import json
from typing import Optional, Protocol

from ..core.constants import ATTENDANCE_KEY, MEMBER_ID_COUNTER_KEY, MEMBER_ID_COUNTER_START, MEMBERS_KEY


class KeyValueStore(Protocol):
    """String key -> string value storage (the app's only persistence).

    Repositories serialize whole collections into a single key, so every write
    is a read-modify-write of that key.
    """

    def get(self, key: str) -> Optional[str]:
        raise NotImplementedError

    def set(self, key: str, value: str) -> None:
        raise NotImplementedError


class InMemoryKeyValueStore:
    """Dict-backed store for tests and throwaway demo runs."""

    def __init__(self, initial: Optional[dict[str, str]] = None):
        self._data: dict[str, str] = dict(initial or {})

    def get(self, key: str) -> Optional[str]:
        return self._data.get(key)

    def set(self, key: str, value: str) -> None:
        self._data[key] = str(value)


def init_storage(store: KeyValueStore) -> None:
    """Write defaults for any key that has never been set."""

    if store.get(MEMBERS_KEY) is None:
        store.set(MEMBERS_KEY, json.dumps([]))
    if store.get(ATTENDANCE_KEY) is None:
        store.set(ATTENDANCE_KEY, json.dumps([]))
    if store.get(MEMBER_ID_COUNTER_KEY) is None:
        store.set(MEMBER_ID_COUNTER_KEY, str(MEMBER_ID_COUNTER_START))
