from __future__ import annotations

import json

from src.gym_attendance.gym_attendance.core.constants import ATTENDANCE_KEY, MEMBER_ID_COUNTER_KEY, MEMBERS_KEY
from src.gym_attendance.gym_attendance.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.gym_attendance.gym_attendance.storage.kv_store import InMemoryKeyValueStore, init_storage
from src.gym_attendance.gym_attendance.storage.mysql_kv_store import MySQLKeyValueStore


def test_init_storage_writes_defaults_once():
    store = InMemoryKeyValueStore()

    init_storage(store)

    assert json.loads(store.get(MEMBERS_KEY)) == []
    assert json.loads(store.get(ATTENDANCE_KEY)) == []
    assert store.get(MEMBER_ID_COUNTER_KEY) == "1000"


def test_init_storage_keeps_existing_values():
    store = InMemoryKeyValueStore({MEMBER_ID_COUNTER_KEY: "1042", MEMBERS_KEY: '[{"id": "1042"}]'})

    init_storage(store)

    assert store.get(MEMBER_ID_COUNTER_KEY) == "1042"
    assert store.get(MEMBERS_KEY) == '[{"id": "1042"}]'
    assert store.get(ATTENDANCE_KEY) == "[]"


class FakeCursor:
    def __init__(self, table: dict):
        self._table = table
        self._result = None
        self.executed: list[tuple] = []

    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), params))
        if sql.strip().upper().startswith("SELECT"):
            value = self._table.get(params[0])
            self._result = {"store_value": value} if value is not None else None
        else:
            self._table[params[0]] = params[1]

    def fetchone(self):
        return self._result

    def close(self):
        pass


class FakeConnection:
    def __init__(self, table: dict):
        self._table = table
        self.committed = False

    def cursor(self, dictionary=False):
        return FakeCursor(self._table)

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnFactory:
    def __init__(self):
        self.table: dict = {}

    def connect(self):
        return FakeConnection(self.table)


def test_mysql_store_round_trips_through_cursor():
    factory = FakeConnFactory()
    store = MySQLKeyValueStore(factory)

    assert store.get(MEMBERS_KEY) is None
    store.set(MEMBERS_KEY, "[]")
    store.set(MEMBERS_KEY, '[{"id": "1001"}]')

    assert store.get(MEMBERS_KEY) == '[{"id": "1001"}]'


def test_schema_splitter_skips_comments_and_use():
    sql = _strip_create_db_and_use(
        "CREATE DATABASE IF NOT EXISTS x;\nUSE x;\n-- note; with semicolon\nCREATE TABLE a (v VARCHAR(5) DEFAULT ';');\nSELECT 1;"
    )

    statements = list(_iter_sql_statements(sql))

    assert statements == ["CREATE TABLE a (v VARCHAR(5) DEFAULT ';')", "SELECT 1"]
