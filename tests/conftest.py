"""
Shared fixtures: an app wired to an in-memory SQLite fake instead of the
asyncpg pool, and a fresh metrics registry per test.
"""

from __future__ import annotations

import sqlite3
from datetime import date
from pathlib import Path
from typing import Any

import pytest
from fastapi.testclient import TestClient

from core.config import Settings
from core.errors import StorageError
from core.metrics import HttpMetrics
from main import create_app

SEED_SQL = Path(__file__).resolve().parents[1] / "db-init" / "02_seed.sql"

# Same tables and foreign-key actions as db-init/01_schema.sql, in SQLite dialect.
SQLITE_SCHEMA = """
CREATE TABLE daycare (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    address TEXT,
    phone TEXT,
    email TEXT
);
CREATE TABLE classroom (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    daycare_id INTEGER REFERENCES daycare(id) ON DELETE CASCADE
);
CREATE TABLE parent (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    phone TEXT,
    email TEXT
);
CREATE TABLE child (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    date_of_birth TEXT NOT NULL,
    classroom_id INTEGER REFERENCES classroom(id) ON DELETE SET NULL,
    daycare_id INTEGER REFERENCES daycare(id) ON DELETE CASCADE
);
CREATE TABLE enrollment (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    child_id INTEGER REFERENCES child(id) ON DELETE CASCADE,
    parent_id INTEGER REFERENCES parent(id) ON DELETE CASCADE
);
"""

sqlite3.register_adapter(date, date.isoformat)


class SQLiteDatabase:
    """
    Drop-in for core.db.Database. SQLite reads `$1` as a named parameter
    called "1", so the repositories' SQL runs unchanged.
    """

    def __init__(self) -> None:
        self.conn = sqlite3.connect(":memory:", check_same_thread=False, isolation_level=None)
        self.conn.row_factory = sqlite3.Row
        self.conn.execute("PRAGMA foreign_keys = ON")
        self.conn.executescript(SQLITE_SCHEMA)
        self.connected = False

    def seed(self, path: Path = SEED_SQL) -> None:
        self.conn.executescript(path.read_text(encoding="utf-8"))

    def scalar(self, sql: str) -> Any:
        return self.conn.execute(sql).fetchone()[0]

    def rows(self, sql: str) -> list[dict[str, Any]]:
        return [dict(r) for r in self.conn.execute(sql).fetchall()]

    def _run(self, sql: str, args: tuple[Any, ...]) -> list[dict[str, Any]]:
        params = {str(i): value for i, value in enumerate(args, start=1)}
        try:
            return [dict(r) for r in self.conn.execute(sql, params).fetchall()]
        except sqlite3.Error as exc:
            raise StorageError(str(exc)) from exc

    async def connect(self) -> None:
        self.connected = True

    async def close(self) -> None:
        self.connected = False

    async def fetch_one(self, sql: str, *args: Any) -> dict[str, Any] | None:
        rows = self._run(sql, args)
        return rows[0] if rows else None

    async def fetch_all(self, sql: str, *args: Any) -> list[dict[str, Any]]:
        return self._run(sql, args)

    async def fetch_value(self, sql: str, *args: Any) -> Any:
        rows = self._run(sql, args)
        return next(iter(rows[0].values())) if rows else None

    async def execute(self, sql: str, *args: Any) -> None:
        self._run(sql, args)


class BrokenDatabase(SQLiteDatabase):
    """Every statement fails the way an unreachable server would."""

    def _run(self, sql: str, args: tuple[Any, ...]) -> list[dict[str, Any]]:
        raise StorageError("connection refused")


@pytest.fixture
def database():
    db = SQLiteDatabase()
    db.seed()
    yield db
    db.conn.close()


@pytest.fixture
def metrics():
    return HttpMetrics(prefix="test")


@pytest.fixture
def app(database, metrics):
    return create_app(Settings(), database=database, metrics=metrics)


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def broken_client(metrics):
    broken_app = create_app(Settings(), database=BrokenDatabase(), metrics=metrics)
    with TestClient(broken_app) as test_client:
        yield test_client
