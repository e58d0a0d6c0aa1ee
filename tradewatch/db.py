"""Async access to the memories database over libsql.

The ``libsql`` driver is synchronous, so every call is pushed onto a worker
thread with ``asyncio.to_thread()``. Where the database lives depends on
settings:

- ``TURSO_DATABASE_URL`` + ``TURSO_AUTH_TOKEN`` → remote Turso
- otherwise → local SQLite file at ``database_path``
"""

from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING, Any

import libsql

if TYPE_CHECKING:
    from pathlib import Path

from tradewatch.config import settings

SCHEMA = (
    """
    CREATE TABLE IF NOT EXISTS memories (
        id TEXT PRIMARY KEY,
        table_name TEXT NOT NULL,
        room_id TEXT NOT NULL,
        user_id TEXT NOT NULL,
        agent_id TEXT NOT NULL,
        content TEXT NOT NULL,
        created_at TEXT NOT NULL
    )
    """,
    """
    CREATE INDEX IF NOT EXISTS idx_memories_room
        ON memories (table_name, room_id, created_at)
    """,
)


class Cursor:
    """Awaitable view over a libsql cursor."""

    def __init__(self, cursor: Any) -> None:
        self._cursor = cursor

    async def fetchone(self) -> tuple | None:
        return await asyncio.to_thread(self._cursor.fetchone)

    async def fetchall(self) -> list[tuple]:
        return await asyncio.to_thread(self._cursor.fetchall)


class Connection:
    """Awaitable view over a libsql connection."""

    def __init__(self, conn: Any) -> None:
        self._conn = conn

    async def execute(self, sql: str, params: tuple = ()) -> Cursor:
        return Cursor(await asyncio.to_thread(self._conn.execute, sql, params))

    async def commit(self) -> None:
        await asyncio.to_thread(self._conn.commit)

    async def close(self) -> None:
        await asyncio.to_thread(self._conn.close)


def _open_file(path: str) -> Any:
    conn = libsql.connect(path)
    conn.execute("PRAGMA journal_mode=WAL")
    conn.execute("PRAGMA busy_timeout=5000")
    return conn


async def connect(path: Path | None = None) -> Connection:
    """Open a connection and make sure the memories schema exists.

    An explicit *path* wins over settings (used for test isolation).
    """
    if path is None and settings.turso_database_url:
        raw = await asyncio.to_thread(
            libsql.connect,
            database=settings.turso_database_url,
            auth_token=settings.turso_auth_token,
        )
    else:
        target = path or settings.database_path
        target.parent.mkdir(parents=True, exist_ok=True)
        raw = await asyncio.to_thread(_open_file, str(target))

    conn = Connection(raw)
    for statement in SCHEMA:
        await conn.execute(statement)
    await conn.commit()
    return conn
