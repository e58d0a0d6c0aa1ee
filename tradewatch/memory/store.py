"""MemoryStore: libsql persistence for room-scoped memories.

Rows live in one ``memories`` table partitioned by ``table_name``
("messages", "recommendations", ...). Reads always come back
most-recent-first; callers that need chronological order reverse them.
"""

from __future__ import annotations

import json
import logging
from datetime import UTC, datetime
from typing import TYPE_CHECKING

from tradewatch.db import Connection, connect
from tradewatch.memory.models import Memory, MemoryContent

if TYPE_CHECKING:
    from pathlib import Path

logger = logging.getLogger(__name__)


class MemoryStore:
    """Reads and writes memories.

    Singleton accessed via ``MemoryStore.get()``. Pass an explicit *db_path*
    for test isolation (e.g. ``tmp_path / "test.db"``).
    """

    _instance: MemoryStore | None = None

    def __init__(self, db_path: Path | None = None) -> None:
        self._db_path = db_path

    @classmethod
    def get(cls) -> MemoryStore:
        """Return the shared MemoryStore instance."""
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def _reset(cls) -> None:
        """Reset the singleton (for testing)."""
        cls._instance = None

    async def _connect(self) -> Connection:
        return await connect(self._db_path)

    # -- Write ---------------------------------------------------------------

    async def create(self, memory: Memory, table_name: str) -> Memory:
        """Insert a memory into *table_name*. Stamps ``created_at`` if missing."""
        if not memory.created_at:
            memory = memory.model_copy(update={"created_at": datetime.now(UTC).isoformat()})

        payload = memory.content.model_dump(exclude_none=True)
        if memory.user_name:
            payload["user_name"] = memory.user_name

        db = await self._connect()
        try:
            await db.execute(
                """
                INSERT INTO memories
                    (id, table_name, room_id, user_id, agent_id, content, created_at)
                VALUES (?, ?, ?, ?, ?, ?, ?)
                """,
                (
                    memory.id,
                    table_name,
                    memory.room_id,
                    memory.user_id,
                    memory.agent_id,
                    json.dumps(payload),
                    memory.created_at,
                ),
            )
            await db.commit()
            logger.debug("Stored memory [%s/%s]: %s", table_name, memory.room_id, memory.id)
            return memory
        finally:
            await db.close()

    # -- Read ----------------------------------------------------------------

    async def get_recent(self, room_id: str, table_name: str, count: int) -> list[Memory]:
        """Return up to *count* memories for a room, newest first."""
        db = await self._connect()
        try:
            cursor = await db.execute(
                """
                SELECT id, room_id, user_id, agent_id, content, created_at
                FROM memories
                WHERE table_name = ? AND room_id = ?
                ORDER BY created_at DESC, rowid DESC
                LIMIT ?
                """,
                (table_name, room_id, count),
            )
            rows = await cursor.fetchall()
        finally:
            await db.close()
        return [self._from_row(row) for row in rows]

    @staticmethod
    def _from_row(row: tuple) -> Memory:
        memory_id, room_id, user_id, agent_id, raw_content, created_at = row
        payload = json.loads(raw_content)
        user_name = payload.pop("user_name", "")
        return Memory(
            id=memory_id,
            room_id=room_id,
            user_id=user_id,
            agent_id=agent_id,
            content=MemoryContent(**payload),
            created_at=created_at,
            user_name=user_name,
        )
