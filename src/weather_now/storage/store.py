"""Key-value stores backing the persisted preferences."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path
from typing import Protocol

import aiosqlite

from weather_now.config import get_settings

_CREATE_TABLE = """
CREATE TABLE IF NOT EXISTS preferences (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TEXT NOT NULL
);
"""


class KeyValueStore(Protocol):
    """Minimal string key-value capability."""

    async def get(self, key: str) -> str | None: ...

    async def set(self, key: str, value: str) -> None: ...


class SQLiteStore:
    """Key-value store in a single SQLite table (via aiosqlite)."""

    def __init__(self, db_path: Path | None = None) -> None:
        self._db_path = db_path or get_settings().db_path
        self._ready = False

    async def _ensure_db(self) -> None:
        """Create database and table if they don't exist."""
        if self._ready:
            return
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        async with aiosqlite.connect(str(self._db_path)) as db:
            await db.execute(_CREATE_TABLE)
            await db.commit()
        self._ready = True

    async def get(self, key: str) -> str | None:
        """Read the value stored under ``key``. Returns None if not found."""
        await self._ensure_db()
        async with aiosqlite.connect(str(self._db_path)) as db:
            cursor = await db.execute(
                "SELECT value FROM preferences WHERE key = ?", (key,),
            )
            row = await cursor.fetchone()
            return row[0] if row else None

    async def set(self, key: str, value: str) -> None:
        """Upsert ``key``."""
        now = datetime.now(timezone.utc).isoformat()
        await self._ensure_db()
        async with aiosqlite.connect(str(self._db_path)) as db:
            await db.execute(
                """INSERT INTO preferences (key, value, updated_at)
                   VALUES (?, ?, ?)
                   ON CONFLICT (key) DO UPDATE
                   SET value = excluded.value, updated_at = excluded.updated_at""",
                (key, value, now),
            )
            await db.commit()


class MemoryStore:
    """In-process store for tests and ``--no-persist`` sessions."""

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self.data: dict[str, str] = dict(initial or {})

    async def get(self, key: str) -> str | None:
        return self.data.get(key)

    async def set(self, key: str, value: str) -> None:
        self.data[key] = value
