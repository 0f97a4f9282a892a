"""SQLite implementation of the FarmStore protocol."""

from __future__ import annotations

from datetime import datetime, timezone
from pathlib import Path

import aiosqlite

SCHEMA = """
-- Ordered index of underlying assets (owned by asset configuration)
CREATE TABLE IF NOT EXISTS asset_ids (
    idx INTEGER PRIMARY KEY,
    token_id TEXT NOT NULL UNIQUE,
    created_at TEXT NOT NULL DEFAULT (datetime('now'))
);

-- Versioned farm records keyed by farm id
CREATE TABLE IF NOT EXISTS asset_farms (
    farm_id TEXT PRIMARY KEY,
    record TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now'))
);

-- Versioned inactive reward records, nested under their farm
CREATE TABLE IF NOT EXISTS inactive_rewards (
    farm_id TEXT NOT NULL,
    token_id TEXT NOT NULL,
    record TEXT NOT NULL,
    updated_at TEXT NOT NULL DEFAULT (datetime('now')),
    PRIMARY KEY (farm_id, token_id)
);
"""


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


class SQLiteFarmStore:
    """SQLite-backed implementation of the FarmStore protocol."""

    def __init__(self, db_path: str) -> None:
        self._db_path = db_path
        self._db: aiosqlite.Connection | None = None

    async def initialize(self) -> None:
        if self._db_path != ":memory:":
            Path(self._db_path).parent.mkdir(parents=True, exist_ok=True)
        self._db = await aiosqlite.connect(self._db_path)
        self._db.row_factory = aiosqlite.Row
        await self._db.executescript(SCHEMA)
        await self._db.commit()

    async def close(self) -> None:
        if self._db:
            await self._db.close()
            self._db = None

    @property
    def db(self) -> aiosqlite.Connection:
        assert self._db is not None, "Store not initialized. Call initialize() first."
        return self._db

    async def commit(self) -> None:
        await self.db.commit()

    async def rollback(self) -> None:
        await self.db.rollback()

    # ── Farm records ───────────────────────────────────────

    async def get_farm_record(self, farm_id: str) -> str | None:
        async with self.db.execute(
            "SELECT record FROM asset_farms WHERE farm_id=?", (farm_id,)
        ) as cur:
            row = await cur.fetchone()
            return row["record"] if row else None

    async def put_farm_record(self, farm_id: str, record: str) -> None:
        await self.db.execute(
            "INSERT INTO asset_farms (farm_id, record, updated_at) VALUES (?, ?, ?)"
            " ON CONFLICT(farm_id) DO UPDATE SET record=excluded.record,"
            " updated_at=excluded.updated_at",
            (farm_id, record, _now()),
        )

    # ── Inactive reward records ────────────────────────────

    async def get_inactive_record(self, farm_id: str, token_id: str) -> str | None:
        async with self.db.execute(
            "SELECT record FROM inactive_rewards WHERE farm_id=? AND token_id=?",
            (farm_id, token_id),
        ) as cur:
            row = await cur.fetchone()
            return row["record"] if row else None

    async def put_inactive_record(self, farm_id: str, token_id: str, record: str) -> None:
        await self.db.execute(
            "INSERT OR REPLACE INTO inactive_rewards (farm_id, token_id, record, updated_at)"
            " VALUES (?, ?, ?, ?)",
            (farm_id, token_id, record, _now()),
        )

    async def delete_inactive_record(self, farm_id: str, token_id: str) -> None:
        await self.db.execute(
            "DELETE FROM inactive_rewards WHERE farm_id=? AND token_id=?",
            (farm_id, token_id),
        )

    # ── Underlying asset index ─────────────────────────────

    async def add_asset_id(self, token_id: str) -> int:
        async with self.db.execute(
            "SELECT idx FROM asset_ids WHERE token_id=?", (token_id,)
        ) as cur:
            row = await cur.fetchone()
            if row:
                return row["idx"]
        index = await self.count_asset_ids()
        await self.db.execute(
            "INSERT INTO asset_ids (idx, token_id, created_at) VALUES (?, ?, ?)",
            (index, token_id, _now()),
        )
        await self.db.commit()
        return index

    async def count_asset_ids(self) -> int:
        async with self.db.execute("SELECT COUNT(*) AS c FROM asset_ids") as cur:
            row = await cur.fetchone()
            return row["c"] if row else 0

    async def get_asset_ids(self, from_index: int, limit: int) -> list[str]:
        async with self.db.execute(
            "SELECT token_id FROM asset_ids WHERE idx >= ? ORDER BY idx LIMIT ?",
            (from_index, limit),
        ) as cur:
            return [row["token_id"] async for row in cur]
