"""FarmStore protocol - durable keyed storage for farms and the asset index."""

from __future__ import annotations

from typing import Protocol


class FarmStore(Protocol):
    """Durable storage behind the farm registry.

    Record writes are not committed by the store itself; the execution that
    issued them commits or rolls back as a unit.
    """

    # ── Lifecycle ──────────────────────────────────────────

    async def initialize(self) -> None:
        """Create tables if they don't exist."""
        ...

    async def close(self) -> None:
        ...

    async def commit(self) -> None:
        ...

    async def rollback(self) -> None:
        ...

    # ── Farm records ───────────────────────────────────────

    async def get_farm_record(self, farm_id: str) -> str | None:
        ...

    async def put_farm_record(self, farm_id: str, record: str) -> None:
        ...

    # ── Inactive reward records (nested per farm) ──────────

    async def get_inactive_record(self, farm_id: str, token_id: str) -> str | None:
        ...

    async def put_inactive_record(self, farm_id: str, token_id: str, record: str) -> None:
        ...

    async def delete_inactive_record(self, farm_id: str, token_id: str) -> None:
        ...

    # ── Underlying asset index ─────────────────────────────

    async def add_asset_id(self, token_id: str) -> int:
        """Append an asset to the ordered index and commit. Returns its index."""
        ...

    async def count_asset_ids(self) -> int:
        ...

    async def get_asset_ids(self, from_index: int, limit: int) -> list[str]:
        ...
