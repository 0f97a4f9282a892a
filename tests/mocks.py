"""Mock implementations of external-facing components."""

from __future__ import annotations


class MockFarmStore:
    """Implements FarmStore protocol with dicts and counts reads.

    Writes land in the working dicts immediately; ``rollback`` restores the
    last committed copies.
    """

    def __init__(self) -> None:
        self.farms: dict[str, str] = {}
        self.inactive: dict[tuple[str, str], str] = {}
        self.asset_ids: list[str] = []
        self._committed: tuple[dict, dict] = ({}, {})
        self.farm_reads: list[str] = []
        self.commits = 0
        self.rollbacks = 0

    async def initialize(self) -> None:
        pass

    async def close(self) -> None:
        pass

    async def commit(self) -> None:
        self._committed = (dict(self.farms), dict(self.inactive))
        self.commits += 1

    async def rollback(self) -> None:
        self.farms, self.inactive = dict(self._committed[0]), dict(self._committed[1])
        self.rollbacks += 1

    async def get_farm_record(self, farm_id: str) -> str | None:
        self.farm_reads.append(farm_id)
        return self.farms.get(farm_id)

    async def put_farm_record(self, farm_id: str, record: str) -> None:
        self.farms[farm_id] = record

    async def get_inactive_record(self, farm_id: str, token_id: str) -> str | None:
        return self.inactive.get((farm_id, token_id))

    async def put_inactive_record(self, farm_id: str, token_id: str, record: str) -> None:
        self.inactive[(farm_id, token_id)] = record

    async def delete_inactive_record(self, farm_id: str, token_id: str) -> None:
        self.inactive.pop((farm_id, token_id), None)

    async def add_asset_id(self, token_id: str) -> int:
        if token_id not in self.asset_ids:
            self.asset_ids.append(token_id)
        return self.asset_ids.index(token_id)

    async def count_asset_ids(self) -> int:
        return len(self.asset_ids)

    async def get_asset_ids(self, from_index: int, limit: int) -> list[str]:
        return self.asset_ids[from_index:from_index + limit]
