"""Farm identifiers - which exposure to which underlying asset a farm rewards."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from asset_farms.errors import InvalidFarmIdError


class FarmKind(str, Enum):
    """Exposure type a farm rewards."""

    SUPPLIED = "supplied"  # collateral / supply side
    BORROWED = "borrowed"  # debt side


@dataclass(frozen=True, order=True)
class FarmId:
    """Key into the farm registry, e.g. ``supplied:wrap.near``."""

    kind: FarmKind
    token_id: str

    @classmethod
    def supplied(cls, token_id: str) -> FarmId:
        return cls(FarmKind.SUPPLIED, token_id)

    @classmethod
    def borrowed(cls, token_id: str) -> FarmId:
        return cls(FarmKind.BORROWED, token_id)

    @classmethod
    def parse(cls, value: str) -> FarmId:
        kind, sep, token_id = value.partition(":")
        if not sep or not token_id:
            raise InvalidFarmIdError(f"Invalid farm id: {value!r}")
        try:
            return cls(FarmKind(kind), token_id)
        except ValueError:
            raise InvalidFarmIdError(f"Unknown farm kind in {value!r}") from None

    def __str__(self) -> str:
        return f"{self.kind.value}:{self.token_id}"
