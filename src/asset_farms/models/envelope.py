"""Tagged-union JSON envelopes for durable records.

Every durable record is stored as ``{"version": <tag>, "data": {...}}``.
Readers dispatch on the tag through a decoder table, so a new record shape
only needs a new tag and decoder; records written under older tags keep
decoding through their own entry.
"""

from __future__ import annotations

import json
from typing import Any, Callable, TypeVar

from asset_farms.errors import UnknownRecordVersionError

T = TypeVar("T")

CURRENT = "current"


def encode_envelope(version: str, data: dict[str, Any]) -> str:
    return json.dumps({"version": version, "data": data}, sort_keys=True)


def decode_envelope(raw: str, decoders: dict[str, Callable[[dict[str, Any]], T]]) -> T:
    """Decode ``raw`` with the decoder registered for its version tag."""
    obj = json.loads(raw)
    version = obj.get("version")
    decoder = decoders.get(version)
    if decoder is None:
        raise UnknownRecordVersionError(f"Unknown record version: {version!r}")
    return decoder(obj["data"])
