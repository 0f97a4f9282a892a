"""Shared fixtures for asset_farms tests."""

from __future__ import annotations

import pytest
from pytest_metadata.plugin import metadata_key

from asset_farms.api.farms_api import FarmQueryAPI
from asset_farms.clock import FixedClock
from asset_farms.farming.accrual import NANOS_PER_DAY
from asset_farms.storage.sqlite import SQLiteFarmStore

from tests.mocks import MockFarmStore

T0 = 1_700_000_000 * 10**9  # ns
ONE_DAY = NANOS_PER_DAY


# ── Report metadata ──────────────────────────────────────────────


def pytest_configure(config):
    """Add accrual constants to the HTML report Environment table."""
    meta = config.stash.setdefault(metadata_key, {})
    meta["Start timestamp (ns)"] = str(T0)
    meta["Nanos per day"] = str(NANOS_PER_DAY)


@pytest.fixture
def clock():
    """Fixed clock starting at T0."""
    return FixedClock(T0)


@pytest.fixture
async def store():
    """Initialized in-memory SQLiteFarmStore."""
    s = SQLiteFarmStore(":memory:")
    await s.initialize()
    yield s
    await s.close()


@pytest.fixture
def mock_store():
    return MockFarmStore()


@pytest.fixture
def query_api(store, clock):
    return FarmQueryAPI(store, clock)
