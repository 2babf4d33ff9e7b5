"""
Shared test fixtures for the pricing API tests.

Provides an isolated ReadingsStore built from an explicit SeedData and a
TestClient whose store dependency is overridden to use it.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from joi_energy.api.deps import get_readings_store
from joi_energy.main import app
from joi_energy.store import Account, PricePlan, Reading, ReadingsStore, SeedData

# All Settings environment variable names, used for cleanup.
_ALL_ENV_VARS = (
    "HOST",
    "PORT",
    "LOG_LEVEL",
    "LOG_JSON",
    "SEED_METER_ID",
    "SEED_DURATION_DAYS",
    "SEED_INTERVAL_HOURS",
    "SEED_RANDOM_SEED",
)

T0 = datetime(2020, 11, 29, 8, 0, 0, tzinfo=UTC)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Remove settings env vars and isolate from .env files before each test."""
    for var in _ALL_ENV_VARS:
        monkeypatch.delenv(var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture()
def price_plans() -> tuple[PricePlan, ...]:
    """The three-plan catalog, deliberately not in rate order."""
    return (
        PricePlan("price-plan-0", "Dr Evil's Dark Energy", 10.0),
        PricePlan("price-plan-1", "The Green Eco", 2.0),
        PricePlan("price-plan-2", "Power for Everyone", 1.0),
    )


@pytest.fixture()
def accounts() -> dict[str, Account]:
    """Account directory covering smart-meter-0 and smart-meter-1."""
    return {
        "smart-meter-0": Account("price-plan-0", "Sarah"),
        "smart-meter-1": Account("price-plan-1", "Peter"),
    }


@pytest.fixture()
def three_readings() -> list[Reading]:
    """Readings one minute apart with values 1.0, 2.0, 3.0."""
    return [
        Reading(T0, 1.0),
        Reading(T0 + timedelta(minutes=1), 2.0),
        Reading(T0 + timedelta(minutes=2), 3.0),
    ]


@pytest.fixture()
def store(
    accounts: dict[str, Account], price_plans: tuple[PricePlan, ...],
) -> ReadingsStore:
    """An empty-history store with the test catalog and accounts."""
    return ReadingsStore(SeedData(accounts=accounts, price_plans=price_plans))


@pytest.fixture()
def client(store: ReadingsStore) -> TestClient:
    """Create a TestClient whose store dependency returns *store*.

    Args:
        store: Isolated readings store for this test.

    Returns:
        TestClient: Configured test client with dependency overrides.
    """
    app.dependency_overrides[get_readings_store] = lambda: store

    yield TestClient(app)

    app.dependency_overrides.clear()
