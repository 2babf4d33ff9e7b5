"""
Demo seed data and synthetic reading generator.

``generate_readings()`` takes its clock and random source as parameters
so callers (and tests) control both. ``default_seed()`` builds the demo
catalog, account directory and one meter's synthetic history.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from __future__ import annotations

import random
from collections.abc import Callable
from datetime import UTC, datetime, timedelta

from joi_energy.store.models import Account, PricePlan, Reading, SeedData

DEFAULT_PRICE_PLANS: tuple[PricePlan, ...] = (
    PricePlan("price-plan-0", "Dr Evil's Dark Energy", 10.0),
    PricePlan("price-plan-1", "The Green Eco", 2.0),
    PricePlan("price-plan-2", "Power for Everyone", 1.0),
)

DEFAULT_ACCOUNTS: dict[str, Account] = {
    "smart-meter-0": Account("price-plan-0", "Sarah"),
    "smart-meter-1": Account("price-plan-1", "Peter"),
    "smart-meter-2": Account("price-plan-0", "Charlie"),
    "smart-meter-3": Account("price-plan-2", "Andrea"),
    "smart-meter-4": Account("price-plan-1", "Alex"),
}


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


def generate_readings(
    duration: timedelta = timedelta(days=10),
    interval: timedelta = timedelta(hours=6),
    clock: Callable[[], datetime] = _utc_now,
    rng: random.Random | None = None,
) -> list[Reading]:
    """Generate back-dated synthetic readings, newest first.

    Starts at ``clock()`` and steps back by ``interval`` while the
    timestamp is still strictly after ``now - duration``. With the
    defaults this yields 40 readings.

    Args:
        duration: Length of history to generate.
        interval: Gap between consecutive readings. Must be positive.
        clock: Returns the timezone-aware "now" to count back from.
        rng: Random source for reading values in [0, 1). A fresh
            ``random.Random()`` is used when omitted.

    Returns:
        List of Reading objects ordered newest to oldest.

    Raises:
        ValueError: If ``interval`` is not positive.
    """
    if interval <= timedelta(0):
        raise ValueError("interval must be positive")
    rng = rng or random.Random()

    now = clock()
    cutoff = now - duration
    readings: list[Reading] = []
    ts = now
    while ts > cutoff:
        readings.append(Reading(time=ts, reading=rng.random()))
        ts -= interval
    return readings


def default_seed(
    meter_id: str = "smart-meter-1",
    duration: timedelta = timedelta(days=10),
    interval: timedelta = timedelta(hours=6),
    clock: Callable[[], datetime] = _utc_now,
    rng: random.Random | None = None,
) -> SeedData:
    """Build the demo SeedData with synthetic history for *meter_id*."""
    history = generate_readings(duration, interval, clock=clock, rng=rng)
    return SeedData(
        accounts=dict(DEFAULT_ACCOUNTS),
        price_plans=DEFAULT_PRICE_PLANS,
        readings={meter_id: tuple(history)},
    )
