"""
FastAPI dependency providers.

Provides the process-wide ReadingsStore for use with FastAPI's
Depends() mechanism. Tests replace it through
``app.dependency_overrides[get_readings_store]``.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Lazy store init via get_settings() as a startup safety net

TODO:
- None
"""

import logging
import random
import threading
from datetime import timedelta
from typing import Annotated

from fastapi import Depends

from joi_energy.config import Settings, get_settings
from joi_energy.store import ReadingsStore, default_seed

logger = logging.getLogger(__name__)

_readings_store: ReadingsStore | None = None
_init_lock = threading.Lock()


def build_readings_store(settings: Settings) -> ReadingsStore:
    """Build a store seeded with the demo catalog and synthetic history.

    Args:
        settings: Supplies the seeded meter id, history length, interval
            and optional RNG seed.

    Returns:
        ReadingsStore: Newly constructed store.
    """
    seed = default_seed(
        meter_id=settings.SEED_METER_ID,
        duration=timedelta(days=settings.SEED_DURATION_DAYS),
        interval=timedelta(hours=settings.SEED_INTERVAL_HOURS),
        rng=random.Random(settings.SEED_RANDOM_SEED),
    )
    store = ReadingsStore(seed)
    stats = store.stats()
    logger.info(
        "Readings store seeded: %d reading(s) for %s, %d plan(s)",
        stats.readings,
        settings.SEED_METER_ID,
        len(seed.price_plans),
    )
    return store


def init_readings_store() -> ReadingsStore:
    """Return the process-wide store, building it on first call.

    Called at startup (via lifespan) and lazily on first request.
    """
    global _readings_store  # noqa: PLW0603
    with _init_lock:
        if _readings_store is None:
            _readings_store = build_readings_store(get_settings())
    return _readings_store


def get_readings_store() -> ReadingsStore:
    """FastAPI dependency: the process-wide ReadingsStore."""
    return init_readings_store()


# Annotated dependency for use in FastAPI route signatures:
#   def my_endpoint(store: Store): ...
Store = Annotated[ReadingsStore, Depends(get_readings_store)]
