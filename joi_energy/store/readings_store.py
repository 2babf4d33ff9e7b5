"""
Thread-safe in-memory store for smart meter readings.

Holds the only mutable state in the service: an append-only list of
readings per smart meter. The account directory and plan catalog are
fixed at construction and read without locking.

Operations:
- append_readings(meter_id, readings): extend a meter's history in order.
- get_readings(meter_id): copy of a meter's history ([] when unknown).
- get_price_plans(): copy of the plan catalog.
- get_subscribed_plan_id(meter_id): strict account lookup.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Add stats() for the health endpoint

TODO:
- None
"""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterable
from dataclasses import dataclass
from types import MappingProxyType

from joi_energy.errors import MeterNotFoundError
from joi_energy.store.models import Account, PricePlan, Reading, SeedData

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoreStats:
    """Point-in-time summary of store contents.

    Attributes:
        meters: Number of meters with at least one stored reading list.
        readings: Total number of stored readings across all meters.
    """

    meters: int
    readings: int


class ReadingsStore:
    """Concurrency-safe mapping of smart meter id -> ordered readings.

    A single lock guards the readings map. Reads copy out under the lock
    so callers never hold an alias into store state.

    Args:
        seed: Accounts, plan catalog and initial readings. Plan ids must
              be unique.

    Raises:
        ValueError: If the catalog contains duplicate plan ids.
    """

    def __init__(self, seed: SeedData | None = None) -> None:
        seed = seed or SeedData()
        plan_ids = [plan.plan_id for plan in seed.price_plans]
        duplicates = sorted({pid for pid in plan_ids if plan_ids.count(pid) > 1})
        if duplicates:
            raise ValueError(f"Duplicate price plan ids: {', '.join(duplicates)}")

        self._accounts = MappingProxyType(dict(seed.accounts))
        self._price_plans = tuple(seed.price_plans)
        self._lock = threading.Lock()
        self._readings: dict[str, list[Reading]] = {
            meter_id: list(readings) for meter_id, readings in seed.readings.items()
        }

    # ------------------------------------------------------------------
    # Readings (locked)
    # ------------------------------------------------------------------

    def append_readings(self, meter_id: str, readings: Iterable[Reading]) -> None:
        """Append *readings* to the meter's history in submitted order.

        No sorting or deduplication by timestamp is performed. The meter's
        history is created when absent.

        Args:
            meter_id: Smart meter identifier.
            readings: Readings to append.
        """
        batch = list(readings)
        with self._lock:
            self._readings.setdefault(meter_id, []).extend(batch)
        logger.debug("Stored %d reading(s) for %s", len(batch), meter_id)

    def get_readings(self, meter_id: str) -> list[Reading]:
        """Return a copy of the meter's readings, or ``[]`` if unknown."""
        with self._lock:
            return list(self._readings.get(meter_id, ()))

    def stats(self) -> StoreStats:
        """Return meter and reading counts."""
        with self._lock:
            return StoreStats(
                meters=len(self._readings),
                readings=sum(len(r) for r in self._readings.values()),
            )

    # ------------------------------------------------------------------
    # Catalog and account directory (immutable)
    # ------------------------------------------------------------------

    def get_price_plans(self) -> list[PricePlan]:
        """Return a copy of the plan catalog in catalog order."""
        return list(self._price_plans)

    def get_account(self, meter_id: str) -> Account:
        """Return the account bound to *meter_id*.

        Raises:
            MeterNotFoundError: If the meter is not in the account directory.
        """
        try:
            return self._accounts[meter_id]
        except KeyError:
            raise MeterNotFoundError(meter_id) from None

    def get_subscribed_plan_id(self, meter_id: str) -> str:
        """Return the plan id the meter's account is subscribed to.

        Raises:
            MeterNotFoundError: If the meter is not in the account directory.
        """
        return self.get_account(meter_id).price_plan_id
