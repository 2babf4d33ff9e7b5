"""
Immutable value types held by the readings store.

Defines Reading, PricePlan, Account and the SeedData parameter object
used to construct a ReadingsStore.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Add SeedData so stores are built from explicit parameters

TODO:
- None
"""

from __future__ import annotations

import calendar
import functools
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType


@dataclass(frozen=True)
class Reading:
    """A single electricity consumption reading.

    Attributes:
        time: Timezone-aware measurement timestamp. The original offset
            is preserved, never normalized to UTC.
        reading: Consumption magnitude (kW). Not validated as >= 0.
    """

    time: datetime
    reading: float


@functools.total_ordering
@dataclass(frozen=True, eq=False)
class PricePlan:
    """An electricity price plan offered by a supplier.

    Plans compare and sort by ``unit_rate`` only: two plans with the same
    rate are equal regardless of id or name. ``sorted()`` is stable, so
    equal-rate plans keep their catalog order.

    Attributes:
        plan_id: Unique identifier within the catalog (e.g. "price-plan-0").
        plan_name: Human-readable plan name.
        unit_rate: Cost per kWh.
        rate_multipliers: Per-weekday multipliers keyed by
            ``calendar.MONDAY`` .. ``calendar.SUNDAY``. Reserved; the cost
            formula always uses the flat ``unit_rate``.
    """

    plan_id: str
    plan_name: str
    unit_rate: float
    rate_multipliers: Mapping[int, float] = field(
        default_factory=lambda: MappingProxyType({}),
    )

    def __post_init__(self) -> None:
        for weekday in self.rate_multipliers:
            if weekday not in range(calendar.MONDAY, calendar.SUNDAY + 1):
                raise ValueError(f"Invalid weekday key: {weekday!r}")
        object.__setattr__(
            self, "rate_multipliers", MappingProxyType(dict(self.rate_multipliers)),
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PricePlan):
            return NotImplemented
        return self.unit_rate == other.unit_rate

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, PricePlan):
            return NotImplemented
        return self.unit_rate < other.unit_rate

    def __hash__(self) -> int:
        return hash(self.unit_rate)


@dataclass(frozen=True)
class Account:
    """A customer account bound to one smart meter.

    Attributes:
        price_plan_id: Id of the plan the account is subscribed to.
        owner: Account holder's name.
    """

    price_plan_id: str
    owner: str


@dataclass(frozen=True)
class SeedData:
    """Initial contents for a ReadingsStore.

    Attributes:
        accounts: Fixed smart meter id -> Account directory.
        price_plans: Fixed plan catalog, in catalog order.
        readings: Initial readings per smart meter id.
    """

    accounts: Mapping[str, Account] = field(default_factory=dict)
    price_plans: tuple[PricePlan, ...] = ()
    readings: Mapping[str, tuple[Reading, ...]] = field(default_factory=dict)
