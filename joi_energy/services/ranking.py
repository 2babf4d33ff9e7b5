"""
Price plan comparison and recommendation for a smart meter.

Reads a meter's history from the store once (copy-out, lock released),
then ranks every catalog plan by unit rate and attaches its average
hourly cost. Ranking uses ``sorted()`` on PricePlan ordering, which is
stable: plans with equal unit rates keep catalog order.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

import logging
from dataclasses import dataclass

from joi_energy.services.cost import average_hourly_cost
from joi_energy.store.models import PricePlan, Reading
from joi_energy.store.readings_store import ReadingsStore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PlanCost:
    """A price plan id paired with its computed average hourly cost."""

    plan_id: str
    cost: float


@dataclass(frozen=True)
class PlanComparison:
    """Cost of every plan for one meter plus its current supplier.

    Attributes:
        supplier_id: Plan id the meter's account is subscribed to.
        plans: plan_id -> cost, insertion-ordered by ascending unit rate.
    """

    supplier_id: str
    plans: dict[str, float]


def _rank(plans: list[PricePlan], readings: list[Reading]) -> list[PlanCost]:
    return [
        PlanCost(plan_id=plan.plan_id, cost=average_hourly_cost(plan, readings))
        for plan in sorted(plans)
    ]


def compare_plans(store: ReadingsStore, meter_id: str) -> PlanComparison:
    """Compare the average hourly cost of every plan for *meter_id*.

    Args:
        store: Readings store holding the meter's history and catalog.
        meter_id: Smart meter identifier.

    Returns:
        PlanComparison with the meter's supplier id and per-plan costs.

    Raises:
        MeterNotFoundError: If the meter is not in the account directory.
        DegenerateIntervalError: If the meter's readings span zero time.
    """
    supplier_id = store.get_subscribed_plan_id(meter_id)
    readings = store.get_readings(meter_id)
    ranked = _rank(store.get_price_plans(), readings)
    logger.debug(
        "Compared %d plan(s) for %s over %d reading(s)",
        len(ranked), meter_id, len(readings),
    )
    return PlanComparison(
        supplier_id=supplier_id,
        plans={entry.plan_id: entry.cost for entry in ranked},
    )


def recommend_plans(
    store: ReadingsStore,
    meter_id: str,
    limit: int,
) -> list[PlanCost]:
    """Return the *limit* cheapest-rate plans for *meter_id* with costs.

    Does not consult the account directory: an unknown meter has an
    empty history and every plan costs ``0.0``.

    Args:
        store: Readings store holding the meter's history and catalog.
        meter_id: Smart meter identifier.
        limit: Maximum number of plans to return. ``0`` yields ``[]``;
            values above the catalog size return the whole ranking.

    Returns:
        Ranked list of PlanCost entries, a prefix of the full ranking.

    Raises:
        ValueError: If ``limit`` is negative.
        DegenerateIntervalError: If the meter's readings span zero time.
    """
    if limit < 0:
        raise ValueError(f"limit must be >= 0, got {limit}")
    readings = store.get_readings(meter_id)
    plans = sorted(store.get_price_plans())[:limit]
    return _rank(plans, readings)
