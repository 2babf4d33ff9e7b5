"""
Consumption cost calculations for price plans.

Pure functions with no shared state: callers pass in a copied list of
readings and a plan. No I/O, no clock, no locking.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Raise DegenerateIntervalError instead of dividing by zero
- 2026-10-18: Count elapsed time in whole seconds; reject non-finite costs

TODO:
- None
"""

import math
from collections.abc import Sequence
from datetime import timedelta

from joi_energy.errors import CostOverflowError, DegenerateIntervalError
from joi_energy.store.models import PricePlan, Reading

SECONDS_PER_HOUR = 3600.0
_ONE_SECOND = timedelta(seconds=1)


def average_value(readings: Sequence[Reading]) -> float:
    """Return the arithmetic mean of reading values, ``0.0`` when empty."""
    if not readings:
        return 0.0
    return sum(r.reading for r in readings) / len(readings)


def elapsed_hours(readings: Sequence[Reading]) -> float:
    """Return the fractional hours between the earliest and latest reading.

    Uses the true min/max timestamps, so input order does not matter.
    The span is counted in whole seconds (sub-second remainders are
    dropped), then converted with sub-hour precision (120 seconds ->
    0.0333...).

    Args:
        readings: Readings with timezone-aware timestamps.

    Returns:
        Elapsed hours, ``0.0`` for empty or single-element input.
    """
    if len(readings) < 2:
        return 0.0
    earliest = min(r.time for r in readings)
    latest = max(r.time for r in readings)
    seconds = (latest - earliest) // _ONE_SECOND
    return seconds / SECONDS_PER_HOUR


def average_hourly_cost(plan: PricePlan, readings: Sequence[Reading]) -> float:
    """Return the average hourly cost of *readings* under *plan*.

    Computed as ``(average_value / elapsed_hours) * plan.unit_rate``. The
    plan's weekday multipliers are not applied.

    Args:
        plan: Price plan supplying the flat unit rate.
        readings: Consumption history for one meter.

    Returns:
        Average hourly cost, ``0.0`` for an empty history.

    Raises:
        DegenerateIntervalError: If the readings are non-empty but span
            less than one whole second.
        CostOverflowError: If the result is not a finite number.
    """
    if not readings:
        return 0.0
    hours = elapsed_hours(readings)
    if hours == 0.0:
        raise DegenerateIntervalError(len(readings))
    cost = (average_value(readings) / hours) * plan.unit_rate
    if not math.isfinite(cost):
        raise CostOverflowError(plan.plan_id)
    return cost
