"""
Pricing services: pure cost engine and plan ranking.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from joi_energy.services.cost import average_hourly_cost, average_value, elapsed_hours
from joi_energy.services.ranking import (
    PlanComparison,
    PlanCost,
    compare_plans,
    recommend_plans,
)

__all__ = [
    "PlanComparison",
    "PlanCost",
    "average_hourly_cost",
    "average_value",
    "compare_plans",
    "elapsed_hours",
    "recommend_plans",
]
