"""
Price plan API endpoints: compare every plan and recommend the cheapest.

Provides GET /price_plans/compare_all/{smart_meter_id} and
GET /price_plans/recommend/{smart_meter_id}?limit=N. Both compute each
plan's average hourly cost over the meter's stored readings; domain
errors are mapped to HTTP statuses by the handlers in ``joi_energy.main``.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from fastapi import APIRouter, Query
from pydantic import BaseModel

from joi_energy.api.deps import Store
from joi_energy.services.ranking import compare_plans, recommend_plans

router = APIRouter(prefix="/price_plans", tags=["price_plans"])


class PricePlanComparisonResponse(BaseModel):
    """Schema for the compare-all response.

    Attributes:
        price_plans: plan_id -> average hourly cost, cheapest rate first.
        supplier_id: Plan id the meter is currently subscribed to.
    """

    price_plans: dict[str, float]
    supplier_id: str


@router.get(
    "/compare_all/{smart_meter_id}", response_model=PricePlanComparisonResponse,
)
def compare_all(smart_meter_id: str, store: Store) -> PricePlanComparisonResponse:
    """Compare every catalog plan's cost for a meter.

    Args:
        smart_meter_id: Meter identifier (path parameter).
        store: Injected readings store.

    Returns:
        PricePlanComparisonResponse: Per-plan costs and current supplier.

    Raises:
        MeterNotFoundError: Mapped to 404 when the meter has no account.
        DegenerateIntervalError: Mapped to 422 when readings span zero time.
    """
    comparison = compare_plans(store, smart_meter_id)
    return PricePlanComparisonResponse(
        price_plans=comparison.plans,
        supplier_id=comparison.supplier_id,
    )


@router.get("/recommend/{smart_meter_id}", response_model=list[dict[str, float]])
def recommend(
    smart_meter_id: str,
    store: Store,
    limit: int = Query(..., ge=0, description="Maximum number of plans"),
) -> list[dict[str, float]]:
    """Recommend the cheapest-rate plans for a meter.

    Each entry is a single-key object ``{plan_id: cost}``, in rank order.
    Unknown meters are not an error; every plan then costs 0.0.

    Args:
        smart_meter_id: Meter identifier (path parameter).
        store: Injected readings store.
        limit: Maximum number of plans to return (query parameter).

    Returns:
        list[dict[str, float]]: Ranked singleton mappings.
    """
    return [
        {entry.plan_id: entry.cost}
        for entry in recommend_plans(store, smart_meter_id, limit)
    ]
