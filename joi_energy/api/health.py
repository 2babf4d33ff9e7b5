"""
Health check endpoint reporting readings store contents.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from fastapi import APIRouter
from pydantic import BaseModel

from joi_energy.api.deps import Store

router = APIRouter(tags=["health"])


class HealthResponse(BaseModel):
    """Schema for the health response.

    Attributes:
        status: Always "ok" while the process can serve requests.
        meters: Number of meters with stored readings.
        readings: Total stored readings across all meters.
    """

    status: str
    meters: int
    readings: int


@router.get("/health", response_model=HealthResponse)
def health_check(store: Store) -> HealthResponse:
    """Report store size alongside liveness."""
    stats = store.stats()
    return HealthResponse(status="ok", meters=stats.meters, readings=stats.readings)
