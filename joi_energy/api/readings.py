"""
Readings API endpoints for smart meter consumption data.

Provides POST /readings/create to append a batch of readings for a meter
and GET /readings/read/{smart_meter_id} to return a meter's history.
POST /readings/store is kept as an alias of /readings/create for older
clients.

Handlers are plain ``def`` functions: FastAPI runs them in its worker
thread pool and the store serializes access with its own lock.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Add /readings/store alias
- 2026-10-18: Reject NaN and infinite reading values

TODO:
- None
"""

import logging

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse
from pydantic import AwareDatetime, BaseModel, Field

from joi_energy.api.deps import Store
from joi_energy.store import Reading, ReadingsStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/readings", tags=["readings"])


# ---------------------------------------------------------------------------
# Pydantic request / response schemas
# ---------------------------------------------------------------------------


class ElectricityReading(BaseModel):
    """Schema for a single reading on the wire.

    Attributes:
        time: RFC 3339 timestamp with a timezone offset. Naive
            timestamps are rejected.
        reading: Consumption value in kW. NaN and infinities are
            rejected.
    """

    time: AwareDatetime
    reading: float = Field(allow_inf_nan=False)


class StoreReadingsRequest(BaseModel):
    """Schema for the readings upload body.

    Attributes:
        smart_meter_id: Meter the readings belong to.
        electricity_readings: Readings in the order they should be stored.
    """

    smart_meter_id: str
    electricity_readings: list[ElectricityReading]


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------


def _append(store: ReadingsStore, request: StoreReadingsRequest) -> None:
    readings = [
        Reading(time=r.time, reading=r.reading) for r in request.electricity_readings
    ]
    store.append_readings(request.smart_meter_id, readings)
    logger.info(
        "Received %d reading(s) for %s", len(readings), request.smart_meter_id,
    )


@router.post("/create", response_class=PlainTextResponse)
def create_readings(request: StoreReadingsRequest, store: Store) -> str:
    """Append a batch of readings to a meter's history.

    Args:
        request: Validated body with meter id and readings.
        store: Injected readings store.

    Returns:
        str: Plain-text confirmation.
    """
    _append(store, request)
    return "Readings created successfully"


@router.post("/store", response_class=PlainTextResponse)
def store_readings(request: StoreReadingsRequest, store: Store) -> str:
    """Alias of :func:`create_readings` kept for older clients."""
    _append(store, request)
    return "Readings stored successfully"


@router.get("/read/{smart_meter_id}", response_model=list[ElectricityReading])
def get_readings(smart_meter_id: str, store: Store) -> list[ElectricityReading]:
    """Return a meter's readings in stored order.

    Unknown meters are not an error: they have an empty history.

    Args:
        smart_meter_id: Meter identifier (path parameter).
        store: Injected readings store.

    Returns:
        list[ElectricityReading]: Stored readings, possibly empty.
    """
    return [
        ElectricityReading(time=r.time, reading=r.reading)
        for r in store.get_readings(smart_meter_id)
    ]
