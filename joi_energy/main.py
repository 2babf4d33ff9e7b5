"""
FastAPI application entry point for the JOI Energy pricing API.

Registers the readings, price plan and health routers, maps domain
errors onto HTTP statuses, and seeds the readings store at startup.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Startup lifespan configures logging and eagerly seeds the store
- 2026-10-18: Map MeterNotFoundError -> 404, DegenerateIntervalError -> 422
- 2026-10-18: Map CostOverflowError -> 422

TODO:
- None
"""

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from joi_energy.api.deps import init_readings_store
from joi_energy.api.health import router as health_router
from joi_energy.api.price_plans import router as price_plans_router
from joi_energy.api.readings import router as readings_router
from joi_energy.config import get_settings
from joi_energy.errors import (
    CostOverflowError,
    DegenerateIntervalError,
    MeterNotFoundError,
)
from joi_energy.logging_config import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan: configure logging and seed the store."""
    settings = get_settings()
    setup_logging(level=settings.LOG_LEVEL, json_output=settings.LOG_JSON)
    init_readings_store()
    logger.info("Readings store ready")
    yield


app = FastAPI(
    title="JOI Energy API",
    description="Smart meter readings and price plan comparison.",
    version="0.1.0",
    lifespan=lifespan,
)

app.include_router(readings_router)
app.include_router(price_plans_router)
app.include_router(health_router)


@app.exception_handler(MeterNotFoundError)
async def meter_not_found_handler(
    request: Request, exc: MeterNotFoundError,
) -> JSONResponse:
    """Return 404 when a meter has no account."""
    logger.warning("Unknown smart meter %s on %s", exc.meter_id, request.url.path)
    return JSONResponse(status_code=404, content={"detail": str(exc)})


@app.exception_handler(DegenerateIntervalError)
async def degenerate_interval_handler(
    request: Request, exc: DegenerateIntervalError,
) -> JSONResponse:
    """Return 422 when a meter's readings span zero elapsed time."""
    logger.warning("Degenerate reading interval on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.exception_handler(CostOverflowError)
async def cost_overflow_handler(
    request: Request, exc: CostOverflowError,
) -> JSONResponse:
    """Return 422 when a plan's cost cannot be represented as a number."""
    logger.warning("Cost overflow on %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})


@app.get("/")
async def root() -> dict:
    """Liveness check endpoint.

    Returns:
        dict: JSON object with application status.
    """
    return {"status": "ok"}


def serve() -> None:
    """Run the API under uvicorn using HOST/PORT from settings."""
    settings = get_settings()
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    serve()
