"""
Service configuration from environment variables using Pydantic BaseSettings.

Every setting has a default so the service starts with no environment;
values may be overridden via env vars or a ``.env`` file.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Attributes:
        HOST: Interface the HTTP server binds to.
        PORT: TCP port the HTTP server listens on.
        LOG_LEVEL: Root logging level name (DEBUG, INFO, ...).
        LOG_JSON: Emit structured JSON log lines when true.
        SEED_METER_ID: Meter that receives synthetic demo readings.
        SEED_DURATION_DAYS: Days of synthetic history to generate.
        SEED_INTERVAL_HOURS: Hours between synthetic readings.
        SEED_RANDOM_SEED: Optional RNG seed for reproducible demo data.
    """

    HOST: str = "0.0.0.0"
    PORT: int = 8080
    LOG_LEVEL: str = "INFO"
    LOG_JSON: bool = True
    SEED_METER_ID: str = "smart-meter-1"
    SEED_DURATION_DAYS: int = Field(default=10, ge=0)
    SEED_INTERVAL_HOURS: int = Field(default=6, ge=1)
    SEED_RANDOM_SEED: int | None = None

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @field_validator("LOG_LEVEL")
    @classmethod
    def log_level_must_be_known(cls, v: str) -> str:
        """Normalize LOG_LEVEL to upper case and reject unknown names."""
        level = v.upper()
        if level not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"LOG_LEVEL must be a logging level name, got {v!r}")
        return level


def get_settings() -> Settings:
    """Create and return a Settings instance.

    Returns:
        Settings: Validated configuration from environment variables.
    """
    return Settings()
