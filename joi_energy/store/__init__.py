"""
Readings store package: value types, the lock-guarded store and seed data.

CHANGELOG:
- 2026-10-18: Initial creation

TODO:
- None
"""

from joi_energy.store.models import Account, PricePlan, Reading, SeedData
from joi_energy.store.readings_store import ReadingsStore, StoreStats
from joi_energy.store.seed import default_seed, generate_readings

__all__ = [
    "Account",
    "PricePlan",
    "Reading",
    "ReadingsStore",
    "SeedData",
    "StoreStats",
    "default_seed",
    "generate_readings",
]
