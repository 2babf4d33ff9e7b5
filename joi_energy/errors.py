"""
Domain exceptions for the readings store and pricing engine.

The transport layer maps these onto HTTP status codes in
``joi_energy.main``; the core raises them and never catches them.

CHANGELOG:
- 2026-10-18: Initial creation
- 2026-10-18: Add CostOverflowError

TODO:
- None
"""


class PricingError(Exception):
    """Base class for all readings/pricing domain errors."""


class MeterNotFoundError(PricingError, LookupError):
    """Raised when a smart meter id is absent from the account directory.

    Attributes:
        meter_id: The smart meter id that could not be resolved.
    """

    def __init__(self, meter_id: str) -> None:
        self.meter_id = meter_id
        super().__init__(f"Smart meter {meter_id!r} has no account.")


class DegenerateIntervalError(PricingError, ValueError):
    """Raised when a non-empty reading set spans zero elapsed time.

    Average hourly usage is undefined when every reading shares one
    timestamp (including the single-reading case).

    Attributes:
        reading_count: Number of readings in the offending set.
    """

    def __init__(self, reading_count: int) -> None:
        self.reading_count = reading_count
        super().__init__(
            f"Cannot compute hourly usage: {reading_count} reading(s) "
            "span zero elapsed time."
        )


class CostOverflowError(PricingError, ArithmeticError):
    """Raised when a computed cost is not a finite number.

    Readings near the float range can overflow the average or the
    hourly rate even though each value is finite on its own.

    Attributes:
        plan_id: Plan whose cost could not be represented.
    """

    def __init__(self, plan_id: str) -> None:
        self.plan_id = plan_id
        super().__init__(
            f"Cost under plan {plan_id!r} overflows a finite number."
        )
