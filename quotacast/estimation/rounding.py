"""
Rounding rule for all published figures: round-half-up via decimal.

Units to 0.1, dollars to 0.0001, percentages to 0.1. Applied when a Forecast
or SavingsResult is built: breakdown entries first, then the totals summed
from them. Intermediate arithmetic stays in float.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

UNIT_QUANTUM = Decimal("0.1")
COST_QUANTUM = Decimal("0.0001")
PERCENT_QUANTUM = Decimal("0.1")


def round_half_up(value: float, quantum: Decimal) -> float:
    """Round value to quantum, halves away from zero."""
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


def round_units(value: float) -> float:
    return round_half_up(value, UNIT_QUANTUM)


def round_cost(value: float) -> float:
    return round_half_up(value, COST_QUANTUM)


def round_percent(value: float) -> float:
    return round_half_up(value, PERCENT_QUANTUM)
