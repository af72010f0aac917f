"""
Savings calculator: percentage and absolute reduction from one forecast to another.
"""

from __future__ import annotations

from quotacast.estimation.data_model import Forecast, SavingsResult
from quotacast.estimation.rounding import round_cost, round_percent


def reduction_percentage(before: float, after: float) -> float:
    """max(0, (before - after) / before) * 100; 0 when before is 0."""
    if before <= 0:
        return 0.0
    return max(0.0, (before - after) / before) * 100


def calculate_savings(before: Forecast, after: Forecast) -> SavingsResult:
    """
    Compare two forecasts. Pure; never negative.

    The overall percentage is the mean of the vibe, spec and cost reductions,
    counting only dimensions with a non-zero baseline (a dimension with nothing
    to consume has nothing to save).
    """
    pairs = (
        (before.vibes_consumed, after.vibes_consumed),
        (before.specs_consumed, after.specs_consumed),
        (before.estimated_cost, after.estimated_cost),
    )
    vibe_pct, spec_pct, cost_pct = (reduction_percentage(b, a) for b, a in pairs)

    counted = [
        pct for (b, _), pct in zip(pairs, (vibe_pct, spec_pct, cost_pct)) if b > 0
    ]
    total = sum(counted) / len(counted) if counted else 0.0

    return SavingsResult(
        vibe_reduction=round_percent(vibe_pct),
        spec_reduction=round_percent(spec_pct),
        cost_reduction=round_percent(cost_pct),
        cost_savings=round_cost(max(0.0, before.estimated_cost - after.estimated_cost)),
        total_savings_percentage=round_percent(total),
    )
