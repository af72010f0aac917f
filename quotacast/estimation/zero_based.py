"""
Zero-based estimation: a single synthetic operation standing in for a radical redesign.
"""

from __future__ import annotations

from quotacast.estimation.adjustment import assemble_forecast
from quotacast.estimation.data_model import (
    BreakdownEntry,
    ConfidenceLevel,
    CostModel,
    EstimationParams,
    Forecast,
)
from quotacast.workflow.optimized import ZeroBasedSolution

ZERO_BASED_STEP_ID = "zero-based-solution"
MIN_RESIDUAL_VIBES = 1.0  # A redesign always keeps some interaction

_RISK_CONFIDENCE: dict[str, ConfidenceLevel] = {
    "low": "high",
    "medium": "medium",
    "high": "low",
}


def zero_based_entry(solution: ZeroBasedSolution, cost_model: CostModel) -> BreakdownEntry:
    """Units left from the cost model's full-redesign baseline after the claimed savings."""
    remaining = 1 - max(0.0, min(100.0, solution.potential_savings)) / 100
    vibes = max(MIN_RESIDUAL_VIBES, cost_model.zero_based_baseline_vibes * remaining)
    specs = max(0.0, cost_model.zero_based_baseline_specs * remaining)
    return BreakdownEntry(
        step_id=ZERO_BASED_STEP_ID,
        description=solution.radical_approach,
        vibes=vibes,
        specs=specs,
        cost=vibes * cost_model.vibe_unit_cost + specs * cost_model.spec_unit_cost,
    )


def estimate_zero_based(
    solution: ZeroBasedSolution,
    cost_model: CostModel,
    params: EstimationParams | None = None,
) -> Forecast:
    """Zero-based forecast; confidence follows implementation risk (low risk -> high)."""
    return assemble_forecast(
        "zero-based",
        [zero_based_entry(solution, cost_model)],
        _RISK_CONFIDENCE.get(solution.implementation_risk, "medium"),
        params,
        min_vibes=MIN_RESIDUAL_VIBES,
    )
