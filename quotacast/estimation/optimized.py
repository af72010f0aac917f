"""
Optimized estimation: naive breakdown reduced by each optimization's stated savings.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import replace

from quotacast.estimation.adjustment import assemble_forecast
from quotacast.estimation.data_model import (
    BreakdownEntry,
    CostModel,
    EstimationParams,
    Forecast,
)
from quotacast.estimation.naive import naive_breakdown
from quotacast.workflow.optimized import Optimization, OptimizedWorkflow


def _bounded_percent(value: float) -> float:
    return max(0.0, min(100.0, value))


def _reductions_by_step(
    optimizations: tuple[Optimization, ...],
) -> dict[str, tuple[float, float, float]]:
    """
    Sum (vibes, specs, percentage) savings per affected step across all optimizations.

    Overlapping optimizations add up; each sum is bounded to 0-100.
    """
    totals: dict[str, list[float]] = defaultdict(lambda: [0.0, 0.0, 0.0])
    for opt in optimizations:
        savings = opt.estimated_savings
        # A step listed twice in one optimization is reduced once
        for step_id in dict.fromkeys(opt.steps_affected):
            acc = totals[step_id]
            acc[0] += savings.vibes
            acc[1] += savings.specs
            acc[2] += savings.percentage
    return {
        step_id: (
            _bounded_percent(acc[0]),
            _bounded_percent(acc[1]),
            _bounded_percent(acc[2]),
        )
        for step_id, acc in totals.items()
    }


def optimized_breakdown(
    optimized_workflow: OptimizedWorkflow, cost_model: CostModel
) -> list[BreakdownEntry]:
    """Naive breakdown with affected entries rewritten to their post-optimization values."""
    reductions = _reductions_by_step(optimized_workflow.optimizations)
    entries: list[BreakdownEntry] = []
    for entry in naive_breakdown(optimized_workflow.workflow, cost_model):
        reduction = reductions.get(entry.step_id)
        if reduction is None:
            entries.append(entry)
            continue
        vibe_pct, spec_pct, cost_pct = reduction
        entries.append(
            replace(
                entry,
                vibes=max(0.0, entry.vibes * (1 - vibe_pct / 100)),
                specs=max(0.0, entry.specs * (1 - spec_pct / 100)),
                cost=max(0.0, entry.cost * (1 - cost_pct / 100)),
            )
        )
    return entries


def estimate_optimized(
    optimized_workflow: OptimizedWorkflow,
    cost_model: CostModel,
    params: EstimationParams | None = None,
) -> Forecast:
    """
    Optimized forecast. Baseline confidence is high: the optimizations carry
    explicit savings figures, so complexity is not re-consulted.
    """
    return assemble_forecast(
        "optimized",
        optimized_breakdown(optimized_workflow, cost_model),
        "high",
        params,
    )
