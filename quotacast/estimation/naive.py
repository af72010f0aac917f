"""
Naive estimation: price every step of a workflow as written.
"""

from __future__ import annotations

from quotacast.estimation.adjustment import assemble_forecast
from quotacast.estimation.cost_model import operation_cost
from quotacast.estimation.data_model import (
    BreakdownEntry,
    ConfidenceLevel,
    CostModel,
    EstimationParams,
    Forecast,
)
from quotacast.workflow.workflow import Workflow

SIMPLE_COMPLEXITY = 2  # At or below: high confidence
COMPLEX_COMPLEXITY = 10  # At or above: low confidence


def complexity_confidence(estimated_complexity: int) -> ConfidenceLevel:
    """Confidence from workflow complexity: <=2 high, >=10 low, otherwise medium."""
    if estimated_complexity <= SIMPLE_COMPLEXITY:
        return "high"
    if estimated_complexity >= COMPLEX_COMPLEXITY:
        return "low"
    return "medium"


def naive_breakdown(workflow: Workflow, cost_model: CostModel) -> list[BreakdownEntry]:
    """
    One entry per step, in step order.

    A vibe step counts one vibe unit, a spec step one spec unit; other kinds
    count toward cost only.
    """
    entries: list[BreakdownEntry] = []
    for step in workflow.steps:
        entries.append(
            BreakdownEntry(
                step_id=step.step_id,
                description=step.description,
                vibes=1.0 if step.kind == "vibe" else 0.0,
                specs=1.0 if step.kind == "spec" else 0.0,
                cost=operation_cost(cost_model, step),
            )
        )
    return entries


def estimate_naive(
    workflow: Workflow,
    cost_model: CostModel,
    params: EstimationParams | None = None,
) -> Forecast:
    """Naive forecast of a workflow. Never fails; an empty workflow gives a zero forecast."""
    return assemble_forecast(
        "naive",
        naive_breakdown(workflow, cost_model),
        complexity_confidence(workflow.estimated_complexity),
        params,
    )
