"""Tests for zero-based estimation: synthetic entry, residual floor, risk confidence."""

import pytest

from quotacast.estimation import (
    ZERO_BASED_STEP_ID,
    CostConstraints,
    CostModel,
    EstimationParams,
    default_cost_model,
    estimate_zero_based,
)
from quotacast.workflow import ZeroBasedSolution


def _solution(savings: float = 80, risk: str = "medium") -> ZeroBasedSolution:
    return ZeroBasedSolution(
        radical_approach="Replace the chat loop with a single generated spec",
        assumptions_challenged=("Every change needs a conversation",),
        potential_savings=savings,
        implementation_risk=risk,
    )


def test_single_synthetic_entry():
    forecast = estimate_zero_based(_solution(), default_cost_model())
    assert forecast.scenario == "zero-based"
    assert len(forecast.breakdown) == 1
    entry = forecast.breakdown[0]
    assert entry.step_id == ZERO_BASED_STEP_ID
    assert entry.description == "Replace the chat loop with a single generated spec"


def test_units_from_baseline():
    """80% off a 3-vibe/1-spec baseline: vibes floored at 1, 0.2 specs."""
    forecast = estimate_zero_based(_solution(80), default_cost_model())
    assert forecast.vibes_consumed == 1
    assert forecast.specs_consumed == pytest.approx(0.2)
    assert forecast.estimated_cost == pytest.approx(0.02)


def test_no_savings_is_full_baseline():
    forecast = estimate_zero_based(_solution(0), default_cost_model())
    assert forecast.vibes_consumed == 3
    assert forecast.specs_consumed == 1
    assert forecast.estimated_cost == pytest.approx(0.08)


def test_baseline_is_tunable():
    model = CostModel("big", 0.01, 0.05, {}, zero_based_baseline_vibes=20, zero_based_baseline_specs=4)
    forecast = estimate_zero_based(_solution(50), model)
    assert forecast.vibes_consumed == 10
    assert forecast.specs_consumed == 2


@pytest.mark.parametrize("savings", [0, 50, 80, 99, 100])
@pytest.mark.parametrize(
    "params",
    [
        None,
        EstimationParams(expected_user_volume=2, performance_sensitivity="low"),
        EstimationParams(cost_constraints=CostConstraints(max_vibes=0)),
    ],
)
def test_at_least_one_vibe(savings, params):
    """A redesign is never free: at least one vibe, even at 100% savings."""
    forecast = estimate_zero_based(_solution(savings), default_cost_model(), params)
    assert forecast.vibes_consumed >= 1


@pytest.mark.parametrize("risk,expected", [("low", "high"), ("medium", "medium"), ("high", "low")])
def test_risk_confidence(risk, expected):
    forecast = estimate_zero_based(_solution(risk=risk), default_cost_model())
    assert forecast.confidence_level == expected
