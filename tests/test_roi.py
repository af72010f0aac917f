"""Tests for the ROI comparator: ranking, weighted scoring, risk assessment, recommendations."""

import pytest

from quotacast.comparison import Scenario, generate_roi_table, score_scenario
from quotacast.errors import InvalidInputError
from quotacast.estimation import Forecast


def _scenario(name: str, savings: float, effort: str, risk: str) -> Scenario:
    forecast = Forecast("optimized", 1.0, 0.0, 0.01, "high", ())
    return Scenario(name, forecast, savings, effort, risk)


def test_empty_scenarios_rejected():
    with pytest.raises(InvalidInputError):
        generate_roi_table([])


def test_moderate_low_risk_beats_larger_risky_option():
    """A: 50 x 0.9 x 0.8 = 36 beats B: 80 x 0.7 x 0.6 = 33.6."""
    a = _scenario("A", 50, "medium", "medium")
    b = _scenario("B", 80, "high", "high")
    table = generate_roi_table([a, b])
    assert table.best_option == "A"
    # Ranked by savings: B first
    assert table.scores == pytest.approx((33.6, 36.0))


def test_duplicate_names_keep_their_own_scores():
    """Scenarios sharing a name are scored independently."""
    table = generate_roi_table(
        [_scenario("X", 50, "low", "low"), _scenario("X", 50, "high", "high")]
    )
    assert [s.risk_level for s in table.scenarios] == ["low", "high"]
    assert table.scores == pytest.approx((50.0, 21.0))


def test_sorted_by_descending_savings():
    scenarios = [
        _scenario("low", 10, "low", "low"),
        _scenario("high", 70, "high", "medium"),
        _scenario("mid", 40, "medium", "low"),
    ]
    table = generate_roi_table(scenarios)
    assert [s.name for s in table.scenarios] == ["high", "mid", "low"]


def test_ties_go_to_first_listed():
    first = _scenario("first", 40, "low", "low")
    second = _scenario("second", 40, "low", "low")
    assert generate_roi_table([first, second]).best_option == "first"
    assert generate_roi_table([second, first]).best_option == "second"


def test_all_zero_scores_pick_first():
    table = generate_roi_table([_scenario("x", 0, "low", "low"), _scenario("y", 0, "high", "high")])
    assert table.best_option == "x"


def test_risk_assessment_calls_out_high_risk():
    table = generate_roi_table(
        [_scenario("Safe", 20, "low", "low"), _scenario("Moonshot", 90, "high", "high")]
    )
    assert "high-risk" in table.risk_assessment
    assert "Moonshot" in table.risk_assessment
    assert table.risk_assessment.startswith("1 high-risk scenario identified")


def test_risk_assessment_without_high_risk():
    table = generate_roi_table([_scenario("Safe", 20, "low", "low")])
    assert table.risk_assessment.startswith("No high-risk scenarios")


def test_med_alias_and_case_accepted():
    assert score_scenario(_scenario("A", 50, "Med", "MEDIUM")) == pytest.approx(36.0)


def test_unknown_label_rejected():
    with pytest.raises(InvalidInputError, match="implementation_effort"):
        generate_roi_table([_scenario("A", 50, "enormous", "low")])
    with pytest.raises(InvalidInputError, match="risk_level"):
        generate_roi_table([_scenario("A", 50, "low", "none")])


def test_recommendations():
    table = generate_roi_table(
        [
            _scenario("Balanced", 35, "medium", "medium"),
            _scenario("Quick win", 20, "low", "low"),
            _scenario("Redesign", 85, "high", "high"),
        ]
    )
    assert table.recommendations == (
        "Consider Balanced for balanced risk/reward (35% savings)",
        "Quick win offers 20% savings with low risk",
        "Redesign offers maximum savings (85%) but requires high effort and high risk",
    )


def test_no_recommendations_for_small_savings():
    table = generate_roi_table([_scenario("Tiny", 5, "low", "low")])
    assert table.recommendations == ()
