"""Tests for forecast, savings, ROI and advisor serialization."""

import json

from quotacast.comparison import (
    Scenario,
    calculate_multi_scenario_savings,
    generate_roi_table,
    multi_scenario_savings_to_dict,
    roi_table_to_dict,
)
from quotacast.estimation import (
    calculate_savings,
    cost_model_to_dict,
    default_cost_model,
    estimate_naive,
    forecast_to_dict,
    savings_to_dict,
)
from quotacast.workflow import Step, build_workflow


def _create_forecast():
    wf = build_workflow(
        "wf", [Step("s1", "vibe", "Ask"), Step("s2", "spec", "Write")], [], 3
    )
    return estimate_naive(wf, default_cost_model())


def test_forecast_to_dict():
    d = forecast_to_dict(_create_forecast())
    assert d["scenario"] == "naive"
    assert d["vibes_consumed"] == 1
    assert d["specs_consumed"] == 1
    assert d["confidence_level"] == "medium"
    assert [e["step_id"] for e in d["breakdown"]] == ["s1", "s2"]
    assert set(d["breakdown"][0]) == {"step_id", "description", "vibes", "specs", "cost"}
    json.dumps(d)


def test_savings_to_dict():
    f = _create_forecast()
    d = savings_to_dict(calculate_savings(f, f))
    assert d == {
        "vibe_reduction": 0.0,
        "spec_reduction": 0.0,
        "cost_reduction": 0.0,
        "cost_savings": 0.0,
        "total_savings_percentage": 0.0,
    }


def test_cost_model_to_dict_sorted_operations():
    d = cost_model_to_dict(default_cost_model())
    assert list(d["operation_costs"]) == sorted(d["operation_costs"])
    assert d["zero_based_baseline"] == {"vibes": 3.0, "specs": 1.0}


def test_roi_and_advice_to_dict():
    f = _create_forecast()
    table = generate_roi_table(
        [Scenario("A", f, 10, "low", "low"), Scenario("B", f, 30, "medium", "high")]
    )
    d = roi_table_to_dict(table)
    assert [s["name"] for s in d["scenarios"]] == ["B", "A"]
    assert d["scenarios"][0]["score"] == 16.2
    assert d["best_option"] == "B"
    assert d["scenarios"][1]["forecast"]["scenario"] == "naive"

    advice = multi_scenario_savings_to_dict(calculate_multi_scenario_savings([f]))
    assert advice["rule"] == "already-efficient"
    json.dumps(d)
    json.dumps(advice)


def test_roi_to_dict_duplicate_names():
    f = _create_forecast()
    table = generate_roi_table(
        [Scenario("X", f, 50, "low", "low"), Scenario("X", f, 50, "high", "high")]
    )
    d = roi_table_to_dict(table)
    assert [s["score"] for s in d["scenarios"]] == [50.0, 21.0]
