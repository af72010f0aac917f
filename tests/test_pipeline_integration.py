"""Integration tests for the forecast pipeline on the bundled example request."""

from pathlib import Path

import pytest

from quotacast import QuotaForecaster
from quotacast.estimation import load_cost_model
from quotacast.ingestion import (
    REPORT_SCHEMA_VERSION,
    load_estimation_request,
    run_forecast,
    run_forecast_on_file,
)

EXAMPLES = Path(__file__).resolve().parent.parent / "examples"
REQUEST = EXAMPLES / "checkout_review.yaml"


def test_full_report():
    """Naive, optimized and zero-based forecasts, savings, ROI and advice."""
    report, warnings = run_forecast_on_file(REQUEST)

    assert report["schema_version"] == REPORT_SCHEMA_VERSION
    assert report["workflow"]["workflow_id"] == "checkout-review"
    assert report["cost_model"]["name"] == "default"
    assert sorted(report["forecasts"]) == ["naive", "optimized", "zero-based"]

    naive = report["forecasts"]["naive"]
    assert naive["vibes_consumed"] == 2
    assert naive["specs_consumed"] == 1
    assert naive["estimated_cost"] == pytest.approx(0.1)
    assert naive["confidence_level"] == "high"

    optimized = report["forecasts"]["optimized"]
    assert optimized["vibes_consumed"] == 1
    assert optimized["estimated_cost"] == pytest.approx(0.09)

    zero = report["forecasts"]["zero-based"]
    assert zero["vibes_consumed"] == 1
    assert zero["breakdown"][0]["step_id"] == "zero-based-solution"

    assert report["savings"]["optimized"]["total_savings_percentage"] == 20.0
    assert report["savings"]["zero-based"]["total_savings_percentage"] == 75.0
    assert "naive" not in report["savings"]

    assert report["quota_billing"]["naive"] == pytest.approx(0.07)

    roi = report["roi"]
    assert [s["name"] for s in roi["scenarios"]] == ["Zero-based", "Optimized", "Naive"]
    assert roi["best_option"] == "Zero-based"

    advice = report["multi_scenario"]
    assert advice["conservative_savings"] == 20.0
    assert advice["bold_savings"] == 75.0
    assert advice["balanced_savings"] == 47.5
    assert advice["recommended_approach"] == "Balanced"

    assert warnings == []


def test_deterministic():
    first, _ = run_forecast_on_file(REQUEST)
    second, _ = run_forecast_on_file(REQUEST)
    assert first == second


def test_custom_forecaster_cost_model():
    forecaster = QuotaForecaster(load_cost_model(EXAMPLES / "cost_models.yaml"))
    report, _ = run_forecast(load_estimation_request(REQUEST), forecaster)
    assert report["cost_model"]["name"] == "team"
    # 0.02 + 0.02 + 0.05 + 0.08
    assert report["forecasts"]["naive"]["estimated_cost"] == pytest.approx(0.17)


def test_naive_only_request_with_warnings():
    request = load_estimation_request(
        {
            "workflow": {
                "id": "sprawling",
                "estimated_complexity": 12,
                "steps": [{"id": "s1", "type": "processing", "description": "Crunch"}],
            }
        }
    )
    report, warnings = run_forecast(request)
    assert list(report["forecasts"]) == ["naive"]
    assert report["savings"] == {}
    assert report["roi"]["best_option"] == "Naive"
    assert report["multi_scenario"]["recommended_approach"] == "Current approach is already efficient"
    assert warnings == ["naive forecast has low confidence"]


def test_empty_optimizations_warn():
    data = {
        "workflow": {"id": "wf", "estimated_complexity": 1, "steps": [{"id": "s1", "type": "vibe"}]},
        "optimizations": [],
    }
    _, warnings = run_forecast(load_estimation_request(data))
    assert warnings == ["Optimized scenario has no optimizations; it equals the naive forecast"]
