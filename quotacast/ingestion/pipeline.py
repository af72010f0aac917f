"""
Forecast pipeline: estimate every strategy present in a request, compare them,
and serialize the whole run into one deterministic report dict.
"""

from __future__ import annotations

import logging
from pathlib import Path

from quotacast.comparison.data_model import Scenario
from quotacast.comparison.serializer import (
    multi_scenario_savings_to_dict,
    roi_table_to_dict,
)
from quotacast.estimation.cost_model import quota_billing_cost
from quotacast.estimation.data_model import Forecast
from quotacast.estimation.rounding import round_cost
from quotacast.estimation.serializer import (
    cost_model_to_dict,
    forecast_to_dict,
    savings_to_dict,
)
from quotacast.forecaster import QuotaForecaster
from quotacast.ingestion.document import EstimationRequest, load_estimation_request
from quotacast.workflow.workflow import workflow_to_dict

logger = logging.getLogger(__name__)

REPORT_SCHEMA_VERSION = "1.0"


def _collect_warnings(request: EstimationRequest, forecasts: list[Forecast]) -> list[str]:
    warnings: list[str] = []
    if not request.workflow.steps:
        warnings.append(f"Workflow {request.workflow.workflow_id} has no steps")
    if request.optimized_workflow is not None and not request.optimized_workflow.optimizations:
        warnings.append("Optimized scenario has no optimizations; it equals the naive forecast")
    for forecast in forecasts:
        if forecast.confidence_level == "low":
            warnings.append(f"{forecast.scenario} forecast has low confidence")
    return sorted(warnings)


def _scenarios(
    forecaster: QuotaForecaster,
    request: EstimationRequest,
    naive: Forecast,
    optimized: Forecast | None,
    zero_based: Forecast | None,
) -> list[Scenario]:
    """Naive (no change), Optimized (medium effort, low risk), Zero-based (high effort, own risk)."""
    scenarios = [Scenario("Naive", naive, 0.0, "low", "low")]
    if optimized is not None:
        savings = forecaster.calculate_savings(naive, optimized)
        scenarios.append(
            Scenario("Optimized", optimized, savings.total_savings_percentage, "medium", "low")
        )
    if zero_based is not None and request.zero_based is not None:
        savings = forecaster.calculate_savings(naive, zero_based)
        scenarios.append(
            Scenario(
                "Zero-based",
                zero_based,
                savings.total_savings_percentage,
                "high",
                request.zero_based.implementation_risk,
            )
        )
    return scenarios


def run_forecast(
    request: EstimationRequest,
    forecaster: QuotaForecaster | None = None,
) -> tuple[dict, list[str]]:
    """
    Run naive, optimized and zero-based estimation (as present), the ROI table
    and the multi-scenario advice.

    Without a forecaster, one is built from the request's cost model (or the
    default model).

    Returns:
        (report dict, list of warning strings).
    """
    if forecaster is None:
        forecaster = QuotaForecaster(request.cost_model)
    params = request.params

    naive = forecaster.estimate_naive(request.workflow, params)
    optimized = None
    if request.optimized_workflow is not None:
        optimized = forecaster.estimate_optimized(request.optimized_workflow, params)
    zero_based = None
    if request.zero_based is not None:
        zero_based = forecaster.estimate_zero_based(request.zero_based, params)

    forecasts = [f for f in (naive, optimized, zero_based) if f is not None]
    roi = forecaster.generate_roi_table(
        _scenarios(forecaster, request, naive, optimized, zero_based)
    )
    advice = forecaster.calculate_multi_scenario_savings(forecasts)

    logger.info(
        "Forecast %s: %d scenarios, best option %s, recommended %s",
        request.workflow.workflow_id,
        len(forecasts),
        roi.best_option,
        advice.recommended_approach,
    )

    report = {
        "schema_version": REPORT_SCHEMA_VERSION,
        "workflow": workflow_to_dict(request.workflow),
        "cost_model": cost_model_to_dict(forecaster.cost_model),
        "forecasts": {f.scenario: forecast_to_dict(f) for f in forecasts},
        "quota_billing": {
            f.scenario: round_cost(quota_billing_cost(forecaster.cost_model, f))
            for f in forecasts
        },
        "savings": {
            f.scenario: savings_to_dict(forecaster.calculate_savings(naive, f))
            for f in forecasts
            if f is not naive
        },
        "roi": roi_table_to_dict(roi),
        "multi_scenario": multi_scenario_savings_to_dict(advice),
    }
    return (report, _collect_warnings(request, forecasts))


def run_forecast_on_file(
    path: Path | str,
    forecaster: QuotaForecaster | None = None,
) -> tuple[dict, list[str]]:
    """Load a request document and run it through run_forecast."""
    return run_forecast(load_estimation_request(path), forecaster)
