"""
QuotaForecaster: library entry point holding the active cost model.
"""

from __future__ import annotations

import logging

from quotacast.comparison.advisor import calculate_multi_scenario_savings
from quotacast.comparison.data_model import MultiScenarioSavings, ROITable, Scenario
from quotacast.comparison.roi import generate_roi_table
from quotacast.estimation.cost_model import default_cost_model
from quotacast.estimation.data_model import (
    CostModel,
    EstimationParams,
    Forecast,
    SavingsResult,
)
from quotacast.estimation.naive import estimate_naive
from quotacast.estimation.optimized import estimate_optimized
from quotacast.estimation.savings import calculate_savings
from quotacast.estimation.zero_based import estimate_zero_based
from quotacast.workflow.optimized import OptimizedWorkflow, ZeroBasedSolution
from quotacast.workflow.workflow import Workflow

logger = logging.getLogger(__name__)


class QuotaForecaster:
    """
    Estimate, compare and recommend against one cost model.

    Estimation methods read the cost model once per call. set_cost_model()
    must not race an in-flight estimation when results need to be reproducible;
    callers needing isolation can use the pure estimate_* functions directly.
    """

    def __init__(self, cost_model: CostModel | None = None) -> None:
        self._cost_model = cost_model or default_cost_model()

    @property
    def cost_model(self) -> CostModel:
        return self._cost_model

    def set_cost_model(self, cost_model: CostModel) -> None:
        """Replace the cost model used by subsequent calls."""
        logger.debug("Cost model %s -> %s", self._cost_model.name, cost_model.name)
        self._cost_model = cost_model

    def estimate_naive(
        self, workflow: Workflow, params: EstimationParams | None = None
    ) -> Forecast:
        forecast = estimate_naive(workflow, self._cost_model, params)
        logger.debug(
            "Naive forecast for %s: %s vibes, %s specs, $%s (%s confidence)",
            workflow.workflow_id,
            forecast.vibes_consumed,
            forecast.specs_consumed,
            forecast.estimated_cost,
            forecast.confidence_level,
        )
        return forecast

    def estimate_optimized(
        self,
        optimized_workflow: OptimizedWorkflow,
        params: EstimationParams | None = None,
    ) -> Forecast:
        forecast = estimate_optimized(optimized_workflow, self._cost_model, params)
        logger.debug(
            "Optimized forecast for %s (%d optimizations): %s vibes, %s specs, $%s",
            optimized_workflow.workflow.workflow_id,
            len(optimized_workflow.optimizations),
            forecast.vibes_consumed,
            forecast.specs_consumed,
            forecast.estimated_cost,
        )
        return forecast

    def estimate_zero_based(
        self, solution: ZeroBasedSolution, params: EstimationParams | None = None
    ) -> Forecast:
        forecast = estimate_zero_based(solution, self._cost_model, params)
        logger.debug(
            "Zero-based forecast (%s%% claimed, %s risk): %s vibes, $%s",
            solution.potential_savings,
            solution.implementation_risk,
            forecast.vibes_consumed,
            forecast.estimated_cost,
        )
        return forecast

    def calculate_savings(self, before: Forecast, after: Forecast) -> SavingsResult:
        return calculate_savings(before, after)

    def generate_roi_table(self, scenarios: list[Scenario]) -> ROITable:
        return generate_roi_table(scenarios)

    def calculate_multi_scenario_savings(
        self, forecasts: list[Forecast]
    ) -> MultiScenarioSavings:
        return calculate_multi_scenario_savings(forecasts)
