"""Consumption estimation: cost model, naive/optimized/zero-based estimators, parameters, savings."""

from quotacast.estimation.adjustment import (
    adjust_for_parameters,
    assemble_forecast,
    shift_confidence,
)
from quotacast.estimation.cost_model import (
    default_cost_model,
    load_cost_model,
    operation_cost,
    quota_billing_cost,
)
from quotacast.estimation.data_model import (
    BreakdownEntry,
    CostConstraints,
    CostModel,
    EstimationParams,
    Forecast,
    SavingsResult,
)
from quotacast.estimation.naive import complexity_confidence, estimate_naive
from quotacast.estimation.optimized import estimate_optimized
from quotacast.estimation.savings import calculate_savings, reduction_percentage
from quotacast.estimation.serializer import (
    cost_model_to_dict,
    forecast_to_dict,
    savings_to_dict,
)
from quotacast.estimation.zero_based import ZERO_BASED_STEP_ID, estimate_zero_based

__all__ = [
    "BreakdownEntry",
    "CostConstraints",
    "CostModel",
    "EstimationParams",
    "Forecast",
    "SavingsResult",
    "ZERO_BASED_STEP_ID",
    "adjust_for_parameters",
    "assemble_forecast",
    "calculate_savings",
    "complexity_confidence",
    "cost_model_to_dict",
    "default_cost_model",
    "estimate_naive",
    "estimate_optimized",
    "estimate_zero_based",
    "forecast_to_dict",
    "load_cost_model",
    "operation_cost",
    "quota_billing_cost",
    "reduction_percentage",
    "savings_to_dict",
    "shift_confidence",
]
