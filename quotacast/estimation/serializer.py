"""
Estimation serializer: deterministic JSON-ready dicts for forecasts and savings.
"""

from __future__ import annotations

from quotacast.estimation.data_model import (
    BreakdownEntry,
    CostModel,
    Forecast,
    SavingsResult,
)


def _breakdown_entry_to_dict(entry: BreakdownEntry) -> dict:
    return {
        "step_id": entry.step_id,
        "description": entry.description,
        "vibes": entry.vibes,
        "specs": entry.specs,
        "cost": entry.cost,
    }


def forecast_to_dict(forecast: Forecast) -> dict:
    """Forecast as a dict; breakdown keeps step order."""
    return {
        "scenario": forecast.scenario,
        "vibes_consumed": forecast.vibes_consumed,
        "specs_consumed": forecast.specs_consumed,
        "estimated_cost": forecast.estimated_cost,
        "confidence_level": forecast.confidence_level,
        "breakdown": [_breakdown_entry_to_dict(e) for e in forecast.breakdown],
    }


def savings_to_dict(savings: SavingsResult) -> dict:
    return {
        "vibe_reduction": savings.vibe_reduction,
        "spec_reduction": savings.spec_reduction,
        "cost_reduction": savings.cost_reduction,
        "cost_savings": savings.cost_savings,
        "total_savings_percentage": savings.total_savings_percentage,
    }


def cost_model_to_dict(cost_model: CostModel) -> dict:
    return {
        "name": cost_model.name,
        "vibe_unit_cost": cost_model.vibe_unit_cost,
        "spec_unit_cost": cost_model.spec_unit_cost,
        "operation_costs": dict(sorted(cost_model.operation_costs.items())),
        "zero_based_baseline": {
            "vibes": cost_model.zero_based_baseline_vibes,
            "specs": cost_model.zero_based_baseline_specs,
        },
    }
