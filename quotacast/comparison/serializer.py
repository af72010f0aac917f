"""
Comparison serializer: deterministic JSON-ready dicts for ROI tables and multi-scenario savings.
"""

from __future__ import annotations

from quotacast.comparison.data_model import MultiScenarioSavings, ROITable
from quotacast.estimation.serializer import forecast_to_dict


def roi_table_to_dict(table: ROITable) -> dict:
    """ROI table as a dict; scenarios keep their ranked order."""
    return {
        "best_option": table.best_option,
        "risk_assessment": table.risk_assessment,
        "recommendations": list(table.recommendations),
        "scenarios": [
            {
                "name": s.name,
                "savings_percentage": s.savings_percentage,
                "implementation_effort": s.implementation_effort,
                "risk_level": s.risk_level,
                "score": round(score, 4),
                "forecast": forecast_to_dict(s.forecast),
            }
            for s, score in zip(table.scenarios, table.scores)
        ],
    }


def multi_scenario_savings_to_dict(savings: MultiScenarioSavings) -> dict:
    return {
        "conservative_savings": savings.conservative_savings,
        "balanced_savings": savings.balanced_savings,
        "bold_savings": savings.bold_savings,
        "recommended_approach": savings.recommended_approach,
        "rule": savings.rule,
    }
