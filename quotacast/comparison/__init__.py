"""Scenario comparison: ROI tables and the multi-scenario advisor."""

from quotacast.comparison.advisor import (
    ALREADY_EFFICIENT,
    RECOMMENDATION_RULES,
    AdvisorContext,
    RecommendationRule,
    calculate_multi_scenario_savings,
    select_recommendation,
)
from quotacast.comparison.data_model import MultiScenarioSavings, ROITable, Scenario
from quotacast.comparison.roi import (
    EFFORT_WEIGHTS,
    RISK_WEIGHTS,
    generate_roi_table,
    score_scenario,
)
from quotacast.comparison.serializer import (
    multi_scenario_savings_to_dict,
    roi_table_to_dict,
)

__all__ = [
    "ALREADY_EFFICIENT",
    "AdvisorContext",
    "EFFORT_WEIGHTS",
    "MultiScenarioSavings",
    "RECOMMENDATION_RULES",
    "RISK_WEIGHTS",
    "ROITable",
    "RecommendationRule",
    "Scenario",
    "calculate_multi_scenario_savings",
    "generate_roi_table",
    "multi_scenario_savings_to_dict",
    "roi_table_to_dict",
    "score_scenario",
    "select_recommendation",
]
