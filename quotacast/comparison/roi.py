"""
ROI comparison: rank scenarios, score them by savings weighted for effort and risk, pick the best.
"""

from __future__ import annotations

import logging

from quotacast.comparison.data_model import ROITable, Scenario
from quotacast.errors import InvalidInputError

logger = logging.getLogger(__name__)

EFFORT_WEIGHTS: dict[str, float] = {"low": 1.0, "medium": 0.9, "high": 0.7}
RISK_WEIGHTS: dict[str, float] = {"low": 1.0, "medium": 0.8, "high": 0.6}

_LEVEL_ALIASES = {"med": "medium"}

BALANCED_MIN_SAVINGS = 20
LOW_RISK_MIN_SAVINGS = 15
HIGH_SAVINGS_MIN = 50


def normalize_level(label: str, field_name: str) -> str:
    """Lower-case a low/medium/high label, accepting 'med'."""
    level = str(label).strip().lower()
    level = _LEVEL_ALIASES.get(level, level)
    if level not in EFFORT_WEIGHTS:
        raise InvalidInputError(
            f"{field_name} must be one of low, medium, high; got {label!r}",
            {"field": field_name, "value": label},
        )
    return level


def score_scenario(scenario: Scenario) -> float:
    """savings_percentage x effort weight x risk weight."""
    effort = normalize_level(scenario.implementation_effort, "implementation_effort")
    risk = normalize_level(scenario.risk_level, "risk_level")
    return scenario.savings_percentage * EFFORT_WEIGHTS[effort] * RISK_WEIGHTS[risk]


def _best_by_savings(candidates: list[Scenario]) -> Scenario | None:
    best: Scenario | None = None
    for scenario in candidates:
        if best is None or scenario.savings_percentage > best.savings_percentage:
            best = scenario
    return best


def _recommendations(scenarios: list[Scenario]) -> list[str]:
    """Balanced, low-risk and maximum-savings callouts, in that order, when present."""
    recommendations: list[str] = []

    balanced = _best_by_savings(
        [
            s
            for s in scenarios
            if normalize_level(s.risk_level, "risk_level") == "medium"
            and normalize_level(s.implementation_effort, "implementation_effort") == "medium"
            and s.savings_percentage > BALANCED_MIN_SAVINGS
        ]
    )
    if balanced is not None:
        recommendations.append(
            f"Consider {balanced.name} for balanced risk/reward "
            f"({balanced.savings_percentage:g}% savings)"
        )

    low_risk = _best_by_savings(
        [
            s
            for s in scenarios
            if normalize_level(s.risk_level, "risk_level") == "low"
            and s.savings_percentage > LOW_RISK_MIN_SAVINGS
        ]
    )
    if low_risk is not None:
        recommendations.append(
            f"{low_risk.name} offers {low_risk.savings_percentage:g}% savings with low risk"
        )

    high_savings = _best_by_savings(
        [s for s in scenarios if s.savings_percentage > HIGH_SAVINGS_MIN]
    )
    if high_savings is not None:
        recommendations.append(
            f"{high_savings.name} offers maximum savings "
            f"({high_savings.savings_percentage:g}%) but requires "
            f"{normalize_level(high_savings.implementation_effort, 'implementation_effort')} "
            f"effort and {normalize_level(high_savings.risk_level, 'risk_level')} risk"
        )

    return recommendations


def _risk_assessment(scenarios: list[Scenario]) -> str:
    high_risk = [
        s.name for s in scenarios if normalize_level(s.risk_level, "risk_level") == "high"
    ]
    if high_risk:
        noun = "scenario" if len(high_risk) == 1 else "scenarios"
        return (
            f"{len(high_risk)} high-risk {noun} identified ({', '.join(high_risk)}). "
            "Consider starting with lower-risk options and gradually implementing "
            "more aggressive optimizations."
        )
    return (
        "No high-risk scenarios identified. "
        "Implementation can proceed with confidence."
    )


def generate_roi_table(scenarios: list[Scenario]) -> ROITable:
    """
    Rank and score scenarios.

    best_option maximizes score_scenario(); ties go to the first-listed scenario.

    Raises:
        InvalidInputError: empty scenario list or an unknown effort/risk label.
    """
    scenarios = list(scenarios)
    if not scenarios:
        raise InvalidInputError("At least one scenario is required for ROI analysis")

    # Scores travel with their scenario; names need not be unique
    scored = [(s, score_scenario(s)) for s in scenarios]

    best, best_score = scored[0]
    for scenario, score in scored[1:]:
        if score > best_score:
            best, best_score = scenario, score

    logger.debug("ROI best option %s (score %.2f)", best.name, best_score)

    ranked = sorted(scored, key=lambda pair: pair[0].savings_percentage, reverse=True)
    return ROITable(
        scenarios=tuple(s for s, _ in ranked),
        best_option=best.name,
        risk_assessment=_risk_assessment(scenarios),
        recommendations=tuple(_recommendations(scenarios)),
        scores=tuple(score for _, score in ranked),
    )
