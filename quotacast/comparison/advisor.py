"""
Multi-scenario advisor: blend naive/optimized/zero-based forecasts into
conservative/balanced/bold savings and pick one recommended approach.

The recommendation policy is an ordered table of rules; the first rule whose
predicate holds wins.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass

from quotacast.comparison.data_model import MultiScenarioSavings
from quotacast.errors import InvalidInputError
from quotacast.estimation.data_model import Forecast
from quotacast.estimation.rounding import round_percent
from quotacast.estimation.savings import calculate_savings

logger = logging.getLogger(__name__)

ALREADY_EFFICIENT = "Current approach is already efficient"

BOLD_MIN_SAVINGS = 80
MINIMAL_MAX_CONSERVATIVE = 10
BALANCED_MIN_CONSERVATIVE = 15
BALANCED_MIN_BALANCED = 30


@dataclass(frozen=True)
class AdvisorContext:
    """Inputs every recommendation rule sees."""

    conservative: float
    balanced: float
    bold: float
    naive: Forecast | None
    zero_based: Forecast | None


@dataclass(frozen=True)
class RecommendationRule:
    name: str
    predicate: Callable[[AdvisorContext], bool]
    approach: str


def _bold_applies(ctx: AdvisorContext) -> bool:
    return (
        ctx.bold > BOLD_MIN_SAVINGS
        and ctx.naive is not None
        and ctx.zero_based is not None
        and ctx.naive.confidence_level == "high"
        and ctx.zero_based.confidence_level == "high"
    )


RECOMMENDATION_RULES: tuple[RecommendationRule, ...] = (
    RecommendationRule("bold", _bold_applies, "Bold (zero-based redesign)"),
    RecommendationRule(
        "minimal",
        lambda ctx: ctx.conservative < MINIMAL_MAX_CONSERVATIVE,
        "Minimal optimization needed",
    ),
    RecommendationRule(
        "balanced",
        lambda ctx: ctx.conservative > BALANCED_MIN_CONSERVATIVE
        and ctx.balanced > BALANCED_MIN_BALANCED,
        "Balanced",
    ),
    RecommendationRule("conservative", lambda ctx: True, "Conservative"),
)


def select_recommendation(
    ctx: AdvisorContext,
    rules: tuple[RecommendationRule, ...] = RECOMMENDATION_RULES,
) -> RecommendationRule:
    """
    Return the first rule whose predicate holds.

    A custom rule table must end with a catch-all rule, as RECOMMENDATION_RULES
    does; a table that matches nothing is a programming error (LookupError).
    """
    for rule in rules:
        if rule.predicate(ctx):
            return rule
    raise LookupError(
        f"No recommendation rule matched; rule table {[r.name for r in rules]} "
        "has no catch-all"
    )


def _first_of(forecasts: list[Forecast], scenario: str) -> Forecast | None:
    return next((f for f in forecasts if f.scenario == scenario), None)


def calculate_multi_scenario_savings(forecasts: list[Forecast]) -> MultiScenarioSavings:
    """
    Compare the canonical forecasts against the naive baseline.

    Baseline is the first naive forecast, or the first forecast when none is
    tagged naive. conservative = savings vs optimized, bold = savings vs
    zero-based, balanced = mean of whichever of the two are present.

    Raises:
        InvalidInputError: empty forecast list.
    """
    forecasts = list(forecasts)
    if not forecasts:
        raise InvalidInputError(
            "At least one forecast is required for multi-scenario savings calculation"
        )

    naive = _first_of(forecasts, "naive")
    baseline = naive if naive is not None else forecasts[0]
    optimized = _first_of(forecasts, "optimized")
    zero_based = _first_of(forecasts, "zero-based")
    if optimized is baseline:
        optimized = None
    if zero_based is baseline:
        zero_based = None

    if optimized is None and zero_based is None:
        logger.debug("Only a baseline forecast supplied; nothing to compare")
        return MultiScenarioSavings(
            conservative_savings=0.0,
            balanced_savings=0.0,
            bold_savings=0.0,
            recommended_approach=ALREADY_EFFICIENT,
            rule="already-efficient",
        )

    present: list[float] = []
    conservative = 0.0
    bold = 0.0
    if optimized is not None:
        conservative = calculate_savings(baseline, optimized).total_savings_percentage
        present.append(conservative)
    if zero_based is not None:
        bold = calculate_savings(baseline, zero_based).total_savings_percentage
        present.append(bold)
    balanced = round_percent(sum(present) / len(present))

    ctx = AdvisorContext(
        conservative=conservative,
        balanced=balanced,
        bold=bold,
        naive=naive,
        zero_based=zero_based,
    )
    rule = select_recommendation(ctx)
    logger.debug(
        "Savings conservative=%.1f balanced=%.1f bold=%.1f -> %s",
        conservative,
        balanced,
        bold,
        rule.name,
    )

    return MultiScenarioSavings(
        conservative_savings=conservative,
        balanced_savings=balanced,
        bold_savings=bold,
        recommended_approach=rule.approach,
        rule=rule.name,
    )
