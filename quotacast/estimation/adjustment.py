"""
Parameter adjustment: scale a raw forecast by volume and sensitivity, clamp it to
cost ceilings, shift confidence, and assemble the final Forecast.
"""

from __future__ import annotations

from quotacast.estimation.data_model import (
    BreakdownEntry,
    ConfidenceLevel,
    CostConstraints,
    EstimationParams,
    Forecast,
    ScenarioType,
)
from quotacast.estimation.rounding import round_cost, round_units

CONFIDENCE_LADDER: tuple[ConfidenceLevel, ...] = ("low", "medium", "high")

HIGH_VOLUME_THRESHOLD = 1000  # Above this, more invocations and more robust operations
LOW_VOLUME_THRESHOLD = 10  # Below this, simpler operations suffice
VOLUME_UNCERTAINTY_THRESHOLD = 5000  # At or above this, scale adds estimation uncertainty
TIGHT_CONSTRAINT_MARGIN = 0.10  # Ceiling within 10% of the estimate counts as tight

# (vibes, specs, cost) multipliers
_HIGH_VOLUME_FACTORS = (1.2, 1.1, 1.2)
_LOW_VOLUME_FACTORS = (0.8, 0.9, 0.8)
_SENSITIVITY_FACTORS: dict[str, tuple[float, float, float]] = {
    "high": (1.1, 1.05, 1.1),
    "low": (0.9, 0.95, 0.9),
}


def shift_confidence(confidence: ConfidenceLevel, steps: int) -> ConfidenceLevel:
    """Move confidence up (steps > 0) or down (steps < 0) the ladder, saturating at the ends."""
    index = CONFIDENCE_LADDER.index(confidence) + steps
    index = max(0, min(len(CONFIDENCE_LADDER) - 1, index))
    return CONFIDENCE_LADDER[index]


def _volume_factors(volume: int | None) -> tuple[float, float, float]:
    if volume is None:
        return (1.0, 1.0, 1.0)
    if volume > HIGH_VOLUME_THRESHOLD:
        return _HIGH_VOLUME_FACTORS
    if volume < LOW_VOLUME_THRESHOLD:
        return _LOW_VOLUME_FACTORS
    return (1.0, 1.0, 1.0)


def _is_tight(ceiling: float | None, value: float) -> bool:
    return ceiling is not None and value > 0 and ceiling <= value * (1 + TIGHT_CONSTRAINT_MARGIN)


def _clamp(value: float, ceiling: float | None) -> float:
    if ceiling is None:
        return value
    return min(value, max(0.0, ceiling))


def adjust_for_parameters(
    vibes: float,
    specs: float,
    cost: float,
    confidence: ConfidenceLevel,
    params: EstimationParams | None,
    *,
    min_vibes: float = 0.0,
) -> tuple[float, float, float, ConfidenceLevel]:
    """
    Apply optional estimation parameters to raw totals.

    Order:
    1. Expected user volume: >1000 scales up, <10 scales down; >=5000 or <10
       also lowers confidence one level.
    2. Performance sensitivity: high scales up and raises confidence one level;
       low scales down and leaves confidence alone.
    3. Cost constraints: each ceiling caps its own tally independently. A tight
       ceiling (within TIGHT_CONSTRAINT_MARGIN of the unconstrained value)
       lowers confidence one level.
    4. min_vibes floor (zero-based residual cost), applied last.

    Returns (vibes, specs, cost, confidence). Unrounded.
    """
    if params is None:
        return (max(vibes, min_vibes), specs, cost, confidence)

    volume = params.expected_user_volume
    vibe_f, spec_f, cost_f = _volume_factors(volume)
    vibes, specs, cost = vibes * vibe_f, specs * spec_f, cost * cost_f
    if volume is not None and (
        volume >= VOLUME_UNCERTAINTY_THRESHOLD or volume < LOW_VOLUME_THRESHOLD
    ):
        confidence = shift_confidence(confidence, -1)

    sensitivity = params.performance_sensitivity
    if sensitivity in _SENSITIVITY_FACTORS:
        vibe_f, spec_f, cost_f = _SENSITIVITY_FACTORS[sensitivity]
        vibes, specs, cost = vibes * vibe_f, specs * spec_f, cost * cost_f
    if sensitivity == "high":
        confidence = shift_confidence(confidence, 1)

    constraints: CostConstraints | None = params.cost_constraints
    if constraints is not None:
        tight = (
            _is_tight(constraints.max_vibes, vibes)
            or _is_tight(constraints.max_specs, specs)
            or _is_tight(constraints.max_cost_dollars, cost)
        )
        vibes = _clamp(vibes, constraints.max_vibes)
        specs = _clamp(specs, constraints.max_specs)
        cost = _clamp(cost, constraints.max_cost_dollars)
        if tight:
            confidence = shift_confidence(confidence, -1)

    return (max(vibes, min_vibes), specs, cost, confidence)


def assemble_forecast(
    scenario: ScenarioType,
    breakdown: list[BreakdownEntry],
    confidence: ConfidenceLevel,
    params: EstimationParams | None,
    *,
    min_vibes: float = 0.0,
) -> Forecast:
    """
    Sum a breakdown, apply parameters, round, and build the Forecast.

    Breakdown entries describe a single invocation and are not scaled by params.
    Totals are summed from the rounded entries, so without params (and above
    the min_vibes floor) the published breakdown adds up to the published totals.
    """
    rounded = tuple(
        BreakdownEntry(
            step_id=entry.step_id,
            description=entry.description,
            vibes=round_units(entry.vibes),
            specs=round_units(entry.specs),
            cost=round_cost(entry.cost),
        )
        for entry in breakdown
    )

    vibes, specs, cost, confidence = adjust_for_parameters(
        sum(entry.vibes for entry in rounded),
        sum(entry.specs for entry in rounded),
        sum(entry.cost for entry in rounded),
        confidence,
        params,
        min_vibes=min_vibes,
    )

    return Forecast(
        scenario=scenario,
        vibes_consumed=round_units(vibes),
        specs_consumed=round_units(specs),
        estimated_cost=round_cost(cost),
        confidence_level=confidence,
        breakdown=rounded,
    )
