"""
Estimation data model: cost model, estimation parameters, forecasts, and savings.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from quotacast.errors import InvalidInputError

ScenarioType = Literal["naive", "optimized", "zero-based"]
ConfidenceLevel = Literal["low", "medium", "high"]
Sensitivity = Literal["low", "medium", "high"]


@dataclass(frozen=True)
class CostModel:
    """
    Per-kind operation prices plus the two unit costs used to bill quota tallies.

    operation_costs prices every step kind (vibe and spec included) in dollars;
    vibe_unit_cost/spec_unit_cost price consumed units. The two are kept apart
    because quota limits and dollar budgets are enforced separately.
    """

    name: str
    vibe_unit_cost: float  # Dollars per vibe unit
    spec_unit_cost: float  # Dollars per spec unit
    operation_costs: dict[str, float] = field(default_factory=dict)
    zero_based_baseline_vibes: float = 3.0  # Full-redesign baseline before savings
    zero_based_baseline_specs: float = 1.0

    def __post_init__(self) -> None:
        """Validate invariant: no negative prices or baselines."""
        prices = {
            "vibe_unit_cost": self.vibe_unit_cost,
            "spec_unit_cost": self.spec_unit_cost,
            "zero_based_baseline_vibes": self.zero_based_baseline_vibes,
            "zero_based_baseline_specs": self.zero_based_baseline_specs,
        }
        prices.update(
            {f"operation_costs[{kind!r}]": cost for kind, cost in self.operation_costs.items()}
        )
        negative = {key: value for key, value in prices.items() if value < 0}
        if negative:
            raise InvalidInputError(
                f"CostModel invariant violated: negative values {negative}",
                {"cost_model": self.name, "negative": negative},
            )


@dataclass(frozen=True)
class CostConstraints:
    """Optional ceilings on a forecast; None means unbounded."""

    max_vibes: float | None = None
    max_specs: float | None = None
    max_cost_dollars: float | None = None


@dataclass(frozen=True)
class EstimationParams:
    """Per-call hints that scale, clamp, and re-rate a forecast."""

    expected_user_volume: int | None = None
    performance_sensitivity: Sensitivity | None = None
    cost_constraints: CostConstraints | None = None


@dataclass(frozen=True)
class BreakdownEntry:
    """Cost of one step (or the synthetic zero-based entry) before parameter adjustment."""

    step_id: str
    description: str
    vibes: float
    specs: float
    cost: float


@dataclass(frozen=True)
class Forecast:
    """
    Predicted consumption for one scenario.

    Invariant: vibes_consumed, specs_consumed, estimated_cost >= 0
    """

    scenario: ScenarioType
    vibes_consumed: float
    specs_consumed: float
    estimated_cost: float
    confidence_level: ConfidenceLevel
    breakdown: tuple[BreakdownEntry, ...]

    def __post_init__(self) -> None:
        """Validate invariant: no negative consumption."""
        if min(self.vibes_consumed, self.specs_consumed, self.estimated_cost) < 0:
            raise ValueError(
                f"Forecast invariant violated: negative consumption "
                f"(vibes={self.vibes_consumed}, specs={self.specs_consumed}, "
                f"cost={self.estimated_cost})"
            )


@dataclass(frozen=True)
class SavingsResult:
    """Reduction from one forecast to another; every field is >= 0."""

    vibe_reduction: float  # Percent
    spec_reduction: float  # Percent
    cost_reduction: float  # Percent
    cost_savings: float  # Dollars
    total_savings_percentage: float  # Mean of component reductions with a non-zero baseline
