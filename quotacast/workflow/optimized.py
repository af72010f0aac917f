"""
Optimized workflows and zero-based redesigns: the two alternatives compared against a naive workflow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Literal

from quotacast.errors import InvalidInputError
from quotacast.workflow.workflow import Workflow

OptimizationType = Literal["batching", "caching", "decomposition", "vibe_to_spec"]
RiskLevel = Literal["low", "medium", "high"]

OPTIMIZATION_TYPES: tuple[str, ...] = ("batching", "caching", "decomposition", "vibe_to_spec")
RISK_LEVELS: tuple[str, ...] = ("low", "medium", "high")


@dataclass(frozen=True)
class OptimizationSavings:
    """Author-asserted savings of one optimization, all in percent."""

    vibes: float  # Reduction in vibe units
    specs: float  # Reduction in spec units
    percentage: float  # Overall (monetary) reduction


@dataclass(frozen=True)
class Optimization:
    """A single optimization applied to a subset of steps."""

    optimization_type: OptimizationType
    description: str
    steps_affected: tuple[str, ...]
    estimated_savings: OptimizationSavings


@dataclass(frozen=True)
class OptimizedWorkflow:
    """
    A workflow plus the ordered optimizations applied to it.

    original_workflow is a back-reference for traceability only; it is never
    modified and is excluded from equality.
    """

    workflow: Workflow
    optimizations: tuple[Optimization, ...]
    original_workflow: Workflow | None = field(default=None, compare=False)


@dataclass(frozen=True)
class ZeroBasedSolution:
    """A radical redesign: free text, challenged assumptions, claimed savings and risk."""

    radical_approach: str
    assumptions_challenged: tuple[str, ...]
    potential_savings: float  # 0-100
    implementation_risk: RiskLevel

    def __post_init__(self) -> None:
        """Validate savings range and risk label."""
        if not (0 <= self.potential_savings <= 100):
            raise InvalidInputError(
                f"potential_savings must be within 0-100, got {self.potential_savings}"
            )
        if self.implementation_risk not in RISK_LEVELS:
            raise InvalidInputError(
                f"implementation_risk must be one of {', '.join(RISK_LEVELS)}, "
                f"got {self.implementation_risk!r}"
            )


def optimize_workflow(
    workflow: Workflow, optimizations: list[Optimization]
) -> OptimizedWorkflow:
    """
    Wrap a workflow with optimizations, checking each one names known steps.

    Raises:
        InvalidInputError: unknown optimization type or affected step id.
    """
    step_ids = {s.step_id for s in workflow.steps}
    for opt in optimizations:
        if opt.optimization_type not in OPTIMIZATION_TYPES:
            raise InvalidInputError(
                f"Unknown optimization type {opt.optimization_type!r}",
                {"optimization_type": opt.optimization_type},
            )
        unknown = sorted(set(opt.steps_affected) - step_ids)
        if unknown:
            raise InvalidInputError(
                f"Optimization {opt.optimization_type} affects unknown steps: "
                f"{', '.join(unknown)}",
                {"unknown_steps": unknown},
            )
    return OptimizedWorkflow(
        workflow=workflow,
        optimizations=tuple(optimizations),
        original_workflow=workflow,
    )
