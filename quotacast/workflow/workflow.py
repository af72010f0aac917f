"""
Workflow data model, build-time validation, and deterministic JSON serialization.
"""

from __future__ import annotations

from dataclasses import dataclass

from quotacast.errors import InvalidInputError
from quotacast.workflow.edges import DataFlowEdge
from quotacast.workflow.steps import STEP_KINDS, Step


@dataclass(frozen=True)
class Workflow:
    """Ordered steps, data-flow edges between them, and caller-supplied complexity."""

    workflow_id: str
    steps: tuple[Step, ...]
    data_flow: tuple[DataFlowEdge, ...]
    estimated_complexity: int


def _validate_steps(steps: list[Step]) -> set[str]:
    """Check step ids are unique and kinds/costs are valid. Returns the id set."""
    seen: set[str] = set()
    for step in steps:
        if step.step_id in seen:
            raise InvalidInputError(
                f"Duplicate step id: {step.step_id}",
                {"step_id": step.step_id},
            )
        seen.add(step.step_id)
        if step.kind not in STEP_KINDS:
            raise InvalidInputError(
                f"Step {step.step_id} has unknown kind {step.kind!r}; "
                f"expected one of {', '.join(STEP_KINDS)}",
                {"step_id": step.step_id, "kind": step.kind},
            )
        if step.quota_cost < 0:
            raise InvalidInputError(
                f"Step {step.step_id} has negative quota_cost ({step.quota_cost})",
                {"step_id": step.step_id},
            )
    return seen


def build_workflow(
    workflow_id: str,
    steps: list[Step],
    data_flow: list[DataFlowEdge],
    estimated_complexity: int,
) -> Workflow:
    """
    Build a Workflow after checking its invariants.

    Raises:
        InvalidInputError: duplicate or unknown step ids, unknown step kinds,
            negative costs, or negative complexity.
    """
    step_ids = _validate_steps(steps)

    for edge in data_flow:
        for endpoint in (edge.source, edge.target):
            if endpoint not in step_ids:
                raise InvalidInputError(
                    f"Data-flow edge {edge.source} -> {edge.target} references "
                    f"unknown step {endpoint!r}",
                    {"source": edge.source, "target": edge.target},
                )

    if estimated_complexity < 0:
        raise InvalidInputError(
            f"estimated_complexity must be non-negative, got {estimated_complexity}"
        )

    return Workflow(
        workflow_id=workflow_id,
        steps=tuple(steps),
        data_flow=tuple(data_flow),
        estimated_complexity=int(estimated_complexity),
    )


def workflow_to_dict(w: Workflow) -> dict:
    """
    Return a JSON-serializable dict with deterministic ordering.
    Steps keep their declared order; edges are sorted.
    """
    edges_sorted = sorted(w.data_flow, key=lambda e: (e.source, e.target, e.data_type))
    return {
        "workflow_id": w.workflow_id,
        "estimated_complexity": w.estimated_complexity,
        "steps": [
            {
                "id": s.step_id,
                "type": s.kind,
                "description": s.description,
                "inputs": list(s.inputs),
                "outputs": list(s.outputs),
                "quota_cost": s.quota_cost,
            }
            for s in w.steps
        ],
        "data_flow": [
            {
                "from": e.source,
                "to": e.target,
                "data_type": e.data_type,
                "required": e.required,
            }
            for e in edges_sorted
        ],
    }
