"""Step types for workflow descriptions."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Literal

StepKind = Literal["vibe", "spec", "data_retrieval", "processing", "analysis"]

STEP_KINDS: tuple[str, ...] = ("vibe", "spec", "data_retrieval", "processing", "analysis")


@dataclass(frozen=True)
class Step:
    """A single workflow step as described by the caller."""

    step_id: str
    kind: StepKind
    description: str
    inputs: tuple[str, ...] = ()
    outputs: tuple[str, ...] = ()
    quota_cost: float = 0.0  # Author estimate; used when the cost model has no entry for kind
