"""Data-flow edge types for workflow descriptions."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class DataFlowEdge:
    """A directed data dependency between two steps."""

    source: str
    target: str
    data_type: str
    required: bool = True
