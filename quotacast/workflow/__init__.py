"""Workflow descriptions: steps, data flow, optimizations, zero-based redesigns."""

from quotacast.workflow.edges import DataFlowEdge
from quotacast.workflow.optimized import (
    OPTIMIZATION_TYPES,
    RISK_LEVELS,
    Optimization,
    OptimizationSavings,
    OptimizedWorkflow,
    ZeroBasedSolution,
    optimize_workflow,
)
from quotacast.workflow.steps import STEP_KINDS, Step
from quotacast.workflow.workflow import Workflow, build_workflow, workflow_to_dict

__all__ = [
    "DataFlowEdge",
    "OPTIMIZATION_TYPES",
    "Optimization",
    "OptimizationSavings",
    "OptimizedWorkflow",
    "RISK_LEVELS",
    "STEP_KINDS",
    "Step",
    "Workflow",
    "ZeroBasedSolution",
    "build_workflow",
    "optimize_workflow",
    "workflow_to_dict",
]
