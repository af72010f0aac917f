"""
Estimation request loader: YAML/JSON files or dicts -> workflow, alternatives, parameters.

Document layout:

    workflow:
      id: checkout-review
      estimated_complexity: 4
      steps:
        - {id: s1, type: vibe, description: ..., inputs: [], outputs: [], quota_cost: 0.01}
      data_flow:
        - {from: s1, to: s2, data_type: text, required: true}
    optimizations:
      - {type: caching, description: ..., steps_affected: [s1],
         estimated_savings: {vibes: 50, specs: 0, percentage: 40}}
    zero_based:
      radical_approach: ...
      assumptions_challenged: [...]
      potential_savings: 80
      implementation_risk: medium
    parameters:
      expected_user_volume: 200
      performance_sensitivity: high
      cost_constraints: {max_vibes: 10, max_specs: 3, max_cost_dollars: 1.5}
    cost_model: {...}   # optional, same keys as a cost model file
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from quotacast.estimation.cost_model import load_cost_model
from quotacast.estimation.data_model import CostConstraints, CostModel, EstimationParams
from quotacast.workflow.edges import DataFlowEdge
from quotacast.workflow.optimized import (
    Optimization,
    OptimizationSavings,
    OptimizedWorkflow,
    ZeroBasedSolution,
    optimize_workflow,
)
from quotacast.workflow.steps import Step
from quotacast.workflow.workflow import Workflow, build_workflow

_SENSITIVITIES = ("low", "medium", "high")


@dataclass(frozen=True)
class EstimationRequest:
    """Everything one forecast run needs; alternatives and parameters are optional."""

    workflow: Workflow
    optimized_workflow: OptimizedWorkflow | None = None
    zero_based: ZeroBasedSolution | None = None
    params: EstimationParams | None = None
    cost_model: CostModel | None = None


def load_estimation_request(source: str | Path | dict) -> EstimationRequest:
    """
    Load an EstimationRequest from a YAML/JSON file path or a dict.

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the document is malformed (InvalidInputError for
            workflow invariant violations)
        TypeError: If source is of an unsupported type
    """
    if isinstance(source, (str, Path)):
        return _load_from_file(source)
    if isinstance(source, dict):
        return _load_from_dict(source)
    raise TypeError(
        f"Unsupported source type for load_estimation_request: {type(source).__name__}"
    )


def _load_from_file(path: str | Path) -> EstimationRequest:
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Request file not found: {file_path}")

    # JSON is a subset of YAML, so one parser covers both
    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"Request file {file_path} is empty")
    if not isinstance(data, dict):
        raise ValueError(f"Request file {file_path}: expected dict, got {type(data).__name__}")
    return _load_from_dict(data)


def _require_dict(value: object, where: str) -> dict:
    if not isinstance(value, dict):
        raise ValueError(f"'{where}' must be a dict, got {type(value).__name__}")
    return value


def _require_list(value: object, where: str) -> list:
    if value is None:
        return []
    if not isinstance(value, list):
        raise ValueError(f"'{where}' must be a list, got {type(value).__name__}")
    return value


def _number(data: dict, key: str, where: str, default: float | None = None) -> float:
    value = data.get(key, default)
    if value is None:
        raise ValueError(f"'{where}.{key}' is required")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(f"'{where}.{key}' must be a number, got {type(value).__name__}")
    return float(value)


def _optional_number(data: dict, key: str, where: str) -> float | None:
    if data.get(key) is None:
        return None
    return _number(data, key, where)


def _parse_step(data: dict, index: int) -> Step:
    where = f"workflow.steps[{index}]"
    _require_dict(data, where)
    if "id" not in data:
        raise ValueError(f"'{where}.id' is required")
    if "type" not in data:
        raise ValueError(f"'{where}.type' is required")
    return Step(
        step_id=str(data["id"]),
        kind=str(data["type"]),
        description=str(data.get("description", "")),
        inputs=tuple(str(i) for i in _require_list(data.get("inputs"), f"{where}.inputs")),
        outputs=tuple(str(o) for o in _require_list(data.get("outputs"), f"{where}.outputs")),
        quota_cost=_number(data, "quota_cost", where, default=0.0),
    )


def _parse_edge(data: dict, index: int) -> DataFlowEdge:
    where = f"workflow.data_flow[{index}]"
    _require_dict(data, where)
    for key in ("from", "to"):
        if key not in data:
            raise ValueError(f"'{where}.{key}' is required")
    return DataFlowEdge(
        source=str(data["from"]),
        target=str(data["to"]),
        data_type=str(data.get("data_type", "")),
        required=bool(data.get("required", True)),
    )


def _parse_workflow(data: dict) -> Workflow:
    steps = [
        _parse_step(s, i) for i, s in enumerate(_require_list(data.get("steps"), "workflow.steps"))
    ]
    edges = [
        _parse_edge(e, i)
        for i, e in enumerate(_require_list(data.get("data_flow"), "workflow.data_flow"))
    ]
    complexity = data.get("estimated_complexity", 1)
    if isinstance(complexity, bool) or not isinstance(complexity, int):
        raise ValueError(
            f"'workflow.estimated_complexity' must be an integer, "
            f"got {type(complexity).__name__}"
        )
    return build_workflow(str(data.get("id", "workflow")), steps, edges, complexity)


def _parse_optimization(data: dict, index: int) -> Optimization:
    where = f"optimizations[{index}]"
    _require_dict(data, where)
    if "type" not in data:
        raise ValueError(f"'{where}.type' is required")
    savings = _require_dict(data.get("estimated_savings", {}), f"{where}.estimated_savings")
    savings_where = f"{where}.estimated_savings"
    return Optimization(
        optimization_type=str(data["type"]),
        description=str(data.get("description", "")),
        steps_affected=tuple(
            str(s) for s in _require_list(data.get("steps_affected"), f"{where}.steps_affected")
        ),
        estimated_savings=OptimizationSavings(
            vibes=_number(savings, "vibes", savings_where, default=0.0),
            specs=_number(savings, "specs", savings_where, default=0.0),
            percentage=_number(savings, "percentage", savings_where, default=0.0),
        ),
    )


def _parse_zero_based(data: dict) -> ZeroBasedSolution:
    _require_dict(data, "zero_based")
    if "radical_approach" not in data:
        raise ValueError("'zero_based.radical_approach' is required")
    return ZeroBasedSolution(
        radical_approach=str(data["radical_approach"]),
        assumptions_challenged=tuple(
            str(a)
            for a in _require_list(
                data.get("assumptions_challenged"), "zero_based.assumptions_challenged"
            )
        ),
        potential_savings=_number(data, "potential_savings", "zero_based"),
        implementation_risk=str(data.get("implementation_risk", "medium")),
    )


def _parse_params(data: dict) -> EstimationParams:
    _require_dict(data, "parameters")
    volume = data.get("expected_user_volume")
    if volume is not None and (isinstance(volume, bool) or not isinstance(volume, int)):
        raise ValueError(
            f"'parameters.expected_user_volume' must be an integer, got {type(volume).__name__}"
        )
    sensitivity = data.get("performance_sensitivity")
    if sensitivity is not None and sensitivity not in _SENSITIVITIES:
        raise ValueError(
            f"'parameters.performance_sensitivity' must be one of "
            f"{', '.join(_SENSITIVITIES)}, got {sensitivity!r}"
        )
    constraints = None
    if data.get("cost_constraints") is not None:
        raw = _require_dict(data["cost_constraints"], "parameters.cost_constraints")
        where = "parameters.cost_constraints"
        constraints = CostConstraints(
            max_vibes=_optional_number(raw, "max_vibes", where),
            max_specs=_optional_number(raw, "max_specs", where),
            max_cost_dollars=_optional_number(raw, "max_cost_dollars", where),
        )
    return EstimationParams(
        expected_user_volume=volume,
        performance_sensitivity=sensitivity,
        cost_constraints=constraints,
    )


def _load_from_dict(data: dict) -> EstimationRequest:
    if "workflow" not in data:
        raise ValueError("Request is missing 'workflow'")
    workflow = _parse_workflow(_require_dict(data["workflow"], "workflow"))

    optimized = None
    if data.get("optimizations") is not None:
        optimizations = [
            _parse_optimization(o, i)
            for i, o in enumerate(_require_list(data["optimizations"], "optimizations"))
        ]
        optimized = optimize_workflow(workflow, optimizations)

    zero_based = None
    if data.get("zero_based") is not None:
        zero_based = _parse_zero_based(data["zero_based"])

    params = None
    if data.get("parameters") is not None:
        params = _parse_params(data["parameters"])

    cost_model = None
    if data.get("cost_model") is not None:
        cost_model = load_cost_model(_require_dict(data["cost_model"], "cost_model"))

    return EstimationRequest(
        workflow=workflow,
        optimized_workflow=optimized,
        zero_based=zero_based,
        params=params,
        cost_model=cost_model,
    )
