"""
Cost model: defaults, lookups, and loading from YAML files, dicts, or CostModel instances.
"""

from __future__ import annotations

from pathlib import Path

import yaml

from quotacast.estimation.data_model import CostModel, Forecast
from quotacast.workflow.steps import Step


def default_cost_model() -> CostModel:
    """
    Return the default cost model.

    Returns:
        CostModel with name="default", vibe_unit_cost=0.01, spec_unit_cost=0.05,
        per-kind operation prices in dollars, and a 3-vibe/1-spec zero-based baseline.
    """
    return CostModel(
        name="default",
        vibe_unit_cost=0.01,
        spec_unit_cost=0.05,
        operation_costs={
            "vibe": 0.01,
            "spec": 0.05,
            "data_retrieval": 0.01,
            "processing": 0.02,
            "analysis": 0.03,
        },
        zero_based_baseline_vibes=3.0,
        zero_based_baseline_specs=1.0,
    )


def operation_cost(cost_model: CostModel, step: Step) -> float:
    """Price of one step: the model's entry for its kind, else the step's own quota_cost."""
    return float(cost_model.operation_costs.get(step.kind, step.quota_cost))


def quota_billing_cost(cost_model: CostModel, forecast: Forecast) -> float:
    """Dollar value of a forecast's unit tallies at the model's vibe/spec unit costs."""
    return (
        forecast.vibes_consumed * cost_model.vibe_unit_cost
        + forecast.specs_consumed * cost_model.spec_unit_cost
    )


def load_cost_model(
    source: CostModel | str | Path | dict | None,
) -> CostModel:
    """
    Load a CostModel from various sources.

    Args:
        source: Can be:
            - CostModel instance: returned as-is
            - str or Path: treated as YAML file path
            - dict: constructed directly from dict keys
            - None: returns default_cost_model()

    Returns:
        CostModel instance

    Raises:
        FileNotFoundError: If source is a file path that doesn't exist
        ValueError: If the file can't be parsed or the dict has missing/invalid fields
        TypeError: If source is of an unsupported type
    """
    if source is None:
        return default_cost_model()

    if isinstance(source, CostModel):
        return source

    if isinstance(source, (str, Path)):
        return _load_from_yaml_file(source)

    if isinstance(source, dict):
        return _load_from_dict(source)

    raise TypeError(
        f"Unsupported source type for load_cost_model: {type(source).__name__}"
    )


def _load_from_yaml_file(path: str | Path) -> CostModel:
    """Load CostModel from a YAML file."""
    file_path = Path(path)
    if not file_path.exists():
        raise FileNotFoundError(f"Cost model file not found: {file_path}")

    try:
        data = yaml.safe_load(file_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise ValueError(f"Failed to parse YAML file {file_path}: {e}") from e

    if data is None:
        raise ValueError(f"YAML file {file_path} is empty")

    if not isinstance(data, dict):
        raise ValueError(f"YAML file {file_path}: expected dict, got {type(data).__name__}")

    # Either a single model at the root or several under cost_models (first wins)
    if "cost_models" in data:
        models = data["cost_models"]
        if not isinstance(models, dict) or not models:
            raise ValueError(
                f"YAML file {file_path}: 'cost_models' must be a non-empty dict"
            )
        model_name = next(iter(models.keys()))
        model_data = models[model_name]
        if not isinstance(model_data, dict):
            raise ValueError(
                f"YAML file {file_path}: cost model '{model_name}' must be a dict"
            )
        return _load_from_dict(model_data, default_name=model_name)

    return _load_from_dict(data)


def _number(data: dict, key: str, default: float) -> float:
    value = data.get(key, default)
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ValueError(
            f"Cost model '{key}' must be a number, got {type(value).__name__}"
        )
    if value < 0:
        raise ValueError(f"Cost model '{key}' must be non-negative, got {value}")
    return float(value)


def _load_from_dict(data: dict, default_name: str | None = None) -> CostModel:
    """
    Construct CostModel from a dict.

    Missing fields fall back to default_cost_model(). Unit costs may be flat
    (vibe_unit_cost, spec_unit_cost) or nested under unit_costs: {vibe, spec};
    the zero-based baseline may be nested under zero_based_baseline: {vibes, specs}.
    """
    defaults = default_cost_model()

    name = data.get("name", default_name or defaults.name)
    if not isinstance(name, str):
        raise ValueError(f"Cost model 'name' must be a string, got {type(name).__name__}")

    unit_costs = data.get("unit_costs")
    if unit_costs is not None:
        if not isinstance(unit_costs, dict):
            raise ValueError(
                f"Cost model 'unit_costs' must be a dict, got {type(unit_costs).__name__}"
            )
        vibe_unit_cost = _number(unit_costs, "vibe", defaults.vibe_unit_cost)
        spec_unit_cost = _number(unit_costs, "spec", defaults.spec_unit_cost)
    else:
        vibe_unit_cost = _number(data, "vibe_unit_cost", defaults.vibe_unit_cost)
        spec_unit_cost = _number(data, "spec_unit_cost", defaults.spec_unit_cost)

    raw_costs = data.get("operation_costs")
    if raw_costs is None:
        operation_costs = dict(defaults.operation_costs)
    elif isinstance(raw_costs, dict):
        operation_costs = {
            str(kind): _number(raw_costs, kind, 0.0) for kind in raw_costs
        }
    else:
        raise ValueError(
            f"Cost model 'operation_costs' must be a dict, got {type(raw_costs).__name__}"
        )

    baseline = data.get("zero_based_baseline")
    if baseline is not None:
        if not isinstance(baseline, dict):
            raise ValueError(
                f"Cost model 'zero_based_baseline' must be a dict, "
                f"got {type(baseline).__name__}"
            )
        baseline_vibes = _number(baseline, "vibes", defaults.zero_based_baseline_vibes)
        baseline_specs = _number(baseline, "specs", defaults.zero_based_baseline_specs)
    else:
        baseline_vibes = _number(
            data, "zero_based_baseline_vibes", defaults.zero_based_baseline_vibes
        )
        baseline_specs = _number(
            data, "zero_based_baseline_specs", defaults.zero_based_baseline_specs
        )

    return CostModel(
        name=name,
        vibe_unit_cost=vibe_unit_cost,
        spec_unit_cost=spec_unit_cost,
        operation_costs=operation_costs,
        zero_based_baseline_vibes=baseline_vibes,
        zero_based_baseline_specs=baseline_specs,
    )
