"""
Comparison data model: named scenarios, ROI tables, and multi-scenario savings.
"""

from __future__ import annotations

from dataclasses import dataclass

from quotacast.estimation.data_model import Forecast


@dataclass(frozen=True)
class Scenario:
    """A named forecast with its savings and qualitative effort/risk labels (low/medium/high)."""

    name: str
    forecast: Forecast
    savings_percentage: float
    implementation_effort: str
    risk_level: str


@dataclass(frozen=True)
class ROITable:
    """Scenarios ranked by savings, the best-scoring option, and a risk summary."""

    scenarios: tuple[Scenario, ...]  # Descending savings_percentage, stable
    best_option: str
    risk_assessment: str
    recommendations: tuple[str, ...]
    scores: tuple[float, ...]  # Risk/effort-weighted score of each ranked scenario, same order


@dataclass(frozen=True)
class MultiScenarioSavings:
    """Conservative/balanced/bold savings percentages and the recommended approach."""

    conservative_savings: float
    balanced_savings: float
    bold_savings: float
    recommended_approach: str
    rule: str  # Name of the recommendation rule that fired
