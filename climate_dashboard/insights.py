"""
Insight Generator - advisory messages derived from series trend predictions.

Insights come from an ordered list of rule objects. Each rule reads one
named series, predicts it, and contributes at most one Insight. New
advisories are added by appending a rule, not by changing the generator.
"""

import logging
from dataclasses import dataclass
from typing import Literal, Mapping, Sequence, Union

from climate_dashboard.data import Observation
from climate_dashboard.errors import MissingSeries
from climate_dashboard.predictor import DEFAULT_HORIZON, PredictionResult, predict

logger = logging.getLogger(__name__)

Severity = Literal["info", "warning", "danger"]


@dataclass(frozen=True)
class Insight:
    """A human-readable advisory produced from a prediction."""

    icon: str
    text: str
    severity: Severity


@dataclass(frozen=True)
class ThresholdRule:
    """Emit an insight when the prediction for ``year`` exceeds ``threshold``."""

    series: str
    year: int
    threshold: float
    icon: str
    severity: Severity
    template: str
    horizon: int = DEFAULT_HORIZON

    def evaluate(self, result: PredictionResult) -> Insight | None:
        prediction = result.prediction_for(self.year)
        if prediction is None or not prediction.value > self.threshold:
            return None
        text = self.template.format(value=prediction.value, year=self.year, threshold=self.threshold)
        return Insight(icon=self.icon, text=text, severity=self.severity)


@dataclass(frozen=True)
class TrendSummaryRule:
    """Always emit an insight describing the trend direction and rate."""

    series: str
    icon: str
    severity: Severity
    template: str
    horizon: int = DEFAULT_HORIZON

    def evaluate(self, result: PredictionResult) -> Insight | None:
        text = self.template.format(trend=result.trend, rate=result.rate)
        return Insight(icon=self.icon, text=text, severity=self.severity)


InsightRule = Union[ThresholdRule, TrendSummaryRule]

DEFAULT_RULES: tuple[InsightRule, ...] = (
    ThresholdRule(
        series="temperature",
        year=2030,
        threshold=1.5,
        icon="temperature-high",
        severity="danger",
        template=(
            "Temperature is projected to reach +{value:.1f}°C by {year}, "
            "exceeding the Paris Agreement target."
        ),
    ),
    ThresholdRule(
        series="co2",
        year=2030,
        threshold=450,
        icon="smog",
        severity="warning",
        template="CO₂ levels could exceed {threshold:.0f} ppm by {year} if current trends continue.",
    ),
    TrendSummaryRule(
        series="precipitation",
        icon="cloud-rain",
        severity="info",
        template="Precipitation patterns show {trend} trend at {rate:.1f} mm/year.",
    ),
)


def generate_insights(
    bundle: Mapping[str, Sequence[Observation]],
    rules: Sequence[InsightRule] = DEFAULT_RULES,
) -> list[Insight]:
    """
    Evaluate ``rules`` in order against the named series in ``bundle``.

    The output keeps rule order; each rule adds zero or one insight.
    Prediction failures (InvalidInput) are not caught.
    """
    insights = []
    for rule in rules:
        if rule.series not in bundle:
            raise MissingSeries(f"Series '{rule.series}' is required by an insight rule but was not provided")
        result = predict(bundle[rule.series], rule.horizon)
        insight = rule.evaluate(result)
        if insight is not None:
            insights.append(insight)

    logger.info(f"Generated {len(insights)} insight(s) from {len(rules)} rule(s)")
    return insights
