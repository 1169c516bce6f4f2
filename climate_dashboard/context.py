"""
Application context for one dashboard render.

Holds the data and derived predictions the page displays. It is built once
per run and passed to the rendering code; the prediction core never sees it.
"""

import logging
from dataclasses import dataclass, field

from climate_dashboard.data import SERIES_NAMES, Observation, load_climate_data
from climate_dashboard.insights import Insight, generate_insights
from climate_dashboard.predictor import PredictionResult, predict
from climate_dashboard.settings import DashboardSettings

logger = logging.getLogger(__name__)


@dataclass
class DashboardContext:
    """Everything one render of the dashboard needs."""

    settings: DashboardSettings
    data: dict[str, list[Observation]]
    forecasts: dict[str, PredictionResult] = field(default_factory=dict)
    chart_forecast: PredictionResult | None = None
    insights: list[Insight] = field(default_factory=list)


def build_context(settings: DashboardSettings, data=None) -> DashboardContext:
    """
    Predict every series and derive insights.

    Args:
        settings: Dashboard settings (horizons, seed).
        data: Pre-loaded series bundle. Generated from ``settings.seed`` when omitted.

    Raises:
        InvalidInput: if any series cannot be fitted.
    """
    if data is None:
        data = load_climate_data(settings.seed)

    forecasts = {name: predict(data[name], settings.forecast_horizon) for name in SERIES_NAMES}
    chart_forecast = predict(data["temperature"], settings.chart_horizon)
    insights = generate_insights(data)

    logger.info(
        f"Dashboard context ready: {len(forecasts)} forecasts, {len(insights)} insight(s)"
    )
    return DashboardContext(
        settings=settings,
        data=data,
        forecasts=forecasts,
        chart_forecast=chart_forecast,
        insights=insights,
    )
