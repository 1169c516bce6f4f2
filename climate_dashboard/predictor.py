"""
Trend Predictor - linear trend fitting and extrapolation for yearly series.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Literal, Sequence

import numpy as np

from climate_dashboard.data import Observation
from climate_dashboard.errors import BadHorizon, DegenerateSeries

logger = logging.getLogger(__name__)

DEFAULT_HORIZON = 6
MIN_CONFIDENCE = 0.1
MAX_CONFIDENCE = 0.95

Trend = Literal["increasing", "decreasing"]


@dataclass(frozen=True)
class Prediction:
    """A single projected value for a future year."""

    year: int
    value: float


@dataclass(frozen=True)
class PredictionResult:
    """Fitted trend of one series plus its extrapolated points."""

    predictions: tuple[Prediction, ...] = field(default_factory=tuple)
    confidence: float = MIN_CONFIDENCE
    trend: Trend = "decreasing"
    rate: float = 0.0
    slope: float = 0.0
    intercept: float = 0.0

    def prediction_for(self, year: int) -> Prediction | None:
        """Return the prediction for exactly ``year``, or None if outside the horizon."""
        for prediction in self.predictions:
            if prediction.year == year:
                return prediction
        return None


def predict(series: Sequence[Observation], horizon: int = DEFAULT_HORIZON) -> PredictionResult:
    """
    Fit an ordinary least squares line to ``series`` and project it forward.

    Args:
        series: Observations of one variable. At least two distinct years.
        horizon: Number of future years to project, starting the year after
            the latest observed one.

    Returns:
        PredictionResult with ``horizon`` predictions, an R²-derived
        confidence clamped to [0.1, 0.95], the trend direction and its rate.

    Raises:
        DegenerateSeries: fewer than two observations, all years identical,
            or a fit that is not finite.
        BadHorizon: negative horizon.
    """
    if horizon < 0:
        raise BadHorizon(f"Horizon must be >= 0, got {horizon}")

    n = len(series)
    if n < 2:
        raise DegenerateSeries(f"Need at least 2 observations to fit a trend, got {n}")

    years = np.array([obs.year for obs in series], dtype=np.int64)
    values = np.array([obs.value for obs in series], dtype=float)

    # Origin moved to the first observation; the slope does not depend on it.
    x = years - years[0]
    y = values - values[0]

    sum_x = int(x.sum())
    sum_x2 = int((x * x).sum())
    denominator = n * sum_x2 - sum_x * sum_x
    if denominator == 0:
        raise DegenerateSeries(f"All {n} observations share year {int(years[0])}")

    sum_y = float(y.sum())
    sum_xy = float((x * y).sum())
    slope = (n * sum_xy - sum_x * sum_y) / denominator
    shifted_intercept = (sum_y - slope * sum_x) / n
    intercept = (float(values.sum()) - slope * float(years.sum())) / n

    if not (math.isfinite(slope) and math.isfinite(intercept)):
        raise DegenerateSeries(f"Trend fit is not finite (slope={slope}, intercept={intercept})")

    last_year = int(years.max())
    predictions = tuple(
        Prediction(year=year, value=slope * year + intercept)
        for year in range(last_year + 1, last_year + horizon + 1)
    )

    residuals = y - (slope * x + shifted_intercept)
    ss_res = float((residuals ** 2).sum())
    ss_tot = float(((y - sum_y / n) ** 2).sum())
    r2 = 1.0 if ss_tot == 0 else 1.0 - ss_res / ss_tot
    confidence = max(MIN_CONFIDENCE, min(MAX_CONFIDENCE, r2))

    trend: Trend = "increasing" if slope > 0 else "decreasing"

    logger.debug(
        f"Fitted {n} points: slope={slope:.6g}, intercept={intercept:.6g}, "
        f"r2={r2:.4f}, last_year={last_year}, horizon={horizon}"
    )

    return PredictionResult(
        predictions=predictions,
        confidence=confidence,
        trend=trend,
        rate=abs(slope),
        slope=slope,
        intercept=intercept,
    )
