from climate_dashboard.data import Observation, load_climate_data
from climate_dashboard.errors import BadHorizon, DegenerateSeries, InvalidInput, MissingSeries
from climate_dashboard.insights import DEFAULT_RULES, Insight, ThresholdRule, TrendSummaryRule, generate_insights
from climate_dashboard.predictor import Prediction, PredictionResult, predict

__all__ = [
    "Observation",
    "load_climate_data",
    "InvalidInput",
    "DegenerateSeries",
    "BadHorizon",
    "MissingSeries",
    "Insight",
    "ThresholdRule",
    "TrendSummaryRule",
    "DEFAULT_RULES",
    "generate_insights",
    "Prediction",
    "PredictionResult",
    "predict",
]
