"""
Dashboard configuration settings.
"""

import os

import yaml
from typing import Literal

from pydantic import BaseModel, Field

ENV_PREFIX = "CLIMATE_DASHBOARD_"

# Env var suffix -> settings field
ENV_OVERRIDES = {
    "SEED": "seed",
    "CHART_HORIZON": "chart_horizon",
    "FORECAST_HORIZON": "forecast_horizon",
    "TARGET_YEAR": "target_year",
    "LOG_LEVEL": "log_level",
}


class DashboardSettings(BaseModel):
    """
    Presentation settings for the climate dashboard.
    """
    seed: int | None = Field(default=None, ge=0, description="Random seed for mock data; None leaves the generator unseeded")
    chart_horizon: int = Field(default=10, ge=0, description="Years projected on the temperature chart")
    forecast_horizon: int = Field(default=6, ge=0, description="Years projected for the prediction cards")
    target_year: int = Field(default=2030, description="Year shown on the prediction cards")
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO", description="Root logging level")


def load_settings(path: str | None = None) -> DashboardSettings:
    """
    Load dashboard settings from a YAML file, then apply environment overrides.

    Args:
        path: Path to the YAML file. Defaults to CLIMATE_DASHBOARD_CONFIG env var or "config.yaml".
    """
    if path is None:
        path = os.getenv(f"{ENV_PREFIX}CONFIG", "config.yaml")

    config_data = {}
    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except Exception as e:
            raise RuntimeError(f"Failed to load configuration from {path}: {e}")

    # Env vars > file > defaults
    for suffix, field_name in ENV_OVERRIDES.items():
        value = os.getenv(f"{ENV_PREFIX}{suffix}")
        if value:
            config_data[field_name] = value

    return DashboardSettings(**config_data)
