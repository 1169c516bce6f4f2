"""
Mock climate series synthesis.

Values are generated to loosely follow observed global trends; they are
illustrative only. To use real data, replace ``load_climate_data`` with a
loader returning the same bundle of Observation sequences.
"""

import logging
from dataclasses import dataclass
from typing import Mapping, Sequence

import numpy as np
import pandas as pd

logger = logging.getLogger(__name__)

SERIES_NAMES = ("temperature", "co2", "precipitation")

# Year ranges of each mock series (inclusive)
TEMPERATURE_YEARS = (1880, 2024)
CO2_YEARS = (1958, 2024)
PRECIPITATION_YEARS = (2000, 2024)

CO2_BASELINE_PPM = 315
PRECIPITATION_BASELINE_MM = 1000


@dataclass(frozen=True)
class Observation:
    """One yearly sample of a climate variable."""

    year: int
    value: float


Series = Sequence[Observation]
ClimateBundle = Mapping[str, Series]


def generate_temperature(rng):
    """Global temperature anomaly (degC): linear warming, mild acceleration and noise."""
    start, end = TEMPERATURE_YEARS
    span = end - start
    data = []
    for year in range(start, end + 1):
        trend = (year - start) * 0.009
        acceleration = ((year - start) / span) ** 2 * 0.3
        noise = rng.uniform(-0.125, 0.125)
        data.append(Observation(year=year, value=float(-0.2 + trend + acceleration + noise)))
    return data


def generate_co2(rng):
    """Atmospheric CO2 (ppm): accumulating yearly increase plus measurement noise."""
    start, end = CO2_YEARS
    level = CO2_BASELINE_PPM
    data = []
    for year in range(start, end + 1):
        level += 1.5 + (year - start) * 0.025
        data.append(Observation(year=year, value=float(level + rng.uniform(-1, 1))))
    return data


def generate_precipitation(rng):
    """Annual precipitation (mm): slow oscillation around a slightly rising baseline."""
    start, end = PRECIPITATION_YEARS
    data = []
    for year in range(start, end + 1):
        variation = np.sin((year - start) * 0.3) * 50
        trend = (year - start) * 0.5
        noise = rng.uniform(-40, 40)
        data.append(Observation(year=year, value=float(PRECIPITATION_BASELINE_MM + variation + trend + noise)))
    return data


def load_climate_data(seed: int | None = None) -> dict[str, list[Observation]]:
    """
    Generate the mock bundle of all three series.

    Args:
        seed: Seed for the random generator. Same seed, same bundle.
    """
    logger.info(f"Generating mock climate data (seed={seed})")
    rng = np.random.default_rng(seed)
    return {
        "temperature": generate_temperature(rng),
        "co2": generate_co2(rng),
        "precipitation": generate_precipitation(rng),
    }


def latest_observation(series: Series) -> Observation:
    """Observation with the most recent year, regardless of position."""
    if not series:
        raise ValueError("Cannot take the latest observation of an empty series")
    return max(series, key=lambda obs: obs.year)


def series_to_frame(series: Series) -> pd.DataFrame:
    """Convert a series to a DataFrame with Year/Value columns, sorted by year."""
    df = pd.DataFrame(
        {"Year": [obs.year for obs in series], "Value": [obs.value for obs in series]},
        columns=["Year", "Value"],
    )
    return df.sort_values("Year").reset_index(drop=True)
