"""
Tests for the Trend Predictor.
"""
import math
import random

import pytest

from climate_dashboard.data import Observation, load_climate_data
from climate_dashboard.errors import BadHorizon, DegenerateSeries, InvalidInput
from climate_dashboard.predictor import MAX_CONFIDENCE, MIN_CONFIDENCE, predict


def test_exact_fit_recovery(linear_series):
    """A noise-free line is recovered exactly and capped at the confidence ceiling."""
    series = linear_series(0.02, -39.5, 1990, 2020)

    result = predict(series, 6)

    assert result.slope == pytest.approx(0.02, rel=1e-9)
    assert result.rate == pytest.approx(0.02, rel=1e-9)
    assert result.trend == "increasing"
    assert result.confidence == MAX_CONFIDENCE
    for prediction in result.predictions:
        assert prediction.value == pytest.approx(0.02 * prediction.year - 39.5, abs=1e-9)


def test_decreasing_line(linear_series):
    series = linear_series(-1.5, 3500, 2000, 2010)

    result = predict(series, 3)

    assert result.trend == "decreasing"
    assert result.rate == pytest.approx(1.5)
    assert result.slope == pytest.approx(-1.5)
    assert [p.value for p in result.predictions] == pytest.approx([-1.5 * y + 3500 for y in (2011, 2012, 2013)])


def test_default_horizon_is_six(linear_series):
    result = predict(linear_series(1.0, 0.0, 2000, 2024))
    assert [p.year for p in result.predictions] == [2025, 2026, 2027, 2028, 2029, 2030]


@pytest.mark.parametrize("horizon", [0, 1, 6, 25])
def test_horizon_length_and_years(linear_series, horizon):
    """Predictions cover exactly lastYear+1 .. lastYear+horizon in order."""
    result = predict(linear_series(0.5, 10.0, 1950, 1960), horizon)

    assert len(result.predictions) == horizon
    assert [p.year for p in result.predictions] == list(range(1961, 1961 + horizon))


def test_zero_horizon_still_scores_fit(linear_series):
    result = predict(linear_series(2.0, 1.0, 2000, 2005), 0)

    assert result.predictions == ()
    assert result.confidence == MAX_CONFIDENCE
    assert result.trend == "increasing"
    assert result.rate == pytest.approx(2.0)


def test_last_year_taken_from_max_not_position(linear_series):
    """Out-of-order input projects from the most recent year."""
    ordered = linear_series(0.3, -500.0, 2000, 2015)
    shuffled = list(ordered)
    random.Random(7).shuffle(shuffled)
    shuffled.remove(ordered[-1])
    shuffled.insert(0, ordered[-1])

    result = predict(shuffled, 4)
    expected = predict(ordered, 4)

    assert [p.year for p in result.predictions] == [2016, 2017, 2018, 2019]
    assert [p.value for p in result.predictions] == pytest.approx([p.value for p in expected.predictions])
    assert result.slope == pytest.approx(expected.slope)


def test_flat_series_is_decreasing_with_full_confidence():
    """Zero-variance values: slope exactly 0 classifies as decreasing, confidence hits the ceiling."""
    series = [Observation(year=year, value=0.1) for year in range(2000, 2013)]

    result = predict(series, 3)

    assert result.slope == 0
    assert result.rate == 0
    assert result.trend == "decreasing"
    assert result.confidence == MAX_CONFIDENCE
    assert all(p.value == pytest.approx(0.1) for p in result.predictions)


def test_zero_slope_with_scatter_hits_confidence_floor():
    """No linear relationship at all gives the minimum confidence."""
    series = [
        Observation(2000, 1.0),
        Observation(2001, -1.0),
        Observation(2002, -1.0),
        Observation(2003, 1.0),
    ]

    result = predict(series, 2)

    assert result.slope == 0
    assert result.trend == "decreasing"
    assert result.confidence == MIN_CONFIDENCE


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_confidence_bounds_on_mock_data(seed):
    bundle = load_climate_data(seed)
    for series in bundle.values():
        result = predict(series, 6)
        assert MIN_CONFIDENCE <= result.confidence <= MAX_CONFIDENCE
        assert result.rate >= 0
        assert all(math.isfinite(p.value) for p in result.predictions)


def test_two_points_is_enough():
    result = predict([Observation(2020, 1.0), Observation(2022, 2.0)], 1)

    assert result.slope == pytest.approx(0.5)
    assert result.predictions[0].year == 2023
    assert result.predictions[0].value == pytest.approx(2.5)


@pytest.mark.parametrize("series", [
    [],
    [Observation(2020, 1.0)],
    [Observation(2020, 1.0), Observation(2020, 2.0), Observation(2020, 3.0)],
])
def test_degenerate_series_rejected(series):
    with pytest.raises(DegenerateSeries):
        predict(series, 6)


def test_non_finite_values_rejected():
    series = [Observation(2000, 1.0), Observation(2001, float("nan")), Observation(2002, 3.0)]
    with pytest.raises(DegenerateSeries):
        predict(series, 2)


def test_negative_horizon_rejected(linear_series):
    with pytest.raises(BadHorizon):
        predict(linear_series(1.0, 0.0, 2000, 2010), -1)


def test_error_taxonomy():
    """Both failure kinds are InvalidInput, which is a ValueError."""
    assert issubclass(DegenerateSeries, InvalidInput)
    assert issubclass(BadHorizon, InvalidInput)
    assert issubclass(InvalidInput, ValueError)


def test_prediction_for_exact_year_only(linear_series):
    result = predict(linear_series(1.0, 0.0, 2020, 2024), 3)

    assert result.prediction_for(2026).year == 2026
    assert result.prediction_for(2030) is None
    assert result.prediction_for(2024) is None
