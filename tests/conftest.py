"""
Shared fixtures for climate dashboard tests.
"""
import pytest

from climate_dashboard.data import Observation


@pytest.fixture
def linear_series():
    """Factory for noise-free series y = slope * year + intercept."""
    def _make(slope, intercept, start, end):
        return [Observation(year=year, value=slope * year + intercept) for year in range(start, end + 1)]
    return _make


@pytest.fixture(autouse=True)
def isolated_settings_env(monkeypatch, tmp_path):
    """Keep tests independent of any local config file or CLIMATE_DASHBOARD_* variables."""
    for suffix in ("CONFIG", "SEED", "CHART_HORIZON", "FORECAST_HORIZON", "TARGET_YEAR", "LOG_LEVEL"):
        monkeypatch.delenv(f"CLIMATE_DASHBOARD_{suffix}", raising=False)
    monkeypatch.setenv("CLIMATE_DASHBOARD_CONFIG", str(tmp_path / "missing.yaml"))
