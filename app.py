# app.py
import logging

import streamlit as st

from climate_dashboard.charts import co2_chart, precipitation_chart, temperature_chart
from climate_dashboard.context import build_context
from climate_dashboard.data import latest_observation, load_climate_data, series_to_frame
from climate_dashboard.errors import InvalidInput
from climate_dashboard.settings import load_settings

# --- 0. App Configuration ---
st.set_page_config(
    page_title="Climate Prediction Platform",
    page_icon="🌍",
    layout="wide",
    initial_sidebar_state="expanded"
)

settings = load_settings()
logging.basicConfig(level=settings.log_level)
logger = logging.getLogger(__name__)

INSIGHT_ICONS = {
    "temperature-high": "🌡️",
    "smog": "🏭",
    "cloud-rain": "🌧️",
}

SERIES_LABELS = {
    "temperature": "Temperature Anomaly (degC)",
    "co2": "CO2 Concentration (ppm)",
    "precipitation": "Precipitation (mm)",
}


# --- 1. Data ---
@st.cache_data(ttl=3600) # Redraw unseeded mock data hourly
def get_climate_data(seed):
    """Mock climate series, cached per seed."""
    return load_climate_data(seed)


# --- 2. Helper Functions for UI ---
def df_to_csv_bytes(data_frame):
    """Converts a Pandas DataFrame to CSV bytes for download."""
    return data_frame.to_csv(index=False).encode('utf-8')


def format_temperature(value):
    return f"{value:+.1f}°C"


def format_co2(value):
    return f"{round(value)} ppm"


def format_precipitation(value):
    return f"{round(value)} mm"


FORMATTERS = {
    "temperature": format_temperature,
    "co2": format_co2,
    "precipitation": format_precipitation,
}


def render_insight(insight):
    """Show one insight in the alert box matching its severity."""
    icon = INSIGHT_ICONS.get(insight.icon)
    if insight.severity == "danger":
        st.error(insight.text, icon=icon)
    elif insight.severity == "warning":
        st.warning(insight.text, icon=icon)
    else:
        st.info(insight.text, icon=icon)


# --- 3. Sidebar Controls ---
st.sidebar.title("🌍 Dashboard Controls")
st.sidebar.markdown("Mock climate series are regenerated for each seed and projected with a linear trend.")

use_fixed_seed = st.sidebar.checkbox(
    "Use fixed seed",
    value=settings.seed is not None,
    help="Fix the random seed to get reproducible mock data."
)
seed = None
if use_fixed_seed:
    seed = int(st.sidebar.number_input(
        "Random seed",
        min_value=0,
        value=settings.seed if settings.seed is not None else 42,
        step=1
    ))

chart_horizon = st.sidebar.slider(
    "Temperature projection (years)",
    min_value=1,
    max_value=30,
    value=max(1, min(30, settings.chart_horizon)),
    help="Number of future years drawn on the temperature chart."
)

run_settings = settings.model_copy(update={"seed": seed, "chart_horizon": chart_horizon})

# --- 4. Main Application ---
st.title("🌍 Climate Prediction Platform")
st.markdown("Mock temperature, CO₂ and precipitation series with linear trend projections.")
st.markdown("---")

try:
    context = build_context(run_settings, data=get_climate_data(seed))
except InvalidInput as e:
    logger.error(f"Could not build predictions: {e}")
    st.warning(f"Predictions are unavailable: {e}")
    st.stop()

data = context.data

# Current metrics
col1, col2, col3 = st.columns(3)
for column, name in zip((col1, col2, col3), ("temperature", "co2", "precipitation")):
    latest = latest_observation(data[name])
    column.metric(f"{SERIES_LABELS[name]}, {latest.year}", FORMATTERS[name](latest.value))

tab1, tab2, tab3 = st.tabs([
    "📈 Trends",
    "🔮 Predictions",
    "ℹ️ About & Data"
])

with tab1:
    st.subheader("Temperature Anomaly")
    st.plotly_chart(temperature_chart(data["temperature"], context.chart_forecast), use_container_width=True)

    col1, col2 = st.columns(2)
    with col1:
        st.subheader("CO₂ Concentration")
        st.plotly_chart(co2_chart(data["co2"]), use_container_width=True)
    with col2:
        st.subheader("Precipitation")
        st.plotly_chart(precipitation_chart(data["precipitation"]), use_container_width=True)

with tab2:
    target_year = run_settings.target_year
    st.header(f"Projections for {target_year}")

    columns = st.columns(3)
    for column, name in zip(columns, ("temperature", "co2", "precipitation")):
        result = context.forecasts[name]
        prediction = result.prediction_for(target_year)
        with column:
            st.subheader(SERIES_LABELS[name])
            if prediction is None:
                st.caption(f"{target_year} is outside the {run_settings.forecast_horizon}-year forecast horizon.")
                continue
            st.markdown(f"### {FORMATTERS[name](prediction.value)}")
            st.progress(result.confidence, text=f"Confidence {result.confidence * 100:.0f}%")
            st.caption(f"Trend: {result.trend} at {result.rate:.3f} per year")

    st.subheader("Insights")
    if not context.insights:
        st.markdown("No significant insights detected.")
    for insight in context.insights:
        render_insight(insight)

with tab3:
    st.header("About this Application & Data Source")
    st.markdown("""
    This dashboard synthesizes **mock** climate series and projects them forward with an ordinary least
    squares linear trend.

    **Methodology:**
    - **Trend:** a straight line fitted to each full series; the slope gives the trend direction and yearly rate.
    - **Confidence:** the R² of the fit, shown within a 10%-95% range.
    - **Insights:** fixed rules over the projected values, e.g. temperature above +1.5°C or CO₂ above 450 ppm by 2030.

    **Disclaimer:**
    The data is illustrative only and is not retrieved from NASA or any other source.
    """)

    for name in ("temperature", "co2", "precipitation"):
        frame = series_to_frame(data[name]).rename(columns={"Value": SERIES_LABELS[name]})
        st.download_button(
            label=f"Download {SERIES_LABELS[name]} Data (CSV)",
            data=df_to_csv_bytes(frame),
            file_name=f"mock_{name}.csv",
            mime="text/csv"
        )

st.sidebar.markdown("---")
st.sidebar.info("Built with Streamlit and Plotly.")
