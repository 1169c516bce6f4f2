"""
Plotly figure builders for the dashboard charts.
"""

import plotly.express as px
import plotly.graph_objects as go

from climate_dashboard.data import series_to_frame

TEMPERATURE_COLOR = "#d32f2f"
PREDICTION_COLOR = "#ff9800"
CO2_COLOR = "#f57c00"
PRECIPITATION_COLOR = "#0288d1"


def temperature_chart(series, result):
    """Historical temperature anomaly with the projected trend as a dashed line."""
    history = series_to_frame(series)
    fig = go.Figure()
    fig.add_trace(go.Scatter(
        x=history["Year"],
        y=history["Value"],
        mode="lines",
        name="Historical",
        line=dict(color=TEMPERATURE_COLOR, width=2),
        fill="tozeroy",
        fillcolor="rgba(211, 47, 47, 0.1)",
    ))
    fig.add_trace(go.Scatter(
        x=[p.year for p in result.predictions],
        y=[p.value for p in result.predictions],
        mode="lines",
        name="Prediction",
        line=dict(color=PREDICTION_COLOR, width=2, dash="dash"),
    ))
    fig.update_layout(
        title="Global Temperature Anomaly",
        legend=dict(orientation="h", yanchor="bottom", y=1.02),
    )
    fig.update_yaxes(title_text="Temperature Anomaly (°C)")
    fig.update_xaxes(title_text="Year")
    return fig


def co2_chart(series):
    """Filled line of CO2 concentration."""
    fig = px.area(series_to_frame(series), x="Year", y="Value", title="CO₂ Concentration")
    fig.update_traces(line_color=CO2_COLOR)
    fig.update_yaxes(title_text="CO₂ (ppm)")
    return fig


def precipitation_chart(series):
    """Yearly precipitation bars."""
    fig = px.bar(series_to_frame(series), x="Year", y="Value", title="Annual Precipitation")
    fig.update_traces(marker_color=PRECIPITATION_COLOR)
    fig.update_yaxes(title_text="Precipitation (mm/year)")
    return fig
