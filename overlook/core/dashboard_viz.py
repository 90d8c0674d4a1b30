"""
Dashboard Visualizations
Plotly figures for the weather, flight and house-price dashboards.

Every builder takes the output of the matching analysis function (series
DataFrames or {"name", "value"} slices) and returns a go.Figure. Empty input
yields a placeholder figure rather than an empty axis.
"""

from typing import Dict, List, Optional

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from overlook.core.chart_config import (
    apply_chart_layout,
    apply_standard_axes,
    empty_figure,
    get_pie_colors,
    get_standard_colors,
)
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)

MARKER_SIZE_RANGE = (60, 400)


def _line_chart(
    series: pd.DataFrame, lines: Dict[str, str], height: int, yaxis_title: str = ""
) -> go.Figure:
    colors = list(get_standard_colors().values())
    fig = go.Figure()
    for i, (column, name) in enumerate(lines.items()):
        fig.add_trace(
            go.Scatter(
                x=series["name"],
                y=series[column],
                mode="lines+markers",
                name=name,
                line=dict(color=colors[i % len(colors)], shape="spline"),
            )
        )
    apply_chart_layout(fig, height=height)
    apply_standard_axes(fig, yaxis_title=yaxis_title)
    return fig


def create_temperature_chart(
    series: pd.DataFrame, detailed: bool = False, height: int = 300
) -> go.Figure:
    """
    Temperature trend lines over the leading days.

    :param series: Output of weather_analysis.temperature_series.
    :param detailed: Include 9am / 3pm lines as well as min / max.
    :param height: Chart height in pixels.
    """
    if series.empty:
        return empty_figure("No Temperature Data", height)

    lines = {"min": "Min Temp", "max": "Max Temp"}
    if detailed:
        lines.update({"morning": "9am Temp", "afternoon": "3pm Temp"})
    return _line_chart(series, lines, height, yaxis_title="°C")


def create_rainfall_chart(series: pd.DataFrame, height: int = 400) -> go.Figure:
    """Rainfall bars with 9am / 3pm humidity lines on a secondary axis."""
    if series.empty:
        return empty_figure("No Rainfall Data", height)

    colors = get_standard_colors()
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    fig.add_trace(
        go.Bar(
            x=series["name"],
            y=series["rainfall"],
            name="Rainfall (mm)",
            marker_color=colors["primary"],
        ),
        secondary_y=False,
    )
    for column, name, color in (
        ("humidity9am", "Humidity 9am (%)", colors["secondary"]),
        ("humidity3pm", "Humidity 3pm (%)", colors["tertiary"]),
    ):
        fig.add_trace(
            go.Scatter(
                x=series["name"],
                y=series[column],
                mode="lines+markers",
                name=name,
                line=dict(color=color),
            ),
            secondary_y=True,
        )

    apply_chart_layout(fig, height=height)
    fig.update_yaxes(title_text="Rainfall (mm)", secondary_y=False)
    fig.update_yaxes(title_text="Humidity (%)", secondary_y=True, showgrid=False)
    return fig


def create_wind_chart(series: pd.DataFrame, height: int = 400) -> go.Figure:
    if series.empty:
        return empty_figure("No Wind Data", height)
    lines = {
        "gust": "Wind Gust Speed",
        "morning": "Wind Speed 9am",
        "afternoon": "Wind Speed 3pm",
    }
    return _line_chart(series, lines, height, yaxis_title="km/h")


def create_delay_chart(
    series: pd.DataFrame, height: int = 300, unit_labels: bool = False
) -> go.Figure:
    """
    Grouped bars of departure vs arrival delay per flight.

    :param series: Output of flight_analysis.delay_series.
    :param unit_labels: Append "(min)" to trace names.
    """
    if series.empty:
        return empty_figure("No Delay Data", height)

    colors = get_standard_colors()
    suffix = " (min)" if unit_labels else ""
    fig = go.Figure(
        data=[
            go.Bar(
                x=series["name"],
                y=series["departure"],
                name=f"Departure Delay{suffix}",
                marker_color=colors["primary"],
            ),
            go.Bar(
                x=series["name"],
                y=series["arrival"],
                name=f"Arrival Delay{suffix}",
                marker_color=colors["secondary"],
            ),
        ]
    )
    fig.update_layout(barmode="group")
    apply_chart_layout(fig, height=height)
    apply_standard_axes(fig, yaxis_title="Minutes")
    return fig


def create_scatter_chart(
    points: pd.DataFrame,
    name: str,
    xaxis_title: str = "",
    yaxis_title: str = "",
    x_suffix: Optional[str] = None,
    y_suffix: Optional[str] = None,
    height: int = 300,
    tickformat_y: Optional[str] = None,
) -> go.Figure:
    """
    Scatter plot of {x, y, z, name} points, one marker per loaded row.

    Marker size follows z scaled into MARKER_SIZE_RANGE (area, as in a
    bubble chart); uniform z gives uniform markers.
    """
    if points.empty:
        return empty_figure(f"No {name} Data", height)

    z = pd.to_numeric(points["z"], errors="coerce").fillna(1)
    z_max = z.max() or 1
    low, high = MARKER_SIZE_RANGE
    sizes = (low + (high - low) * (z / z_max)) ** 0.5

    fig = go.Figure(
        go.Scatter(
            x=points["x"],
            y=points["y"],
            mode="markers",
            name=name,
            text=points["name"],
            marker=dict(size=sizes, color=get_standard_colors()["primary"], opacity=0.7),
            hovertemplate="%{text}<br>%{x}<br>%{y}<extra></extra>",
        )
    )
    apply_chart_layout(fig, height=height, showlegend=False, hovermode="closest")
    apply_standard_axes(
        fig,
        xaxis_title=xaxis_title,
        yaxis_title=yaxis_title,
        showgrid_x=True,
        ticksuffix_x=x_suffix,
        ticksuffix_y=y_suffix,
        tickformat_y=tickformat_y,
    )
    return fig


def create_pie_chart(
    slices: List[Dict],
    colors: Optional[List[str]] = None,
    height: int = 300,
    title: Optional[str] = None,
) -> go.Figure:
    """Pie of {"name", "value"} slices labelled with name and percentage."""
    if not slices or sum(s["value"] for s in slices) == 0:
        return empty_figure("No Data Available", height)

    palette = colors or get_pie_colors()
    fig = go.Figure(
        go.Pie(
            labels=[s["name"] for s in slices],
            values=[s["value"] for s in slices],
            marker=dict(colors=[palette[i % len(palette)] for i in range(len(slices))]),
            texttemplate="%{label}: %{percent:.0%}",
            sort=False,
        )
    )
    apply_chart_layout(fig, height=height, title=title, hovermode="closest")
    return fig


def create_rain_prediction_chart(counts: List[Dict], height: int = 300) -> go.Figure:
    colors = get_standard_colors()
    return create_pie_chart(counts, [colors["rain"], colors["no_rain"]], height)


def create_bar_chart(
    slices: List[Dict],
    name: str,
    height: int = 400,
    colors: Optional[List[str]] = None,
) -> go.Figure:
    """Single-series bar chart of {"name", "value"} slices."""
    if not slices:
        return empty_figure(f"No {name} Data", height)

    marker_color = colors or get_standard_colors()["primary"]
    fig = go.Figure(
        go.Bar(
            x=[s["name"] for s in slices],
            y=[s["value"] for s in slices],
            name=name,
            marker_color=marker_color,
        )
    )
    apply_chart_layout(fig, height=height)
    apply_standard_axes(fig, rangemode_y="tozero")
    return fig


def create_status_chart(counts: List[Dict], height: int = 300) -> go.Figure:
    colors = get_standard_colors()
    palette = {"On Time": colors["on_time"], "Late": colors["late"], "Delayed": colors["delayed"]}
    return create_bar_chart(
        counts,
        "Flights",
        height=height,
        colors=[palette.get(s["name"], colors["primary"]) for s in counts],
    )


def create_price_by_bedrooms_chart(groups: List[Dict], height: int = 300) -> go.Figure:
    """Average price per bedroom count (input already in ascending order)."""
    if not groups:
        return empty_figure("No Price Data", height)

    fig = go.Figure(
        go.Bar(
            x=[str(g["bedrooms"]) for g in groups],
            y=[g["avg_price"] for g in groups],
            name="Average Price",
            marker_color=get_standard_colors()["primary"],
            customdata=[g["count"] for g in groups],
            hovertemplate="%{x} bedrooms<br>$%{y:,.0f}<br>%{customdata} homes<extra></extra>",
        )
    )
    apply_chart_layout(fig, height=height)
    apply_standard_axes(
        fig, xaxis_title="Bedrooms", tickformat_y="$~s", rangemode_y="tozero"
    )
    fig.update_xaxes(type="category")
    logger.debug(f"Created price-by-bedrooms chart with {len(groups)} groups")
    return fig
