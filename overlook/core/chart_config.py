"""
chart_config.py

Reusable Plotly configuration helpers shared by the dashboard charts.

Provides standardized margins, palette, layout and axis settings so every
chart in the three dashboards looks the same.
"""

from typing import Any, Dict, List, Optional

import plotly.graph_objects as go


def get_default_margins(compact: bool = False) -> Dict[str, int]:
    """
    Get standard margin configurations for charts.

    :param compact: If True, returns reduced margins for overview cards
    :return: Dictionary with margin settings
    """
    if compact:
        return dict(l=30, r=20, t=30, b=40)
    else:
        return dict(l=50, r=30, t=40, b=40)


def get_standard_colors() -> Dict[str, str]:
    """
    Get the series palette used across charts.

    :return: Dictionary with color definitions
    """
    return {
        "primary": "#8884d8",
        "secondary": "#82ca9d",
        "tertiary": "#ffc658",
        "quaternary": "#ff8042",
        "rain": "#0088FE",
        "no_rain": "#FFBB28",
        "delayed": "#dc2626",
        "late": "#f97316",
        "on_time": "#16a34a",
    }


def get_pie_colors() -> List[str]:
    """
    Get the slice palette for distribution pie charts.

    :return: List of colors, cycled when there are more slices
    """
    return ["#0088FE", "#00C49F", "#FFBB28", "#FF8042", "#8884D8"]


def empty_figure(title: str = "No Data Available", height: int = 300) -> go.Figure:
    """Placeholder figure for charts with nothing to plot."""
    fig = go.Figure()
    fig.update_layout(
        title=title,
        height=height,
        template="plotly_white",
        xaxis={"visible": False},
        yaxis={"visible": False},
    )
    return fig


def apply_chart_layout(
    fig: go.Figure,
    height: int = 300,
    showlegend: bool = True,
    title: Optional[str] = None,
    compact: bool = False,
    hovermode: str = "x unified",
) -> go.Figure:
    """
    Apply standard chart layout configuration.

    :param fig: Plotly figure to configure
    :param height: Chart height in pixels
    :param showlegend: Whether to show legend
    :param title: Chart title (optional)
    :param compact: Use compact margins if True
    :param hovermode: Hover mode setting
    :return: Configured figure
    """
    layout_config = {
        "height": height,
        "margin": get_default_margins(compact),
        "showlegend": showlegend,
        "hovermode": hovermode,
        "template": "plotly_white",
    }

    if title:
        layout_config["title"] = title

    fig.update_layout(**layout_config)
    return fig


def apply_standard_axes(
    fig: go.Figure,
    xaxis_title: str = "",
    yaxis_title: str = "",
    showgrid_x: bool = False,
    showgrid_y: bool = True,
    rangemode_y: str = "normal",
    ticksuffix_x: Optional[str] = None,
    ticksuffix_y: Optional[str] = None,
    tickformat_y: Optional[str] = None,
) -> go.Figure:
    """
    Apply standard axis configuration to charts.

    :param fig: Plotly figure to configure
    :param xaxis_title: X-axis title
    :param yaxis_title: Y-axis title
    :param showgrid_x: Whether to show x-axis grid
    :param showgrid_y: Whether to show y-axis grid
    :param rangemode_y: Y-axis range mode
    :param ticksuffix_x: Unit suffix for x ticks (e.g., " miles")
    :param ticksuffix_y: Unit suffix for y ticks (e.g., " min")
    :param tickformat_y: d3 tick format for y (e.g., "$~s")
    :return: Configured figure
    """
    xaxis_config: Dict[str, Any] = {
        "title": xaxis_title,
        "showgrid": showgrid_x,
        "gridcolor": "lightgray",
    }

    yaxis_config: Dict[str, Any] = {
        "title": yaxis_title,
        "showgrid": showgrid_y,
        "gridcolor": "lightgray",
        "rangemode": rangemode_y,
    }

    if ticksuffix_x:
        xaxis_config["ticksuffix"] = ticksuffix_x
    if ticksuffix_y:
        yaxis_config["ticksuffix"] = ticksuffix_y
    if tickformat_y:
        yaxis_config["tickformat"] = tickformat_y

    fig.update_xaxes(**xaxis_config)
    fig.update_yaxes(**yaxis_config)
    return fig
