"""
weather.py rendering for the weather dashboard tab
"""

import streamlit as st

import overlook.core.dashboard_viz as viz
import overlook.core.weather_analysis as weather_analysis
from overlook.core.dashboard_state import DatasetView
from overlook.core.table_columns import WEATHER_COLUMNS
from overlook.ui import components
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)


def render_overview(view: DatasetView) -> None:
    df = view.rows
    metrics = weather_analysis.overview_metrics(df)

    components.render_metric_cards(
        [
            ("Average Max Temperature", metrics["avg_max_temp"].format("{:.1f}°C")),
            ("Average Rainfall", metrics["avg_rainfall"].format("{:.1f} mm")),
            ("Average Wind Speed", metrics["avg_wind_speed"].format("{:.1f} km/h")),
            (
                "Rain Tomorrow Probability",
                metrics["rain_tomorrow_probability"].format("{:.1f}%"),
            ),
        ]
    )

    row = st.columns([1, 1])
    with row[0]:
        st.subheader("Temperature Trends")
        st.caption("Min and max temperatures over time")
        fig = viz.create_temperature_chart(weather_analysis.temperature_series(df))
        st.plotly_chart(fig, width="stretch", key="weather_overview_temp")

    with row[1]:
        st.subheader("Rain Prediction")
        st.caption("Likelihood of rain tomorrow")
        fig = viz.create_rain_prediction_chart(weather_analysis.rain_tomorrow_counts(df))
        st.plotly_chart(fig, width="stretch", key="weather_overview_rain")


def render():
    view: DatasetView = st.session_state["dashboard"].views["weather"]

    if not components.render_view_status(view):
        return

    selected = components.render_sub_tabs(view)
    df = view.rows

    try:
        if selected == "Overview":
            render_overview(view)
        elif selected == "Temperature":
            st.subheader("Temperature Analysis")
            st.caption("Detailed view of temperature patterns")
            fig = viz.create_temperature_chart(
                weather_analysis.temperature_series(df), detailed=True, height=400
            )
            st.plotly_chart(fig, width="stretch", key="weather_temperature")
        elif selected == "Rainfall & Humidity":
            st.subheader("Rainfall and Humidity")
            st.caption("Rainfall amounts and humidity levels")
            fig = viz.create_rainfall_chart(weather_analysis.rainfall_series(df))
            st.plotly_chart(fig, width="stretch", key="weather_rainfall")
        elif selected == "Wind":
            st.subheader("Wind Speed Analysis")
            st.caption("Wind speeds throughout the day")
            fig = viz.create_wind_chart(weather_analysis.wind_series(df))
            st.plotly_chart(fig, width="stretch", key="weather_wind")
        else:
            components.render_data_table(
                view,
                WEATHER_COLUMNS,
                "Weather Data",
                "Raw weather data from the database",
            )
    except Exception as e:
        logger.error(f"Error rendering weather view '{selected}': {e}")
        st.info("🌦️ Weather view temporarily unavailable")
