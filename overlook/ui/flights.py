"""
flights.py rendering for the flights dashboard tab
"""

import streamlit as st

import overlook.core.dashboard_viz as viz
import overlook.core.flight_analysis as flight_analysis
from overlook.core.dashboard_state import DatasetView
from overlook.core.table_columns import FLIGHT_COLUMNS
from overlook.ui import components
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)


def _distance_chart(df, height: int, key: str) -> None:
    fig = viz.create_scatter_chart(
        flight_analysis.distance_airtime_series(df),
        name="Flights",
        xaxis_title="Distance (miles)",
        yaxis_title="Air Time (min)",
        x_suffix=" miles",
        y_suffix=" min",
        height=height,
    )
    st.plotly_chart(fig, width="stretch", key=key)


def render_overview(view: DatasetView) -> None:
    df = view.rows
    metrics = flight_analysis.overview_metrics(df)

    components.render_metric_cards(
        [
            ("Average Departure Delay", metrics["avg_dep_delay"].format("{:.1f} min")),
            ("Average Arrival Delay", metrics["avg_arr_delay"].format("{:.1f} min")),
            ("Average Air Time", metrics["avg_air_time"].format("{:.0f} min")),
            ("Delayed Flights", metrics["delay_percentage"].format("{:.1f}%")),
        ]
    )

    row = st.columns([1, 1])
    with row[0]:
        st.subheader("Delay Comparison")
        st.caption("Departure vs. arrival delays")
        fig = viz.create_delay_chart(flight_analysis.delay_series(df))
        st.plotly_chart(fig, width="stretch", key="flights_overview_delay")

    with row[1]:
        st.subheader("Distance vs. Air Time")
        st.caption("Relationship between distance and flight time")
        _distance_chart(df, 300, "flights_overview_distance")


def render():
    view: DatasetView = st.session_state["dashboard"].views["flights"]

    if not components.render_view_status(view):
        return

    selected = components.render_sub_tabs(view)
    df = view.rows

    try:
        if selected == "Overview":
            render_overview(view)
        elif selected == "Delay Analysis":
            st.subheader("Flight Delay Analysis")
            st.caption("Detailed view of departure and arrival delays")
            fig = viz.create_delay_chart(
                flight_analysis.delay_series(df), height=400, unit_labels=True
            )
            st.plotly_chart(fig, width="stretch", key="flights_delays")

            st.subheader("Flight Status")
            st.caption(
                f"Average distance: "
                f"{flight_analysis.overview_metrics(df)['avg_distance'].format('{:.0f} miles')}"
            )
            fig = viz.create_status_chart(flight_analysis.status_counts(df))
            st.plotly_chart(fig, width="stretch", key="flights_status")
        elif selected == "Distance vs Time":
            st.subheader("Distance vs. Air Time Analysis")
            st.caption("Correlation between flight distance and time in air")
            _distance_chart(df, 400, "flights_distance")
        else:
            components.render_data_table(
                view,
                FLIGHT_COLUMNS,
                "Flight Data",
                "Raw flight data from the database",
            )
    except Exception as e:
        logger.error(f"Error rendering flights view '{selected}': {e}")
        st.info("✈️ Flight view temporarily unavailable")
