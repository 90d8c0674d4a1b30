"""
house_prices.py rendering for the house prices dashboard tab
"""

import streamlit as st

import overlook.core.dashboard_viz as viz
import overlook.core.house_price_analysis as house_analysis
from overlook.core.dashboard_state import DatasetView
from overlook.core.table_columns import HOUSE_PRICE_COLUMNS
from overlook.core.table_spec import format_currency
from overlook.ui import components
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)


def _currency(aggregate) -> str:
    if aggregate.is_empty:
        return aggregate.format()
    return format_currency(aggregate.value)


def render_overview(view: DatasetView) -> None:
    df = view.rows
    metrics = house_analysis.overview_metrics(df)

    components.render_metric_cards(
        [
            ("Average Home Price", _currency(metrics["avg_price"])),
            ("Average Price per Sq Ft", _currency(metrics["avg_price_per_sqft"])),
            ("Average Bedrooms", metrics["avg_bedrooms"].format("{:.1f}")),
            ("Total Properties", str(metrics["total_properties"])),
        ]
    )

    row = st.columns([1, 1])
    with row[0]:
        st.subheader("Price by Bedrooms")
        st.caption("Average home prices by number of bedrooms")
        fig = viz.create_price_by_bedrooms_chart(house_analysis.price_by_bedrooms(df))
        st.plotly_chart(fig, width="stretch", key="houses_overview_bedrooms")

    with row[1]:
        st.subheader("Furnishing Status")
        st.caption("Distribution of furnishing types")
        fig = viz.create_pie_chart(house_analysis.furnishing_distribution(df))
        st.plotly_chart(fig, width="stretch", key="houses_overview_furnishing")


def render():
    view: DatasetView = st.session_state["dashboard"].views["house_prices"]

    if not components.render_view_status(view):
        return

    selected = components.render_sub_tabs(view)
    df = view.rows

    try:
        if selected == "Overview":
            render_overview(view)
        elif selected == "By Features":
            st.subheader("Price vs Area")
            st.caption(
                "Average bathrooms: "
                f"{house_analysis.overview_metrics(df)['avg_bathrooms'].format('{:.1f}')}"
            )
            fig = viz.create_scatter_chart(
                house_analysis.price_area_series(df),
                name="Properties",
                xaxis_title="Area (sq ft)",
                yaxis_title="Price",
                x_suffix=" sq ft",
                tickformat_y="$~s",
                height=400,
            )
            st.plotly_chart(fig, width="stretch", key="houses_price_area")
        elif selected == "Amenities":
            st.subheader("Property Amenities")
            st.caption("Number of properties with each amenity")
            fig = viz.create_bar_chart(
                house_analysis.amenity_counts(df), "Number of Properties"
            )
            st.plotly_chart(fig, width="stretch", key="houses_amenities")
        elif selected == "Distribution":
            st.subheader("Stories Distribution")
            st.caption("Distribution of properties by number of stories")
            fig = viz.create_pie_chart(
                house_analysis.stories_distribution(df), height=400
            )
            st.plotly_chart(fig, width="stretch", key="houses_stories")
        else:
            components.render_data_table(
                view,
                HOUSE_PRICE_COLUMNS,
                "House Price Data",
                "Raw house price data from the database",
            )
    except Exception as e:
        logger.error(f"Error rendering house prices view '{selected}': {e}")
        st.info("🏠 House price view temporarily unavailable")
