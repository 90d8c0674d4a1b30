"""
Reusable UI components for the Overlook dashboard.

This module provides shared pieces used by every dataset tab: metric cards,
the error panel with its retry button, the empty-dataset notice, the
sub-tab selector and the raw data table with search and sort controls.
"""

from typing import List, Optional, Sequence, Tuple

import pandas as pd
import streamlit as st

from overlook import config as cfg
from overlook.core.dashboard_state import DatasetView, ViewStatus
from overlook.core.table_spec import (
    Badge,
    ColumnSpec,
    FixedDecimal,
    SortDirection,
    TableState,
    YesNo,
    apply_table_state,
)
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)

SORT_ARROWS = {
    SortDirection.NONE: "↕",
    SortDirection.ASC: "↑",
    SortDirection.DESC: "↓",
}

BADGE_STYLES = {
    "destructive": "background-color: #fee2e2; color: #991b1b; font-weight: 600",
    "warning": "background-color: #ffedd5; color: #c2410c; font-weight: 600",
    "success": "background-color: #dcfce7; color: #166534; font-weight: 600",
    "outline": "",
}


def render_metric_cards(cards: Sequence[Tuple[str, str]]) -> None:
    """
    Render a row of headline metric cards.

    :param cards: (title, display value) pairs.
    """
    columns = st.columns(len(cards))
    for column, (title, value) in zip(columns, cards):
        with column:
            st.metric(title, value)


def render_error_panel(view: DatasetView, title: Optional[str] = None) -> None:
    """Error message with a Try Again button that re-runs the failed load."""
    title = title or f"Error loading {view.dataset.label.lower()} data"
    with st.container(border=True):
        st.error(f"**{title}**\n\n{view.error}")
        if st.button("Try Again", key=f"{view.dataset.key}_retry"):
            with st.spinner(f"Retrying {view.dataset.label.lower()}..."):
                view.retry()
            st.rerun()


def render_empty_dataset(label: str) -> None:
    with st.container(border=True):
        st.subheader(f"No {label} Data Available")
        st.caption(f"There is currently no {label.lower()} data available in the database.")


def render_sub_tabs(view: DatasetView) -> str:
    """
    Horizontal sub-tab selector for a dataset dashboard.

    Opening the Raw Data tab triggers the one-off full data load.

    :return: Selected tab name.
    """
    tabs = cfg.DATASET_TABS[view.dataset.key]
    selected = st.radio(
        f"{view.dataset.label} view",
        tabs,
        horizontal=True,
        key=f"{view.dataset.key}_subtab",
        label_visibility="collapsed",
    )
    if selected == cfg.RAW_DATA_TAB and not view.full_data_loaded:
        with st.spinner("Loading full data..."):
            committed = view.load_full_data()
        if committed:
            # status gate above ran before this load changed the view
            st.rerun()
    return selected


def _table_state(dataset_key: str) -> TableState:
    state_key = f"{dataset_key}_table_state"
    if state_key not in st.session_state:
        st.session_state[state_key] = TableState()
    return st.session_state[state_key]


def _cell_style(column: ColumnSpec, text: str) -> str:
    fmt = column.fmt
    if isinstance(fmt, Badge):
        return BADGE_STYLES.get(fmt.tone(text), "")
    if isinstance(fmt, YesNo):
        return "color: #2563eb; font-weight: 500" if text == "Yes" else ""
    if isinstance(fmt, FixedDecimal) and fmt.signed and text:
        return "color: #dc2626" if text.startswith("+") else "color: #16a34a"
    return ""


def _style_table(rendered: pd.DataFrame, columns: List[ColumnSpec]):
    styler = rendered.style
    for column in columns:
        if isinstance(column.fmt, (Badge, YesNo)) or (
            isinstance(column.fmt, FixedDecimal) and column.fmt.signed
        ):
            styler = styler.map(
                lambda text, c=column: _cell_style(c, text), subset=[column.label]
            )
    return styler


def render_sort_controls(dataset_key: str, columns: List[ColumnSpec], state: TableState) -> None:
    """One toggle button per sortable column, cycling none -> asc -> desc."""
    sortable = [c for c in columns if c.sortable]
    button_columns = st.columns(len(sortable))
    for slot, column in zip(button_columns, sortable):
        direction = state.direction if state.sort_key == column.key else SortDirection.NONE
        with slot:
            st.button(
                f"{column.label} {SORT_ARROWS[direction]}",
                key=f"{dataset_key}_sort_{column.key}",
                on_click=state.toggle_sort,
                args=(column.key,),
                width="stretch",
            )


def render_data_table(
    view: DatasetView, columns: List[ColumnSpec], title: str, description: str
) -> None:
    """
    Raw data table: search box bound to the dataset's search column, sort
    toggles, and the rendered rows.
    """
    if view.is_loading:
        st.info("Loading data...")
        return

    spec = view.dataset
    state = _table_state(spec.key)

    st.subheader(title)
    st.caption(description)

    state.filter_text = st.text_input(
        "Search",
        placeholder=spec.search_placeholder,
        key=f"{spec.key}_search",
        label_visibility="collapsed",
    )
    render_sort_controls(spec.key, columns, state)

    rendered = apply_table_state(view.rows, columns, state, spec.search_column)
    if rendered.empty:
        st.info("No results.")
        return

    st.dataframe(_style_table(rendered, columns), hide_index=True, width="stretch")
    st.caption(f"Showing {len(rendered)} of {len(view.rows)} rows")


def render_view_status(view: DatasetView) -> bool:
    """
    Render loading / error / empty states for a dataset view.

    :return: True when the dashboard body should be rendered.
    """
    if view.status is ViewStatus.IDLE or view.is_loading:
        st.info(f"Loading {view.dataset.label.lower()} data...")
        return False

    if view.status is ViewStatus.ERROR:
        render_error_panel(view)
        return view.has_rows

    if not view.has_rows:
        render_empty_dataset(view.dataset.label)
        return False

    return True
