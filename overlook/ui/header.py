"""
Header rendering module for the Overlook dashboard.

Title bar, the dataset selector and the API connection note.
"""

from typing import Sequence

import streamlit as st

from overlook.models.datasets import get_dataset


def render_header(api_base_url: str) -> None:
    header_col1, header_col2 = st.columns([2, 1])
    with header_col1:
        st.header("Data Dashboard")
        st.caption("Weather, flights and house prices from the data API")
    with header_col2:
        st.caption(f"API: `{api_base_url}`")


def render_dataset_selector(keys: Sequence[str], default_key: str) -> str:
    """
    Top-level dataset tabs.

    :param keys: Dataset keys in display order.
    :param default_key: Dataset shown on first render.
    :return: Selected dataset key.
    """
    keys = list(keys)
    return st.radio(
        "Dataset",
        keys,
        index=keys.index(default_key),
        format_func=lambda key: get_dataset(key).label,
        horizontal=True,
        key="dataset",
        label_visibility="collapsed",
    )
