"""
Main streamlit.io application
"""

import streamlit as st

from overlook import config as cfg
from overlook.api.api_client import ApiClient
from overlook.api.dataset_loader import DatasetLoader
from overlook.core.dashboard_state import Dashboard, ViewStatus
from overlook.models.datasets import DATASETS
from overlook.ui import flights, header, house_prices, weather
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)

st.set_page_config(
    page_title="Data Dashboard",
    layout="wide",
    initial_sidebar_state="collapsed",
)

API_BASE_URL = cfg.get_api_base_url()


@st.cache_resource
def get_client(base_url: str) -> ApiClient:
    logger.info(f"Connecting to data API at {base_url}")
    return ApiClient(base_url)


# Setup dashboard state ########################

if "dashboard" not in st.session_state:
    loader = DatasetLoader(get_client(API_BASE_URL))
    st.session_state["dashboard"] = Dashboard(loader)

dashboard = st.session_state["dashboard"]

header.render_header(API_BASE_URL)

with st.spinner("Loading data..."):
    dashboard.mount()


# Present the dashboard ########################

tab_modules = {
    "weather": weather,
    "flights": flights,
    "house_prices": house_prices,
}

selected_key = header.render_dataset_selector(list(DATASETS), cfg.DEFAULT_DATASET)

if selected_key != dashboard.active_key or dashboard.active.status is ViewStatus.IDLE:
    label = DATASETS[selected_key].label.lower()
    with st.spinner(f"Loading {label} data..."):
        dashboard.select(selected_key)

tab_modules[dashboard.active_key].render()
