# config.py
"""
Configurations for the Overlook analytics dashboard.

This module holds the API connection settings, the load-size and retry
parameters, the classification thresholds, and the tab layout shared by the
Streamlit UI and the core transforms.
"""

import os

import streamlit as st

DEFAULT_API_BASE_URL = "http://127.0.0.1:5000/api"
API_BASE_URL_ENV = "OVERLOOK_API_BASE_URL"

# Transport retry policy
MAX_RETRIES = 3
RETRY_DELAY_SECONDS = 1.0
REQUEST_TIMEOUT_SECONDS = 30

# Row limits applied client-side after the full collection is fetched
INITIAL_PAGE_SIZE = 20
FULL_PAGE_SIZE = 100

# Per-row time-series charts only show this many leading rows
SERIES_PREFIX_LENGTH = 20

# Flight delay thresholds (minutes, strict greater-than)
LATE_THRESHOLD_MIN = 15
DELAYED_THRESHOLD_MIN = 30

DEFAULT_DATASET = "weather"

DATASET_TABS = {
    "weather": ["Overview", "Temperature", "Rainfall & Humidity", "Wind", "Raw Data"],
    "flights": ["Overview", "Delay Analysis", "Distance vs Time", "Raw Data"],
    "house_prices": ["Overview", "By Features", "Amenities", "Distribution", "Raw Data"],
}

RAW_DATA_TAB = "Raw Data"


def get_api_base_url() -> str:
    """
    Resolve the API base URL.

    Lookup order: Streamlit secret ``API_BASE_URL``, the
    ``OVERLOOK_API_BASE_URL`` environment variable, then the local default.

    :return: Base URL without a trailing slash.
    """
    try:
        url = st.secrets["API_BASE_URL"]
    except (FileNotFoundError, KeyError):
        url = os.environ.get(API_BASE_URL_ENV, DEFAULT_API_BASE_URL)
    return str(url).rstrip("/")
