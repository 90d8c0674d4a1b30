"""
flight_analysis.py

Delay metrics, on-time status classification and chart series for flights.

Delays are signed minutes (negative means early). Thresholds are strict:
a delay of exactly 15 or 30 minutes does not cross the boundary.
"""

from typing import Dict, List

import pandas as pd

from overlook import config as cfg
from overlook.core.aggregates import Aggregate, mean, paired_series, prefix_series, rate
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)

STATUS_DELAYED = "Delayed"
STATUS_LATE = "Late"
STATUS_ON_TIME = "On Time"
STATUS_ORDER = [STATUS_ON_TIME, STATUS_LATE, STATUS_DELAYED]

DELAY_SERIES = {"departure": "DEP_DELAY", "arrival": "ARR_DELAY"}
FLIGHT_LABEL = "Flight"


def classify_status(
    dep_delay: float,
    arr_delay: float,
    late_threshold: float = cfg.LATE_THRESHOLD_MIN,
    delayed_threshold: float = cfg.DELAYED_THRESHOLD_MIN,
) -> str:
    """
    Three-tier flight status, checked in priority order.

    :param dep_delay: Departure delay in minutes.
    :param arr_delay: Arrival delay in minutes.
    :return: "Delayed" if either delay > 30, else "Late" if either > 15,
        else "On Time".
    """
    if dep_delay > delayed_threshold or arr_delay > delayed_threshold:
        return STATUS_DELAYED
    if dep_delay > late_threshold or arr_delay > late_threshold:
        return STATUS_LATE
    return STATUS_ON_TIME


def row_status(row: pd.Series) -> str:
    return classify_status(float(row["DEP_DELAY"]), float(row["ARR_DELAY"]))


def delayed_mask(
    df: pd.DataFrame, threshold: float = cfg.LATE_THRESHOLD_MIN
) -> pd.Series:
    """Rows where departure or arrival delay exceeds the threshold."""
    dep = pd.to_numeric(df["DEP_DELAY"], errors="coerce")
    arr = pd.to_numeric(df["ARR_DELAY"], errors="coerce")
    return (dep > threshold) | (arr > threshold)


def delay_percentage(df: pd.DataFrame) -> Aggregate:
    if df.empty:
        return Aggregate.empty()
    return rate(df, delayed_mask(df))


def overview_metrics(df: pd.DataFrame) -> Dict[str, Aggregate]:
    """
    Headline metrics for the flight overview cards.

    :param df: Flight rows.
    :return: Dict with avg_dep_delay, avg_arr_delay, avg_air_time,
        avg_distance, delay_percentage.
    """
    return {
        "avg_dep_delay": mean(df, "DEP_DELAY"),
        "avg_arr_delay": mean(df, "ARR_DELAY"),
        "avg_air_time": mean(df, "AIR_TIME"),
        "avg_distance": mean(df, "DISTANCE"),
        "delay_percentage": delay_percentage(df),
    }


def status_counts(df: pd.DataFrame) -> List[Dict]:
    """Number of flights in each status tier, On Time first."""
    counts = {status: 0 for status in STATUS_ORDER}
    for _, row in df.iterrows():
        counts[row_status(row)] += 1
    return [{"name": status, "value": counts[status]} for status in STATUS_ORDER]


def delay_series(
    df: pd.DataFrame, limit: int = cfg.SERIES_PREFIX_LENGTH
) -> pd.DataFrame:
    """Departure vs arrival delay for the first `limit` flights."""
    return prefix_series(df, DELAY_SERIES, FLIGHT_LABEL, limit)


def distance_airtime_series(df: pd.DataFrame) -> pd.DataFrame:
    """Distance (x) vs air time (y) for every loaded flight."""
    return paired_series(
        df, "DISTANCE", "AIR_TIME", lambda row: f"Flight on {row['FL_DATE']}"
    )
