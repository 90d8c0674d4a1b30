"""
weather_analysis.py

Summary metrics and chart series for the weather dataset.

Rain flags (RainToday / RainTomorrow) are coerced to booleans by the loader;
the coercion is idempotent, so it is applied again here for rows built elsewhere.
"""

from typing import Dict, List

import pandas as pd

from overlook import config as cfg
from overlook.core.aggregates import Aggregate, mean, prefix_series, rate
from overlook.models.datasets import coerce_flag
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)

TEMPERATURE_SERIES = {
    "min": "MinTemp",
    "max": "MaxTemp",
    "morning": "Temp9am",
    "afternoon": "Temp3pm",
}
RAINFALL_SERIES = {
    "rainfall": "Rainfall",
    "humidity9am": "Humidity9am",
    "humidity3pm": "Humidity3pm",
}
WIND_SERIES = {
    "gust": "WindGustSpeed",
    "morning": "WindSpeed9am",
    "afternoon": "WindSpeed3pm",
}
DAY_LABEL = "Day"


def rain_tomorrow_mask(df: pd.DataFrame) -> pd.Series:
    if "RainTomorrow" not in df.columns:
        return pd.Series(False, index=df.index)
    return df["RainTomorrow"].map(coerce_flag).astype(bool)


def rain_tomorrow_probability(df: pd.DataFrame) -> Aggregate:
    """Percentage of rows with rain forecast for tomorrow."""
    return rate(df, rain_tomorrow_mask(df))


def overview_metrics(df: pd.DataFrame) -> Dict[str, Aggregate]:
    """
    Headline metrics for the weather overview cards.

    :param df: Weather rows.
    :return: Dict with avg_max_temp, avg_rainfall, avg_wind_speed,
        rain_tomorrow_probability.
    """
    metrics = {
        "avg_max_temp": mean(df, "MaxTemp"),
        "avg_rainfall": mean(df, "Rainfall"),
        "avg_wind_speed": mean(df, "WindSpeed3pm"),
        "rain_tomorrow_probability": rain_tomorrow_probability(df),
    }
    logger.debug(f"Weather overview over {len(df)} rows")
    return metrics


def rain_tomorrow_counts(df: pd.DataFrame) -> List[Dict]:
    """Rain / No Rain slices for the rain prediction pie chart."""
    rain = int(rain_tomorrow_mask(df).sum())
    return [
        {"name": "Rain", "value": rain},
        {"name": "No Rain", "value": len(df) - rain},
    ]


def temperature_series(
    df: pd.DataFrame, limit: int = cfg.SERIES_PREFIX_LENGTH
) -> pd.DataFrame:
    return prefix_series(df, TEMPERATURE_SERIES, DAY_LABEL, limit)


def rainfall_series(
    df: pd.DataFrame, limit: int = cfg.SERIES_PREFIX_LENGTH
) -> pd.DataFrame:
    return prefix_series(df, RAINFALL_SERIES, DAY_LABEL, limit)


def wind_series(df: pd.DataFrame, limit: int = cfg.SERIES_PREFIX_LENGTH) -> pd.DataFrame:
    return prefix_series(df, WIND_SERIES, DAY_LABEL, limit)
