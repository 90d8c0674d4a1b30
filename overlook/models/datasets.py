"""
Dataset definitions and row-level type helpers.

This module describes the three datasets served by the API (weather,
flights, house prices): their endpoints, the columns each row carries, the
column bound to the table search box, and how rows are shaped on load.
"""

import numbers
from dataclasses import dataclass, field
from typing import Any, Dict, Tuple

import numpy as np

WEATHER_COLUMNS = (
    "MinTemp",
    "MaxTemp",
    "Rainfall",
    "Evaporation",
    "Sunshine",
    "WindGustDir",
    "WindGustSpeed",
    "WindDir9am",
    "WindDir3pm",
    "WindSpeed9am",
    "WindSpeed3pm",
    "Humidity9am",
    "Humidity3pm",
    "Pressure9am",
    "Pressure3pm",
    "Cloud9am",
    "Cloud3pm",
    "Temp9am",
    "Temp3pm",
    "RainToday",
    "RISK_MM",
    "RainTomorrow",
)

FLIGHT_COLUMNS = (
    "FL_DATE",
    "DEP_DELAY",
    "ARR_DELAY",
    "AIR_TIME",
    "DISTANCE",
    "DEP_TIME",
    "ARR_TIME",
)

HOUSE_PRICE_COLUMNS = (
    "id",
    "price",
    "area",
    "bedrooms",
    "bathrooms",
    "stories",
    "mainroad",
    "guestroom",
    "basement",
    "hotwaterheating",
    "airconditioning",
    "parking",
    "prefarea",
    "furnishingstatus",
)

RAIN_FLAG_COLUMNS = ("RainToday", "RainTomorrow")

# Display name -> row field, in chart order
AMENITY_FIELDS = {
    "Main Road": "mainroad",
    "Guest Room": "guestroom",
    "Basement": "basement",
    "Hot Water": "hotwaterheating",
    "AC": "airconditioning",
    "Preferred Area": "prefarea",
}


@dataclass(frozen=True)
class DatasetSpec:
    """Static description of one API dataset."""

    key: str
    label: str
    endpoint: str
    columns: Tuple[str, ...]
    search_column: str
    search_placeholder: str
    flag_columns: Tuple[str, ...] = field(default_factory=tuple)
    assign_ids: bool = False


WEATHER = DatasetSpec(
    key="weather",
    label="Weather",
    endpoint="/weather",
    columns=WEATHER_COLUMNS,
    search_column="RainToday",
    search_placeholder="Filter by rain today...",
    flag_columns=RAIN_FLAG_COLUMNS,
)

FLIGHTS = DatasetSpec(
    key="flights",
    label="Flights",
    endpoint="/flights",
    columns=FLIGHT_COLUMNS,
    search_column="FL_DATE",
    search_placeholder="Filter by flight date...",
)

HOUSE_PRICES = DatasetSpec(
    key="house_prices",
    label="House Prices",
    endpoint="/houseprice",
    columns=HOUSE_PRICE_COLUMNS,
    search_column="furnishingstatus",
    search_placeholder="Filter by furnishing status...",
    assign_ids=True,
)

DATASETS: Dict[str, DatasetSpec] = {
    spec.key: spec for spec in (WEATHER, FLIGHTS, HOUSE_PRICES)
}


def get_dataset(key: str) -> DatasetSpec:
    """
    Look up a dataset by key.

    :param key: One of "weather", "flights", "house_prices".
    :return: The matching DatasetSpec.
    :raises KeyError: If the key is unknown.
    """
    try:
        return DATASETS[key]
    except KeyError:
        raise KeyError(f"Unknown dataset: {key!r}") from None


def coerce_flag(value: Any) -> bool:
    """
    Normalize a Yes/No indicator that may arrive as 0/1 or "Yes"/"No".

    Numbers are true only when equal to 1, strings only when exactly "Yes"
    (case-sensitive). Anything else, including None and NaN, is false.

    :param value: Raw field value from the API.
    :return: bool
    """
    if isinstance(value, (bool, np.bool_)):
        return bool(value)
    if isinstance(value, str):
        return value == "Yes"
    if isinstance(value, numbers.Number):
        return bool(value == 1)
    return False
