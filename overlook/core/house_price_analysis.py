"""
house_price_analysis.py

Price metrics, grouped aggregates and chart series for house listings.

Average price per square foot is mean(price) / mean(area), a ratio of
means. It is not the mean of per-row price/area ratios.
"""

from typing import Dict, List

import pandas as pd

from overlook.core.aggregates import (
    Aggregate,
    count_by,
    distribution,
    flag_counts,
    mean,
    mean_by,
    paired_series,
    ratio,
)
from overlook.models.datasets import AMENITY_FIELDS, coerce_flag
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)


def price_per_area(df: pd.DataFrame) -> Aggregate:
    return ratio(mean(df, "price"), mean(df, "area"))


def overview_metrics(df: pd.DataFrame) -> Dict:
    """
    Headline metrics for the house price overview cards.

    :param df: House price rows.
    :return: Dict with avg_price, avg_price_per_sqft, avg_bedrooms,
        avg_bathrooms (Aggregates) and total_properties (int).
    """
    return {
        "avg_price": mean(df, "price"),
        "avg_price_per_sqft": price_per_area(df),
        "avg_bedrooms": mean(df, "bedrooms"),
        "avg_bathrooms": mean(df, "bathrooms"),
        "total_properties": len(df),
    }


def price_by_bedrooms(df: pd.DataFrame) -> List[Dict]:
    """
    Average price per bedroom count, ascending by bedrooms.

    :return: List of {"bedrooms", "count", "total_price", "avg_price"}.
    """
    return [
        {
            "bedrooms": group["key"],
            "count": group["count"],
            "total_price": group["total"],
            "avg_price": group["mean"],
        }
        for group in mean_by(df, "bedrooms", "price", sort_keys=True)
    ]


def furnishing_distribution(df: pd.DataFrame) -> List[Dict]:
    """Listing count per furnishing status, in first-seen order."""
    return distribution(count_by(df, "furnishingstatus"))


def _whole(value) -> str:
    if pd.isna(value):
        return "?"
    return str(int(value))


def stories_label(stories) -> str:
    count = int(stories)
    return f"{count} {'Story' if count == 1 else 'Stories'}"


def stories_distribution(df: pd.DataFrame) -> List[Dict]:
    """Listing count per story count, in first-seen order; missing counts are skipped."""
    return distribution(count_by(df, "stories"), stories_label)


def amenity_counts(df: pd.DataFrame) -> List[Dict]:
    """Counts for the six fixed amenities, in chart order."""
    return flag_counts(df, AMENITY_FIELDS, coerce_flag)


def _listing_label(row: pd.Series) -> str:
    return (
        f"{_whole(row['bedrooms'])}bd {_whole(row['bathrooms'])}ba, "
        f"{_whole(row['stories'])} stories"
    )


def price_area_series(df: pd.DataFrame) -> pd.DataFrame:
    """Area (x) vs price (y) for every loaded listing."""
    return paired_series(df, "area", "price", _listing_label)
