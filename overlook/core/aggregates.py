"""
aggregates.py

Reduction helpers shared by the weather, flight and house-price analyses.

Every reduction over an empty row set returns ``Aggregate.empty()`` instead
of NaN, so display code has to handle the "no data" case explicitly.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional

import pandas as pd

from overlook import config as cfg

NO_DATA_TEXT = "No data"


@dataclass(frozen=True)
class Aggregate:
    """A scalar reduction result that may be empty."""

    value: Optional[float] = None

    @classmethod
    def of(cls, value) -> "Aggregate":
        if value is None or pd.isna(value):
            return cls()
        return cls(float(value))

    @classmethod
    def empty(cls) -> "Aggregate":
        return cls()

    @property
    def is_empty(self) -> bool:
        return self.value is None

    def format(self, template: str = "{:.1f}", empty_text: str = NO_DATA_TEXT) -> str:
        """
        Format the value with a str.format template, or return `empty_text`.

        :param template: Format template, e.g. "{:.1f}°C".
        :param empty_text: Text shown when there is no data.
        :return: Display string.
        """
        if self.is_empty:
            return empty_text
        return template.format(self.value)


def mean(df: pd.DataFrame, column: str) -> Aggregate:
    """Arithmetic mean of a numeric column (sum / row count)."""
    if df.empty or column not in df.columns:
        return Aggregate.empty()
    values = pd.to_numeric(df[column], errors="coerce")
    return Aggregate.of(values.sum() / len(df))


def ratio(numerator: Aggregate, denominator: Aggregate) -> Aggregate:
    """Quotient of two aggregates; empty if either is empty or the denominator is zero."""
    if numerator.is_empty or denominator.is_empty or denominator.value == 0:
        return Aggregate.empty()
    return Aggregate.of(numerator.value / denominator.value)


def rate(df: pd.DataFrame, mask: pd.Series) -> Aggregate:
    """Share of rows matching a boolean mask, as a percentage."""
    if df.empty:
        return Aggregate.empty()
    return Aggregate.of(int(mask.sum()) / len(df) * 100)


def count_by(df: pd.DataFrame, key: str, sort_keys: bool = False) -> List[Dict]:
    """
    Count rows per distinct key value.

    :param df: Row DataFrame.
    :param key: Column to group on.
    :param sort_keys: Ascending key order when True, first-seen order otherwise.
    :return: List of {"key": value, "count": n}.
    """
    if df.empty:
        return []
    counts = df.groupby(key, sort=sort_keys).size()
    return [{"key": k, "count": int(n)} for k, n in counts.items()]


def mean_by(
    df: pd.DataFrame, key: str, value: str, sort_keys: bool = False
) -> List[Dict]:
    """
    Per-group count, total and mean of a value column.

    The mean is total / count for the group, which is the value a running
    average folded row by row converges to.

    :return: List of {"key", "count", "total", "mean"} dicts.
    """
    if df.empty:
        return []
    values = pd.to_numeric(df[value], errors="coerce")
    grouped = values.groupby(df[key], sort=sort_keys).agg(["size", "sum"])
    result = []
    for k, row in grouped.iterrows():
        count = int(row["size"])
        total = float(row["sum"])
        result.append(
            {"key": k, "count": count, "total": total, "mean": total / count}
        )
    return result


def flag_counts(
    df: pd.DataFrame, fields: Dict[str, str], coerce: Callable
) -> List[Dict]:
    """
    Count rows whose coerced flag is true, for each named field.

    :param fields: Display name -> column, iterated in insertion order.
    :param coerce: Function mapping a raw value to bool.
    :return: List of {"name", "value"} dicts.
    """
    result = []
    for name, column in fields.items():
        if df.empty or column not in df.columns:
            count = 0
        else:
            count = int(df[column].map(coerce).sum())
        result.append({"name": name, "value": count})
    return result


def prefix_series(
    df: pd.DataFrame,
    columns: Dict[str, str],
    label_prefix: str,
    limit: int = cfg.SERIES_PREFIX_LENGTH,
) -> pd.DataFrame:
    """
    Per-row chart series for the first `limit` rows.

    :param columns: Output name -> source column.
    :param label_prefix: Label stem, rows are named "{prefix} 1", "{prefix} 2", ...
    :param limit: Number of leading rows to keep.
    :return: DataFrame with a "name" column followed by the mapped columns.
    """
    head = df.head(limit)
    series = pd.DataFrame(
        {"name": [f"{label_prefix} {i + 1}" for i in range(len(head))]}
    )
    for out_name, source in columns.items():
        series[out_name] = head[source].to_numpy() if source in head.columns else None
    return series


def paired_series(
    df: pd.DataFrame,
    x: str,
    y: str,
    label: Callable[[pd.Series], str],
    z: float = 1,
) -> pd.DataFrame:
    """
    Scatter-style {x, y, z, name} projection over every loaded row.

    :param label: Builds the point label from a row.
    :return: DataFrame with one point per source row, in row order.
    """
    if df.empty:
        return pd.DataFrame(columns=["x", "y", "z", "name"])
    return pd.DataFrame(
        {
            "x": df[x].to_numpy(),
            "y": df[y].to_numpy(),
            "z": [z] * len(df),
            "name": [label(row) for _, row in df.iterrows()],
        }
    )


def distribution(items: Iterable[Dict], name_fn: Callable = str) -> List[Dict]:
    """Convert count_by output to {"name", "value"} slices for pie charts."""
    return [{"name": name_fn(item["key"]), "value": item["count"]} for item in items]
