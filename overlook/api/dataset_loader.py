"""
dataset_loader.py: Turns API list responses into row DataFrames.

Relies on:
- `api_client.ApiClient` for the HTTP fetch.
- `models.datasets` for per-dataset columns and shaping rules.

The full collection is fetched once per RequestCache scope and keyed by
dataset only; the row limit is applied after the cache, so loads with
different limits in the same scope share one network call.

Functions:
- RequestCache.get_or_fetch: single-flight memo of full-collection fetches.
- DatasetLoader.load: fetch, truncate to `limit`, shape rows.
- shape_rows: apply dataset-specific shaping to a list of row dicts.
"""

import threading
from concurrent.futures import Future
from typing import Callable, Dict, List, Optional

import numpy as np
import pandas as pd

from overlook import config as cfg
from overlook.api.api_client import ApiClient
from overlook.models.datasets import DatasetSpec, coerce_flag, get_dataset
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)


class RequestCache:
    """
    Request-scoped, thread-safe memo of dataset fetches.

    The first caller for a key runs the fetch; callers that arrive while it
    is pending block on the same Future, and later callers get the stored
    result (or the stored exception). A new instance is a new scope.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._entries: Dict[str, Future] = {}

    def get_or_fetch(self, key: str, fetch: Callable[[], List[Dict]]) -> List[Dict]:
        with self._lock:
            future = self._entries.get(key)
            owner = future is None
            if owner:
                future = Future()
                self._entries[key] = future

        if owner:
            logger.debug(f"Cache miss for {key}, fetching")
            try:
                future.set_result(fetch())
            except Exception as e:
                future.set_exception(e)
        else:
            logger.debug(f"Cache hit for {key}")

        return future.result()

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._entries


class DatasetLoader:
    """Loads limited, shaped row sets for the three datasets."""

    def __init__(self, client: ApiClient, cache: Optional[RequestCache] = None):
        self.client = client
        self.cache = cache if cache is not None else RequestCache()

    def new_scope(self) -> "DatasetLoader":
        """Return a loader on the same client with a fresh cache scope."""
        return DatasetLoader(self.client, RequestCache())

    def load(self, dataset, limit: int = cfg.INITIAL_PAGE_SIZE) -> pd.DataFrame:
        """
        Load the first `limit` rows of a dataset.

        :param dataset: DatasetSpec or dataset key.
        :param limit: Positive row limit; fewer rows are returned if fewer exist.
        :return: DataFrame of shaped rows in API order.
        :raises ValueError: If limit is not a positive integer.
        :raises TransportError: Propagated unchanged from the client.
        """
        spec = dataset if isinstance(dataset, DatasetSpec) else get_dataset(dataset)
        _validate_limit(limit)

        try:
            raw = self.cache.get_or_fetch(
                spec.key, lambda: self.client.fetch_list(spec.endpoint)
            )
        except Exception as e:
            logger.error(f"Error fetching {spec.label.lower()} data: {e}")
            raise

        df = shape_rows(spec, raw[:limit])
        logger.info(f"Loaded {len(df)} {spec.key} rows (limit={limit})")
        return df


def shape_rows(spec: DatasetSpec, rows: List[Dict]) -> pd.DataFrame:
    """
    Build a DataFrame from raw row dicts and apply dataset shaping.

    - Rain flag columns are coerced to bool.
    - House-price rows get a synthetic 1-based `id` as the first column,
      replacing any id sent by the API.

    :param spec: Dataset definition.
    :param rows: Already-limited list of row dicts.
    :return: DataFrame with at least the dataset's declared columns.
    """
    if rows:
        df = pd.DataFrame.from_records(rows)
    else:
        df = pd.DataFrame(columns=list(spec.columns))

    for column in spec.flag_columns:
        if column in df.columns:
            df[column] = df[column].map(coerce_flag).astype(bool)

    if spec.assign_ids:
        if "id" in df.columns:
            df = df.drop(columns=["id"])
        df.insert(0, "id", np.arange(1, len(df) + 1))

    return df


def _validate_limit(limit) -> None:
    if isinstance(limit, bool) or not isinstance(limit, (int, np.integer)) or limit < 1:
        raise ValueError(f"limit must be a positive integer, got {limit!r}")
