"""
dashboard_state.py

Per-dataset view state for the dashboard.

Each DatasetView moves idle -> loading -> ready | error. The first dataset is
loaded on mount with the small page size; the others stay idle until their
tab is first selected. Opening the Raw Data sub-tab for the first time loads
the larger page size once per view.

Every load gets a generation number. A result is committed only if it
belongs to the latest generation, so a slow, superseded fetch can never
overwrite newer rows.
"""

from enum import Enum
from typing import Dict, Iterable, Optional

import pandas as pd

from overlook import config as cfg
from overlook.api.dataset_loader import DatasetLoader
from overlook.models.datasets import DATASETS, DatasetSpec, get_dataset
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)


class ViewStatus(Enum):
    IDLE = "idle"
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


def describe_error(error: Exception, dataset: DatasetSpec) -> str:
    message = str(error).strip()
    return message or f"Failed to fetch {dataset.label.lower()} data"


class DatasetView:
    """Loading state, rows and error for one dataset tab."""

    def __init__(
        self,
        dataset: DatasetSpec,
        loader: DatasetLoader,
        initial_limit: int = cfg.INITIAL_PAGE_SIZE,
        full_limit: int = cfg.FULL_PAGE_SIZE,
    ):
        self.dataset = dataset
        self.loader = loader
        self.initial_limit = initial_limit
        self.full_limit = full_limit

        self.status = ViewStatus.IDLE
        self.rows = pd.DataFrame(columns=list(dataset.columns))
        self.error: Optional[str] = None
        self.full_data_loaded = False
        self.generation = 0
        self.limit: Optional[int] = None
        self._full_generation: Optional[int] = None

    @property
    def is_loading(self) -> bool:
        return self.status is ViewStatus.LOADING

    @property
    def has_rows(self) -> bool:
        return not self.rows.empty

    def begin_load(self, limit: int, full: bool = False) -> int:
        """
        Enter the loading state and return the generation token for this load.

        :param limit: Row limit requested.
        :param full: True for the one-off full data load.
        :return: Generation token to pass to complete() or fail().
        """
        self.generation += 1
        self.status = ViewStatus.LOADING
        self.error = None
        self.limit = limit
        self._full_generation = self.generation if full else None
        logger.debug(
            f"{self.dataset.key}: load #{self.generation} started (limit={limit})"
        )
        return self.generation

    def _is_stale(self, token: int) -> bool:
        if token != self.generation:
            logger.info(
                f"{self.dataset.key}: discarding stale load #{token} "
                f"(current #{self.generation})"
            )
            return True
        return False

    def complete(self, token: int, rows: pd.DataFrame) -> bool:
        """Commit rows from load `token`; returns False if the load was superseded."""
        if self._is_stale(token):
            return False
        self.rows = rows
        self.status = ViewStatus.READY
        self.error = None
        if self._full_generation == token:
            self.full_data_loaded = True
        logger.info(f"{self.dataset.key}: ready with {len(rows)} rows")
        return True

    def fail(self, token: int, error: Exception) -> bool:
        """Record a failed load `token`; held rows are kept for display."""
        if self._is_stale(token):
            return False
        self.status = ViewStatus.ERROR
        self.error = describe_error(error, self.dataset)
        logger.error(f"{self.dataset.key}: load failed: {self.error}")
        return True

    def run_load(self, limit: int, full: bool = False) -> bool:
        """
        Fetch `limit` rows in a fresh request scope and commit the outcome.

        :return: True if the outcome was committed to this view.
        """
        token = self.begin_load(limit, full=full)
        try:
            rows = self.loader.new_scope().load(self.dataset, limit)
        except Exception as e:
            return self.fail(token, e)
        return self.complete(token, rows)

    def mount(self, eager: bool) -> None:
        """Start the initial load immediately when this is the first-shown dataset."""
        if eager and self.status is ViewStatus.IDLE:
            self.run_load(self.initial_limit)

    def activate(self) -> bool:
        """Tab selected: load the initial page the first time only."""
        if self.status is not ViewStatus.IDLE:
            return False
        return self.run_load(self.initial_limit)

    def load_full_data(self) -> bool:
        """
        Raw Data sub-tab opened: replace rows with the full page, once.

        No-op unless the view is ready and the full page has not been loaded.
        """
        if self.full_data_loaded or self.status is not ViewStatus.READY:
            return False
        return self.run_load(self.full_limit, full=True)

    def retry(self) -> bool:
        """Re-run the failed load with the limit it used."""
        if self.status is not ViewStatus.ERROR:
            return False
        limit = self.limit or self.initial_limit
        return self.run_load(limit, full=limit == self.full_limit)


class Dashboard:
    """The three dataset views plus which one is active."""

    def __init__(
        self,
        loader: DatasetLoader,
        dataset_keys: Iterable[str] = tuple(DATASETS),
        default_key: str = cfg.DEFAULT_DATASET,
    ):
        self.views: Dict[str, DatasetView] = {
            key: DatasetView(get_dataset(key), loader) for key in dataset_keys
        }
        if default_key not in self.views:
            raise KeyError(f"Unknown default dataset: {default_key!r}")
        self.active_key = default_key
        self.mounted = False

    def mount(self) -> None:
        """Load the default dataset eagerly; leave the rest idle."""
        if self.mounted:
            return
        self.mounted = True
        for key, view in self.views.items():
            view.mount(eager=key == self.active_key)

    @property
    def active(self) -> DatasetView:
        return self.views[self.active_key]

    def select(self, key: str) -> DatasetView:
        """Switch the active dataset tab, lazily loading it on first selection."""
        if key not in self.views:
            raise KeyError(f"Unknown dataset: {key!r}")
        self.active_key = key
        view = self.views[key]
        view.activate()
        return view
