"""
api_client.py: Lightweight interface for the dashboard's JSON list API using
direct requests, with a fixed-delay retry loop.

Classes:
- RetryPolicy: how many times and how long to wait between attempts.
- TransportError: terminal failure after retries are exhausted.
- ApiClient: issues GET requests and returns decoded JSON lists.

Endpoints:
- GET {base_url}/weather
- GET {base_url}/flights
- GET {base_url}/houseprice
"""

import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Optional

import requests

from overlook import config as cfg
from overlook.utils.log_util import app_logger

logger = app_logger(__name__)

UNKNOWN_ERROR_BODY = "Unknown error"


class TransportError(Exception):
    """Raised when an API request fails after all retries."""

    def __init__(
        self,
        status: Optional[int],
        status_text: str,
        body: str = UNKNOWN_ERROR_BODY,
    ):
        self.status = status
        self.status_text = status_text
        self.body = body
        super().__init__(f"API error: {status} {status_text} - {body}")


@dataclass(frozen=True)
class RetryPolicy:
    """
    Fixed-delay retry settings.

    :param max_retries: Retries after the first failure (total attempts = max_retries + 1).
    :param delay_seconds: Wait between attempts; constant, no backoff growth.
    :param retry_client_errors: When False, 4xx responses fail immediately.
    """

    max_retries: int = cfg.MAX_RETRIES
    delay_seconds: float = cfg.RETRY_DELAY_SECONDS
    retry_client_errors: bool = True

    def should_retry(self, error: TransportError, retries_left: int) -> bool:
        if retries_left <= 0:
            return False
        if self.retry_client_errors:
            return True
        return not (error.status is not None and 400 <= error.status < 500)


class ApiClient:
    """HTTP client for the three read-only dataset endpoints."""

    def __init__(
        self,
        base_url: str,
        retry_policy: Optional[RetryPolicy] = None,
        session: Optional[requests.Session] = None,
        sleep: Callable[[float], None] = time.sleep,
        timeout: float = cfg.REQUEST_TIMEOUT_SECONDS,
    ):
        self.base_url = base_url.rstrip("/")
        self.retry_policy = retry_policy or RetryPolicy()
        self.session = session or requests.Session()
        self.timeout = timeout
        self._sleep = sleep

    def fetch_list(self, endpoint: str) -> List[Dict]:
        """
        Fetch a JSON array from an endpoint, retrying on any failure.

        :param endpoint: Path relative to the base URL, e.g. "/weather".
        :return: List of row dicts in response order.
        :raises TransportError: After the retry budget is exhausted.
        """
        policy = self.retry_policy
        retries_left = policy.max_retries

        while True:
            try:
                return self._get_once(endpoint)
            except TransportError as e:
                if not policy.should_retry(e, retries_left):
                    logger.error(f"Error fetching from {endpoint}: {e}")
                    raise
                attempt = policy.max_retries - retries_left + 1
                logger.warning(
                    f"Error fetching from {endpoint}, retrying... "
                    f"({attempt}/{policy.max_retries})"
                )
                retries_left -= 1
                self._sleep(policy.delay_seconds)

    def _get_once(self, endpoint: str) -> List[Dict]:
        url = f"{self.base_url}{endpoint}"
        logger.debug(f"GET {url}")

        try:
            resp = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise TransportError(None, type(e).__name__, str(e)) from e

        if not resp.ok:
            raise TransportError(resp.status_code, resp.reason or "", _read_body(resp))

        try:
            payload = resp.json()
        except ValueError as e:
            raise TransportError(resp.status_code, "Invalid JSON", str(e)) from e

        if not isinstance(payload, list):
            raise TransportError(
                resp.status_code,
                "Unexpected payload",
                f"expected a JSON array, got {type(payload).__name__}",
            )
        return payload


def _read_body(resp: requests.Response) -> str:
    """Best-effort response text; falls back to "Unknown error"."""
    try:
        text = resp.text
    except Exception:
        return UNKNOWN_ERROR_BODY
    return text
