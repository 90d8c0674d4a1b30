"""
log_util.py: Shared logger factory for the Overlook dashboard.

Every module creates its logger with ``app_logger(__name__)``. Handlers are
attached once per logger name so Streamlit reruns do not duplicate output.
"""

import logging
import os
import sys
from typing import Optional

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DEFAULT_LEVEL = "INFO"


def _resolve_level(level: Optional[str]) -> int:
    name = (level or os.environ.get("LOG_LEVEL") or DEFAULT_LEVEL).upper()
    return getattr(logging, name, logging.INFO)


def app_logger(
    name: str, log_file: Optional[str] = None, level: Optional[str] = None
) -> logging.Logger:
    """
    Return a configured logger for the given module name.

    :param name: Logger name, usually ``__name__``.
    :param log_file: Optional path for an additional file handler.
    :param level: Optional level name; falls back to the LOG_LEVEL env var.
    :return: logging.Logger with a stream handler attached.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    if not getattr(logger, "_overlook_configured", False):
        formatter = logging.Formatter(LOG_FORMAT)

        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(formatter)
        logger.addHandler(stream_handler)

        if log_file:
            file_handler = logging.FileHandler(log_file)
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)

        logger.propagate = False
        logger._overlook_configured = True

    return logger
