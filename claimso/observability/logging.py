from __future__ import annotations

import logging
import os
from typing import Final

from claimso.config import SERVICE_NAME

_HANDLER_ATTACHED: bool = False
_FORMAT: Final[str] = "%(asctime)s - %(service)s - %(name)s - %(levelname)s - %(message)s"

# Client libraries that log request-level detail at INFO
_NOISY_LOGGERS: Final[tuple[str, ...]] = ("google", "urllib3", "httpx", "multipart")


class _ServiceTagFilter(logging.Filter):
    """Stamp every record with the service name for log aggregation."""

    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "service"):
            record.service = SERVICE_NAME
        return True


def log_level() -> int:
    """Level from CLAIMSO_LOG_LEVEL, then LOG_LEVEL; unknown names fall back to INFO."""
    level_name = os.getenv("CLAIMSO_LOG_LEVEL") or os.getenv("LOG_LEVEL") or "INFO"
    return getattr(logging, level_name.upper(), logging.INFO)


def _attach_handler(level: int) -> None:
    global _HANDLER_ATTACHED

    handler = logging.StreamHandler()
    handler.addFilter(_ServiceTagFilter())
    handler.setFormatter(logging.Formatter(_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root = logging.getLogger()
    root.addHandler(handler)
    root.setLevel(level)

    for name in _NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(level, logging.WARNING))

    _HANDLER_ATTACHED = True


def get_logger(name: str) -> logging.Logger:
    """Return a module logger; the first call installs the shared stream handler."""
    level = log_level()
    if not _HANDLER_ATTACHED:
        _attach_handler(level)

    logger = logging.getLogger(name)
    logger.setLevel(level)
    return logger
