"""Logging configuration."""

import logging
from typing import Optional

from app.core.config import settings

# Client libraries that log request bodies (contract text) at INFO/DEBUG
_QUIET_LOGGERS = ("httpx", "httpcore", "openai")


def setup_logging(level: Optional[str] = None) -> None:
    """Configure application logging."""
    level = (level or settings.LOG_LEVEL).upper()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)
