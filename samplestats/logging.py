"""Logging helpers for the samplestats package.

The library never configures logging on import; applications opt in with
`configure_logging`.
"""

import logging
import sys
from typing import Any, Dict, Optional

PACKAGE_LOGGER = "samplestats"

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: int = logging.INFO) -> logging.Logger:
    """Attach a stderr handler to the package logger.

    Only the ``samplestats`` logger is touched; the root logger is left alone.
    Calling this more than once does not stack handlers.
    """
    app_logger = logging.getLogger(PACKAGE_LOGGER)

    if not app_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        app_logger.addHandler(handler)
        app_logger.propagate = False

    app_logger.setLevel(level)
    return app_logger


def get_logger(name: str) -> logging.Logger:
    """Get a logger under the package namespace."""
    return logging.getLogger(f"{PACKAGE_LOGGER}.{name}")


def log_with_data(
    logger: logging.Logger,
    level: int,
    msg: str,
    data: Optional[Dict[str, Any]] = None,
) -> None:
    """Log a message, attaching structured data as ``record.data``."""
    if data:
        logger.log(level, msg, extra={"data": data})
    else:
        logger.log(level, msg)
