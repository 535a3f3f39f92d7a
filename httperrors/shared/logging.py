"""
Logging setup for the ``httperrors`` logger hierarchy.

The core never emits log records; only the FastAPI adapter does, under
``httperrors.interfaces``. Applications that configure logging
themselves need nothing from here. ``configure_logging`` gives the
library's own loggers a stdout handler and a level without touching
the root logger.
Never logs error data or payload attributes, which may hold secrets.
"""

import logging
import sys
from typing import Optional

from httperrors.core.config import settings

LOGGER_NAME = "httperrors"
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER_NAME = "httperrors.stdout"


def resolve_level(level: str) -> int:
    """Map a level name to its number. Unknown names mean INFO."""
    value = logging.getLevelName(level.upper())
    return value if isinstance(value, int) else logging.INFO


def configure_logging(level: Optional[str] = None) -> logging.Logger:
    """Attach a stdout handler to the ``httperrors`` logger.

    Calling it again only updates the level; the handler is added once.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
            Defaults to ``settings.log_level``.

    Returns:
        The ``httperrors`` logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(resolve_level(level or settings.log_level))

    if not any(handler.get_name() == _HANDLER_NAME for handler in logger.handlers):
        handler = logging.StreamHandler(sys.stdout)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, LOG_DATE_FORMAT))
        logger.addHandler(handler)

    return logger
