"""Logging setup shared by the API process and the maintenance scripts."""

from __future__ import annotations

import logging

from roomgate.core.settings import settings

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process.

    Args:
        level: Optional level name overriding ``LOG_LEVEL``. ``DEBUG=true`` forces DEBUG.
    """
    if settings.debug:
        resolved = logging.DEBUG
    else:
        resolved = logging.getLevelName((level or settings.log_level).upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    logging.basicConfig(level=resolved, format=LOG_FORMAT)
    # SQL echo is controlled by SQL_DEBUG; keep the engine logger quiet otherwise.
    if not settings.sql_debug:
        logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
