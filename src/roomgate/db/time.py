# src/roomgate/db/time.py
"""Time utilities for database models and request handling."""

from datetime import UTC, date, datetime
from zoneinfo import ZoneInfo

from roomgate.core.settings import settings


def utcnow() -> datetime:
    """Return the current UTC time as a timezone-aware datetime."""
    return datetime.now(UTC)


def local_today() -> date:
    """Return today's date in the property's configured timezone."""
    return datetime.now(ZoneInfo(settings.timezone)).date()
