"""Tests for runtime configuration and logging setup."""

import logging

from roomgate.core.logging import configure_logging
from roomgate.core.settings import Settings


def test_defaults() -> None:
    cfg = Settings(_env_file=None)
    assert cfg.door_code_window_offset == 300
    assert cfg.door_code_band == (1, 300)
    assert cfg.door_placeholder_room_id == "9999"
    assert cfg.door_placeholder_document_id == "1234567890123"


def test_environment_aliases(monkeypatch) -> None:
    monkeypatch.setenv("DOOR_CODE_LOOKAHEAD", "30")
    monkeypatch.setenv("REDIS_URL", "redis://controllers:6379/2")
    cfg = Settings(_env_file=None)
    assert cfg.door_code_band == (1, 30)
    assert cfg.redis_url == "redis://controllers:6379/2"


def test_testing_database_override() -> None:
    cfg = Settings(
        _env_file=None,
        DATABASE_URL="postgresql+asyncpg://app@db/roomgate",
        TEST_DATABASE_URL="sqlite://",
        USE_TEST_DATABASE=True,
    )
    assert cfg.effective_database_url == "sqlite://"


def test_sync_url_for_tooling() -> None:
    cfg = Settings(_env_file=None, DATABASE_URL="postgresql+asyncpg://app@db/roomgate")
    assert cfg.database_url_sync == "postgresql+psycopg://app@db/roomgate"


def test_configure_logging_quiets_sql_engine() -> None:
    configure_logging("debug")
    assert logging.getLogger("sqlalchemy.engine").level == logging.WARNING
