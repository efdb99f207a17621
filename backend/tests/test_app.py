"""Tests for settings, logging setup and the application factory."""

from __future__ import annotations

import logging
import warnings

import pytest

from leavedesk import main
from leavedesk.config import Settings
from leavedesk.db import engine_options
from leavedesk.exceptions import ValidationError
from leavedesk.logging import configure_logging


def test_settings_from_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("DATABASE_URL", "sqlite+aiosqlite:///./dev.db")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("ENVIRONMENT", "staging")

    settings = Settings()
    assert settings.database_url == "sqlite+aiosqlite:///./dev.db"
    assert settings.log_level == "DEBUG"
    assert settings.environment == "staging"


def test_settings_reject_unknown_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ENVIRONMENT", "qa")
    with pytest.raises(ValueError):
        Settings()


def test_configure_logging_is_idempotent() -> None:
    root = logging.getLogger()
    saved_handlers, saved_level = root.handlers[:], root.level
    root.handlers = []
    try:
        configure_logging(Settings(log_level="WARNING"))
        configure_logging(Settings(log_level="DEBUG"))
        assert len(root.handlers) == 1
        assert root.level == logging.DEBUG
    finally:
        root.handlers = saved_handlers
        root.setLevel(saved_level)


def test_docs_disabled_in_production(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(main, "get_settings", lambda: Settings(environment="production"))
    application = main.create_app()
    assert application.docs_url is None
    assert application.redoc_url is None


def test_routes_registered() -> None:
    paths = set(main.create_app().openapi()["paths"])
    assert {
        "/health",
        "/leave-requests",
        "/leave-requests/{request_id}",
        "/leave-requests/employee/{employee_id}",
        "/employees",
        "/employees/{employee_id}",
    } <= paths


def test_engine_options_skip_pool_sizing_for_sqlite() -> None:
    sqlite = engine_options(Settings(database_url="sqlite+aiosqlite:///:memory:"))
    assert "pool_size" not in sqlite

    postgres = engine_options(Settings(database_url="postgresql+asyncpg://u:p@db/leavedesk", db_pool_size=3))
    assert postgres["pool_size"] == 3
    assert postgres["pool_pre_ping"] is True


def test_validation_errors_use_422_without_deprecation_warnings() -> None:
    with warnings.catch_warnings():
        warnings.simplefilter("error", DeprecationWarning)
        error = ValidationError("bad input")
    assert error.status_code == 422
