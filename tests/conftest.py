"""Shared test fixtures and configuration.

Provides infrastructure to isolate tests from real filesystem state.
"""

from __future__ import annotations

import logging
from unittest.mock import MagicMock, patch

import pytest

from worklog_cli.models.config_models import AppConfig


# ---------------------------------------------------------------------------
# Logging isolation
# ---------------------------------------------------------------------------


@pytest.fixture(autouse=True)
def isolated_log_dir(tmp_path):
    """Send the application log into *tmp_path* and reset the singleton."""
    import worklog_cli.utils.logger as logger_mod

    logger_mod._logger = None
    logging.getLogger("worklog_cli").handlers.clear()
    with patch(
        "worklog_cli.utils.logger.user_log_dir", return_value=str(tmp_path / "logs")
    ):
        yield
    for handler in logging.getLogger("worklog_cli").handlers:
        handler.close()
    logging.getLogger("worklog_cli").handlers.clear()
    logger_mod._logger = None


# ---------------------------------------------------------------------------
# Config isolation helpers
# ---------------------------------------------------------------------------


@pytest.fixture()
def tmp_config(tmp_path):
    """Provide a real ConfigService backed by a temporary directory.

    Patches platform dirs so config/data files land in *tmp_path* only.
    Also clears the lru_cache so each test gets a fresh service instance.
    """
    from worklog_cli.services.config_service import ConfigService, get_config_service

    get_config_service.cache_clear()
    with patch(
        "worklog_cli.services.config_service.user_config_dir",
        return_value=str(tmp_path / "config"),
    ):
        with patch(
            "worklog_cli.services.config_service.user_data_dir",
            return_value=str(tmp_path / "data"),
        ):
            yield ConfigService()
    get_config_service.cache_clear()


@pytest.fixture()
def mock_config_service(tmp_path):
    """A MagicMock standing in for get_config_service() with a real AppConfig."""
    config = AppConfig(data_path=str(tmp_path / "test.db"))
    svc = MagicMock()
    svc.config = config
    svc.load_config.return_value = config
    return svc


# ---------------------------------------------------------------------------
# Database
# ---------------------------------------------------------------------------


@pytest.fixture()
def db():
    """In-memory SQLite database with every migration applied."""
    from worklog_cli.adapters.sqlite.connection import open_memory_database

    conn = open_memory_database()
    yield conn
    conn.close()


@pytest.fixture()
def project_id(db):
    """Id of a project inserted directly into *db*."""
    cursor = db.execute(
        "INSERT INTO projects (url, name, created_at) VALUES (?, ?, ?)",
        ("https://git.example.com/acme", "acme", "2024-12-01T09:00:00+00:00"),
    )
    db.commit()
    return cursor.lastrowid
