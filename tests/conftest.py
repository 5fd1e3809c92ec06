# tests/conftest.py

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from pathlib import Path

import pytest

from tasklist.config import Settings
from tasklist.db import connect
from tasklist.schema import apply_migrations
from tasklist.tasks.task_mapper import TaskMapper


@pytest.fixture()
def settings(tmp_path: Path) -> Settings:
    """
    Settings pointing at per-test temporary databases.

    Built directly rather than from the environment to keep tests isolated and deterministic.
    """
    return Settings(
        app_name="tasklist-test",
        log_level="WARNING",
        environment="test",
        data_dir=tmp_path,
        development_db_path=tmp_path / "development.sqlite3",
        test_db_path=tmp_path / "test.sqlite3",
        max_field_length=255,
    )


@pytest.fixture()
def conn(settings: Settings) -> Iterator[sqlite3.Connection]:
    """Migrated test database. Real SQLite on purpose: the SQL is part of what we test."""
    c = connect(settings.db_path_for("test"))
    apply_migrations(c)
    try:
        yield c
    finally:
        c.close()


@pytest.fixture()
def mapper(conn: sqlite3.Connection) -> TaskMapper:
    return TaskMapper.for_connection(conn)
