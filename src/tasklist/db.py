# src/tasklist/db.py

"""SQLite connection accessor.

Connections are opened here and handed to callers; the mapper never opens or closes them.
"""

from __future__ import annotations

import contextlib
import logging
import sqlite3
from collections.abc import Iterator
from pathlib import Path

from .config import Settings

logger = logging.getLogger(__name__)


def connect(db_path: str | Path) -> sqlite3.Connection:
    """Open a connection with dict-like rows. The caller is responsible for closing it."""
    path = Path(db_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    conn = sqlite3.connect(str(path), timeout=30.0)
    conn.row_factory = sqlite3.Row
    logger.debug("Opened SQLite connection db=%s", path)
    return conn


def connect_for(settings: Settings, environment: str | None = None) -> sqlite3.Connection:
    """Open the database of the given environment (defaults to settings.environment)."""
    return connect(settings.db_path_for(environment))


@contextlib.contextmanager
def open_connection(db_path: str | Path) -> Iterator[sqlite3.Connection]:
    conn = connect(db_path)
    try:
        yield conn
    finally:
        conn.close()
        logger.debug("Closed SQLite connection db=%s", db_path)
