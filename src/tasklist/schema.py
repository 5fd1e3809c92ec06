# src/tasklist/schema.py

"""Schema initialization: ordered SQL migrations tracked in a ledger table.

Migration files live in ``tasklist/migrations`` and are applied in lexical
file-name order (``001_...sql``, ``002_...sql``). A file recorded in
``schema_migrations`` is never applied again.

Each file runs in one transaction together with its ledger row, so a failing
migration leaves nothing behind. The error is re-raised: if a ``CREATE TABLE``
hits a table that already exists outside the ledger, sqlite3.OperationalError
reaches the caller.
"""

from __future__ import annotations

import logging
import sqlite3
from pathlib import Path

logger = logging.getLogger(__name__)

MIGRATIONS_DIR = Path(__file__).parent / "migrations"


def list_migrations(directory: str | Path = MIGRATIONS_DIR) -> list[Path]:
    directory = Path(directory)
    if not directory.is_dir():
        raise FileNotFoundError(f"Migrations directory not found: {directory}")
    return sorted(directory.glob("*.sql"), key=lambda p: p.name)


def _ensure_ledger(conn: sqlite3.Connection) -> None:
    conn.execute(
        """
        CREATE TABLE IF NOT EXISTS schema_migrations (
            id INTEGER PRIMARY KEY AUTOINCREMENT,
            filename TEXT NOT NULL UNIQUE,
            applied_at TEXT NOT NULL DEFAULT (datetime('now'))
        )
        """
    )
    conn.commit()


def applied_migrations(conn: sqlite3.Connection) -> set[str]:
    _ensure_ledger(conn)
    return {row[0] for row in conn.execute("SELECT filename FROM schema_migrations")}


def apply_migrations(
    conn: sqlite3.Connection,
    directory: str | Path = MIGRATIONS_DIR,
) -> list[str]:
    """
    Apply every migration not yet recorded, in order.

    Returns the file names applied by this call (empty if already up to date).
    """
    done = applied_migrations(conn)
    applied: list[str] = []

    for path in list_migrations(directory):
        if path.name in done:
            logger.debug("Migration already applied: %s", path.name)
            continue

        logger.info("Applying migration %s", path.name)
        # The script and its ledger row commit together or not at all.
        ledger_name = path.name.replace("'", "''")
        script = (
            "BEGIN;\n"
            f"{path.read_text('utf-8')}\n;\n"
            f"INSERT INTO schema_migrations (filename) VALUES ('{ledger_name}');\n"
            "COMMIT;"
        )
        try:
            conn.executescript(script)
        except sqlite3.Error:
            conn.rollback()
            logger.error("Migration %s failed; rolled back", path.name)
            raise
        applied.append(path.name)

    if applied:
        logger.info("Schema migrations applied: %s", ", ".join(applied))
    else:
        logger.info("Schema is up to date (%d migrations)", len(done))
    return applied
