# src/tasklist/tasks/task_store.py

from __future__ import annotations

import logging
import sqlite3
from typing import Any

from ..core.ports import Row
from .task_models import TASK_COLUMNS

logger = logging.getLogger(__name__)

# Columns callers may write; id is always assigned by SQLite.
_WRITABLE_COLUMNS = frozenset(TASK_COLUMNS) - {"id"}


class SqliteTaskRows:
    """
    Row-level access to the ``tasks`` table over an already open SQLite connection.

    Speaks only the storage shape: rows go in and come out as plain dicts keyed by
    column name. Each write commits on the given connection. The connection is
    owned by the caller and is never closed here.
    """

    def __init__(self, conn: sqlite3.Connection) -> None:
        self._conn = conn

    # ---- low-level helpers ----

    @staticmethod
    def _row_to_dict(row: sqlite3.Row | tuple[Any, ...], cur: sqlite3.Cursor) -> Row:
        # Works whether or not the connection has row_factory = sqlite3.Row.
        names = [d[0] for d in cur.description]
        return {name: row[i] for i, name in enumerate(names)}

    @staticmethod
    def _checked(fields: Row) -> list[str]:
        unknown = set(fields) - _WRITABLE_COLUMNS
        if unknown:
            raise ValueError(f"Unknown or read-only task columns: {', '.join(sorted(unknown))}")
        if not fields:
            raise ValueError("No task columns given")
        return [c for c in TASK_COLUMNS if c in fields]

    # ---- public API ----

    def insert(self, fields: Row) -> int:
        cols = self._checked(fields)
        placeholders = ", ".join("?" for _ in cols)
        cur = self._conn.execute(
            f"INSERT INTO tasks ({', '.join(cols)}) VALUES ({placeholders})",
            [fields[c] for c in cols],
        )
        self._conn.commit()
        rowid = cur.lastrowid
        if rowid is None:
            raise RuntimeError("SQLite did not return lastrowid for tasks insert")
        return int(rowid)

    def fetch_one(self, task_id: int) -> Row | None:
        cur = self._conn.execute(
            f"SELECT {', '.join(TASK_COLUMNS)} FROM tasks WHERE id = ?",
            (int(task_id),),
        )
        row = cur.fetchone()
        return self._row_to_dict(row, cur) if row is not None else None

    def fetch_all(self) -> list[Row]:
        cur = self._conn.execute(f"SELECT {', '.join(TASK_COLUMNS)} FROM tasks ORDER BY id ASC")
        return [self._row_to_dict(r, cur) for r in cur.fetchall()]

    def update(self, task_id: int, fields: Row) -> int:
        cols = self._checked(fields)
        assignments = ", ".join(f"{c} = ?" for c in cols)
        cur = self._conn.execute(
            f"UPDATE tasks SET {assignments} WHERE id = ?",
            [*(fields[c] for c in cols), int(task_id)],
        )
        self._conn.commit()
        return cur.rowcount

    def delete(self, task_id: int) -> int:
        cur = self._conn.execute("DELETE FROM tasks WHERE id = ?", (int(task_id),))
        self._conn.commit()
        return cur.rowcount

    def delete_all(self) -> int:
        # Counted up front: rowcount of an unqualified DELETE is unreliable across SQLite builds.
        n = self.count()
        self._conn.execute("DELETE FROM tasks")
        self._conn.commit()
        return n

    def count(self) -> int:
        cur = self._conn.execute("SELECT COUNT(*) FROM tasks")
        (n,) = cur.fetchone()
        return int(n)
