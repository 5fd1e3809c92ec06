# src/tasklist/tasks/task_mapper.py

from __future__ import annotations

import logging
import sqlite3
from typing import Any

from ..config import DEFAULT_MAX_FIELD_LENGTH
from ..core.ports import Row, TaskRows
from .task_models import Task
from .task_store import SqliteTaskRows

logger = logging.getLogger(__name__)


class TaskMapper:
    """
    Translates between stored rows and Task records.

    This is the only thing calling code talks to for tasks. It depends on a
    TaskRows adapter (storage shape) and hands back typed Task objects
    (domain shape). It does not own any connection.

    Not-found outcomes:
    - find / update -> None
    - delete        -> False
    """

    def __init__(self, rows: TaskRows, *, max_field_length: int = DEFAULT_MAX_FIELD_LENGTH) -> None:
        self._rows = rows
        self._max_field_length = int(max_field_length)

    @classmethod
    def for_connection(
        cls,
        conn: sqlite3.Connection,
        *,
        max_field_length: int = DEFAULT_MAX_FIELD_LENGTH,
    ) -> TaskMapper:
        """Build a mapper over an open SQLite connection."""
        return cls(SqliteTaskRows(conn), max_field_length=max_field_length)

    # ---- conversion / validation ----

    @staticmethod
    def _row_to_task(row: Row) -> Task:
        return Task(
            id=int(row["id"]),
            title=str(row["title"] or ""),
            description=str(row["description"] or ""),
        )

    def _clean(self, name: str, value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise ValueError(f"{name} is required")
        value = value.strip()
        if len(value) > self._max_field_length:
            raise ValueError(
                f"{name} is too long ({len(value)} > {self._max_field_length} characters)"
            )
        return value

    def _fields(self, title: Any, description: Any) -> Row:
        return {
            "title": self._clean("title", title),
            "description": self._clean("description", description),
        }

    # ---- public API ----

    def create(self, title: str, description: str) -> Task:
        fields = self._fields(title, description)
        task_id = self._rows.insert(fields)
        logger.debug("Task created id=%s title=%r", task_id, fields["title"])
        return Task(id=task_id, **fields)

    def find(self, task_id: int) -> Task | None:
        row = self._rows.fetch_one(int(task_id))
        return self._row_to_task(row) if row is not None else None

    def all(self) -> list[Task]:
        return [self._row_to_task(r) for r in self._rows.fetch_all()]

    def update(self, task_id: int, title: str, description: str) -> Task | None:
        fields = self._fields(title, description)
        if self._rows.update(int(task_id), fields) == 0:
            logger.debug("Task update skipped, not found id=%s", task_id)
            return None
        logger.debug("Task updated id=%s", task_id)
        return Task(id=int(task_id), **fields)

    def delete(self, task_id: int) -> bool:
        removed = self._rows.delete(int(task_id)) > 0
        if removed:
            logger.debug("Task deleted id=%s", task_id)
        else:
            logger.debug("Task delete skipped, not found id=%s", task_id)
        return removed

    def delete_all(self) -> int:
        n = self._rows.delete_all()
        logger.info("Deleted all tasks count=%s", n)
        return n

    def count(self) -> int:
        return self._rows.count()
