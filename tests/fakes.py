# tests/fakes.py

from __future__ import annotations

from typing import Any


class FakeTaskRows:
    """
    In-memory TaskRows used for mapper unit tests.

    This avoids SQLite and makes tests purely about mapping logic:
    validation, row -> Task conversion, not-found handling.
    """

    def __init__(self) -> None:
        self.rows: dict[int, dict[str, Any]] = {}
        self._next_id = 1
        self.calls: list[str] = []

    def insert(self, fields: dict[str, Any]) -> int:
        self.calls.append("insert")
        task_id = self._next_id
        self._next_id += 1
        self.rows[task_id] = {"id": task_id, **fields}
        return task_id

    def fetch_one(self, task_id: int) -> dict[str, Any] | None:
        self.calls.append("fetch_one")
        row = self.rows.get(task_id)
        return dict(row) if row is not None else None

    def fetch_all(self) -> list[dict[str, Any]]:
        self.calls.append("fetch_all")
        return [dict(self.rows[k]) for k in sorted(self.rows)]

    def update(self, task_id: int, fields: dict[str, Any]) -> int:
        self.calls.append("update")
        if task_id not in self.rows:
            return 0
        self.rows[task_id].update(fields)
        return 1

    def delete(self, task_id: int) -> int:
        self.calls.append("delete")
        return 1 if self.rows.pop(task_id, None) is not None else 0

    def delete_all(self) -> int:
        self.calls.append("delete_all")
        n = len(self.rows)
        self.rows.clear()
        return n

    def count(self) -> int:
        return len(self.rows)
