# src/tasklist/core/ports.py

from __future__ import annotations

"""
Ports (interfaces) used by the mapper.

The mapper depends on this Protocol instead of a concrete storage backend.
Rows cross the port as plain dicts keyed by column name; typing them is the mapper's job.
"""

from typing import Any, Protocol

Row = dict[str, Any]


class TaskRows(Protocol):
    """Row-level access to the tasks table. Each write is committed before returning."""

    def insert(self, fields: Row) -> int: ...
    def fetch_one(self, task_id: int) -> Row | None: ...
    def fetch_all(self) -> list[Row]: ...
    def update(self, task_id: int, fields: Row) -> int: ...
    def delete(self, task_id: int) -> int: ...
    def delete_all(self) -> int: ...
    def count(self) -> int: ...
