# src/tasklist/tasks/task_models.py

from __future__ import annotations

from dataclasses import dataclass

# Column names shared by the storage adapter and the mapper.
TASK_COLUMNS = ("id", "title", "description")


@dataclass(frozen=True, slots=True)
class Task:
    id: int
    title: str
    description: str
