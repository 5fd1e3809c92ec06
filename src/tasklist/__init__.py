# src/tasklist/__init__.py

"""SQL-backed persistence for a simple task list: schema migrations plus a hand-written record mapper."""

from __future__ import annotations

from .tasks.task_mapper import TaskMapper
from .tasks.task_models import Task

__all__ = ["Task", "TaskMapper"]
