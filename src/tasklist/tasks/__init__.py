# src/tasklist/tasks/__init__.py

from .task_mapper import TaskMapper
from .task_models import Task
from .task_store import SqliteTaskRows

__all__ = ["SqliteTaskRows", "Task", "TaskMapper"]
