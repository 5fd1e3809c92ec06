# src/tasklist/tasks/seed.py

from __future__ import annotations

import logging

from .task_mapper import TaskMapper
from .task_models import Task

logger = logging.getLogger(__name__)

SEED_TASKS: tuple[tuple[str, str], ...] = (
    ("Go to the Gym", "exercise is good for you"),
    ("Buy groceries", "milk, eggs, bread and coffee"),
    ("Read a book", "at least one chapter before bed"),
    ("Call Mom", "she wants to hear about the new job"),
)


def seed_tasks(mapper: TaskMapper) -> list[Task]:
    """
    Replace the table contents with SEED_TASKS.

    Clears first, so running it again still leaves exactly len(SEED_TASKS) rows.
    """
    removed = mapper.delete_all()
    created = [mapper.create(title, description) for title, description in SEED_TASKS]
    logger.info("Seeded %d tasks (removed %d)", len(created), removed)
    return created
