# src/tasklist/cli/bootstrap.py

"""
CLI bootstrap helpers.

This module is the "composition root":
- resolves the environment's database from settings,
- opens the connection (and closes it afterwards),
- wires the SQLite adapter into a TaskMapper.
"""

from __future__ import annotations

import contextlib
import logging
from collections.abc import Iterator

from ..config import Settings, get_settings
from ..db import open_connection
from ..tasks.task_mapper import TaskMapper

logger = logging.getLogger(__name__)


@contextlib.contextmanager
def task_mapper_session(
    settings: Settings | None = None,
    environment: str | None = None,
) -> Iterator[TaskMapper]:
    """
    Yield a TaskMapper bound to the environment's database.

    Keeping settings injectable makes this easy to test and avoids hidden global config reads.
    If settings is None, falls back to get_settings().
    """
    if settings is None:
        settings = get_settings()

    db_path = settings.db_path_for(environment)
    logger.debug("Opening task store env=%s db=%s", environment or settings.environment, db_path)
    with open_connection(db_path) as conn:
        yield TaskMapper.for_connection(conn, max_field_length=settings.max_field_length)
