# src/tasklist/cli/main.py

"""
CLI entrypoint.

Initializes logging, then runs one maintenance command against the chosen
environment's database:
- migrate: apply pending schema migrations,
- seed: reload the fixed sample tasks.
"""

from __future__ import annotations

import argparse
import logging
import sqlite3
import sys

from ..config import ENVIRONMENTS, Settings, get_settings
from ..db import open_connection
from ..logging_setup import setup_logging
from ..schema import apply_migrations
from ..tasks.seed import seed_tasks
from .bootstrap import task_mapper_session

logger = logging.getLogger(__name__)


def cmd_migrate(settings: Settings, environment: str | None) -> int:
    db_path = settings.db_path_for(environment)
    with open_connection(db_path) as conn:
        applied = apply_migrations(conn)
    if applied:
        for name in applied:
            print(f"applied {name}")
    else:
        print("schema is up to date")
    return 0


def cmd_seed(settings: Settings, environment: str | None) -> int:
    with task_mapper_session(settings, environment) as mapper:
        created = seed_tasks(mapper)
    print(f"seeded {len(created)} tasks")
    return 0


COMMANDS = {
    "migrate": cmd_migrate,
    "seed": cmd_seed,
}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tasklist", description="Task list database maintenance.")
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("migrate", "apply pending schema migrations"),
        ("seed", "clear the tasks table and load sample tasks"),
    ):
        p = sub.add_parser(name, help=help_text)
        p.add_argument(
            "--env",
            choices=ENVIRONMENTS,
            default=None,
            help="environment whose database to use (default: TASKLIST_ENV or development)",
        )
    return parser


def main(argv: list[str] | None = None, *, settings: Settings | None = None) -> int:
    args = build_parser().parse_args(argv)

    if settings is None:
        settings = get_settings()

    level_name = str(settings.log_level).upper()
    console_level = getattr(logging, level_name, logging.INFO)
    setup_logging(log_dir=settings.data_dir, console_level=console_level)

    environment = args.env or settings.environment
    logger.info("Starting %s %s env=%s", settings.app_name, args.command, environment)

    try:
        return COMMANDS[args.command](settings, environment)
    except ValueError as e:
        logger.error("Configuration error: %s", e)
        return 2
    except sqlite3.Error:
        logger.exception("Database error during %s (env=%s)", args.command, environment)
        return 1


if __name__ == "__main__":
    sys.exit(main())
