# src/tasklist/config.py

"""Centralized settings loaded from environment variables (+ optional .env).

Design goals:
- One Settings object for the whole app.
- Explicit per-environment storage: development and test never share a database file.
- Settings are passed to whoever opens a connection; the mapper itself never reads the env.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

ENV_PREFIX = "TASKLIST"

DEVELOPMENT = "development"
TEST = "test"
ENVIRONMENTS = (DEVELOPMENT, TEST)

DEFAULT_MAX_FIELD_LENGTH = 255


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


load_dotenv(override=False)


def _env(name: str, default: str = "") -> str:
    v = os.getenv(name)
    return default if v is None else v


def _env_int(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True, slots=True)
class Settings:
    # ---- App / logging ----
    app_name: str
    log_level: str

    # ---- Environment selection ----
    environment: str

    # ---- Local data paths (ignored by git) ----
    data_dir: Path
    development_db_path: Path
    test_db_path: Path

    # ---- Validation ----
    max_field_length: int = DEFAULT_MAX_FIELD_LENGTH

    @staticmethod
    def from_env() -> "Settings":
        app_name = _env(_k("APP_NAME"), "tasklist").strip() or "tasklist"
        log_level = _env(_k("LOG_LEVEL"), "INFO")

        environment = _env(_k("ENV"), DEVELOPMENT).strip().lower() or DEVELOPMENT

        data_dir = _env_path(_k("DATA_DIR"), Path(".local/tasklist"))
        development_db_path = _env_path(
            _k("DEVELOPMENT_DB_PATH"), data_dir / "development.sqlite3"
        )
        test_db_path = _env_path(_k("TEST_DB_PATH"), data_dir / "test.sqlite3")

        max_field_length = _env_int(_k("MAX_FIELD_LENGTH"), DEFAULT_MAX_FIELD_LENGTH)
        if max_field_length <= 0:
            max_field_length = DEFAULT_MAX_FIELD_LENGTH

        return Settings(
            app_name=app_name,
            log_level=log_level,
            environment=environment,
            data_dir=data_dir,
            development_db_path=development_db_path,
            test_db_path=test_db_path,
            max_field_length=max_field_length,
        )

    def db_path_for(self, environment: str | None = None) -> Path:
        """
        Return the database file for an environment (defaults to the active one).

        Raises ValueError for unknown environments, and when the test database
        would be the same file as the development database.
        """
        env = (environment or self.environment).strip().lower()
        if env not in ENVIRONMENTS:
            raise ValueError(
                f"Unknown environment {env!r}; expected one of: {', '.join(ENVIRONMENTS)}"
            )
        if env == TEST:
            if self.test_db_path == self.development_db_path:
                raise ValueError("Test database path must be different from development database path")
            return self.test_db_path
        return self.development_db_path


_SETTINGS: Settings | None = None


def get_settings() -> Settings:
    """Build settings once per process and reuse them."""
    global _SETTINGS
    if _SETTINGS is None:
        _SETTINGS = Settings.from_env()
    return _SETTINGS
