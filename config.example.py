# config.example.py

"""
Documentation-only module (safe to commit).

The real configuration is loaded from environment variables (optionally via a local .env file).
This file exists to make the repo self-documenting even without opening .env.example.
"""

ENV_VARS = {
    # App / logging
    "TASKLIST_APP_NAME": "App display name used in logs (default: tasklist).",
    "TASKLIST_LOG_LEVEL": "Console logging level (default: INFO).",
    # Environment
    "TASKLIST_ENV": "Active environment: development or test (default: development).",
    # Paths (gitignored)
    "TASKLIST_DATA_DIR": "Local data directory for databases and logs (default: .local/tasklist).",
    "TASKLIST_DEVELOPMENT_DB_PATH": (
        "Development SQLite path (default: <data_dir>/development.sqlite3)."
    ),
    "TASKLIST_TEST_DB_PATH": "Test SQLite path (default: <data_dir>/test.sqlite3).",
    # Validation
    "TASKLIST_MAX_FIELD_LENGTH": "Max characters for task title/description (default: 255).",
}
