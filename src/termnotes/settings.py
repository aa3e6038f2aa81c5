"""Configuration for termnotes."""

import os
from pathlib import Path

APP_NAME = "termnotes"

DEFAULT_DB_PATH = "notes.db"
LOG_DIR = Path.home() / f".{APP_NAME}" / "logs"
LOG_PATH = LOG_DIR / f"{APP_NAME}.log"

DB_ENV = "TERMNOTES_DB"
LOG_LEVEL_ENV = "TERMNOTES_LOG_LEVEL"


def db_path() -> str:
    """Database file location; relative paths resolve against the cwd."""
    return os.environ.get(DB_ENV) or DEFAULT_DB_PATH


def log_level() -> str:
    return (os.environ.get(LOG_LEVEL_ENV) or "DEBUG").upper()
