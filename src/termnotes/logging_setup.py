"""File logging for termnotes.

curses owns the terminal while the app runs, so everything goes to a
rotating log file instead of stdout.
"""

import logging
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .settings import APP_NAME, LOG_PATH, log_level

SESSION_ID = uuid.uuid4().hex[:8]

LOG_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s | sid=%(session)s"


class EnsureSessionFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not hasattr(record, "session"):
            record.session = SESSION_ID
        return True


def setup_logging(path: Optional[Path] = None) -> logging.Logger:
    """Attach a rotating file handler to the package logger (once)."""
    path = Path(path) if path is not None else LOG_PATH

    logger = logging.getLogger(APP_NAME)
    logger.setLevel(logging.DEBUG)
    logger.propagate = False

    if logger.handlers:
        return logger

    path.parent.mkdir(parents=True, exist_ok=True)

    fh = RotatingFileHandler(path, maxBytes=2 * 1024 * 1024, backupCount=5, encoding="utf-8")
    fh.setLevel(getattr(logging, log_level(), logging.DEBUG))
    fh.setFormatter(logging.Formatter(LOG_FORMAT))
    fh.addFilter(EnsureSessionFilter())
    logger.addHandler(fh)

    logger.info("Logging initialized. log_file=%s", path)
    return logger
