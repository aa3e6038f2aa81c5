"""termnotes command-line entry point."""

import logging
import os
import sys

from . import settings
from .core import AppState
from .errors import StoreError
from .logging_setup import setup_logging
from .storage import NoteStore

log = logging.getLogger(__name__)


def main() -> int:
    """Open the note database and run the TUI. Returns the exit status."""
    setup_logging()
    path = settings.db_path()

    try:
        store = NoteStore(path)
    except StoreError as exc:
        log.critical("Startup failed: %s", exc)
        print(f"termnotes: {exc}", file=sys.stderr)
        return 1

    with store:
        try:
            state = AppState.load(store)
        except StoreError as exc:
            log.critical("Startup failed: %s", exc)
            print(f"termnotes: {exc}", file=sys.stderr)
            return 1

        # Short Esc delay so Esc is not mistaken for an escape sequence
        os.environ.setdefault("ESCDELAY", "25")
        from .tui import start_curses

        try:
            start_curses(state)
        except Exception:
            log.exception("Terminal UI crashed")
            raise

    log.info("Clean exit")
    return 0


if __name__ == "__main__":
    sys.exit(main())
