"""Map key events to AppState commands (pure functions, no I/O)."""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .models import EditorScreen, KeyEvent, Screen


class Command(Enum):
    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_TOP = "move_top"
    MOVE_BOTTOM = "move_bottom"
    OPEN = "open"
    NEW = "new"
    DELETE = "delete"
    QUIT = "quit"
    EDIT = "edit"
    COMMIT = "commit"
    DISCARD = "discard"


@dataclass(frozen=True)
class Action:
    command: Command
    key: Optional[str] = None


LIST_KEYMAP = {
    "up": Command.MOVE_UP,
    "k": Command.MOVE_UP,
    "down": Command.MOVE_DOWN,
    "j": Command.MOVE_DOWN,
    "home": Command.MOVE_TOP,
    "g": Command.MOVE_TOP,
    "end": Command.MOVE_BOTTOM,
    "G": Command.MOVE_BOTTOM,
    "enter": Command.OPEN,
    "insert": Command.NEW,
    "n": Command.NEW,
    "delete": Command.DELETE,
    "esc": Command.QUIT,
    "q": Command.QUIT,
}

EDITOR_KEYMAP = {
    "esc": Command.COMMIT,
    "ctrl-x": Command.DISCARD,
}


def dispatch(screen: Screen, event: KeyEvent) -> Optional[Action]:
    """Return the action for ``event`` on ``screen``, or None to ignore it.

    Only key presses act; repeats and releases are dropped so that one
    physical keypress triggers exactly one action.
    """
    if not event.is_press or event.key == "resize":
        return None

    if isinstance(screen, EditorScreen):
        command = EDITOR_KEYMAP.get(event.key)
        if command is not None:
            return Action(command)
        return Action(Command.EDIT, event.key)

    command = LIST_KEYMAP.get(event.key)
    if command is None:
        return None
    return Action(command)
