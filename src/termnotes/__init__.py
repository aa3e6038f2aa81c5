"""termnotes - a terminal note list and editor backed by SQLite."""

__version__ = "1.0.0"

from .models import Note, ListScreen, EditorScreen, KeyEvent, NEW_NOTE_NAME
from .errors import TermnotesError, StoreError, PreconditionError, InputError
from .storage import NoteStore
from .buffer import EditBuffer
from .core import AppState, clamp_cursor
from .dispatch import Action, Command, dispatch

__all__ = [
    "Note",
    "ListScreen",
    "EditorScreen",
    "KeyEvent",
    "NEW_NOTE_NAME",
    "TermnotesError",
    "StoreError",
    "PreconditionError",
    "InputError",
    "NoteStore",
    "EditBuffer",
    "AppState",
    "clamp_cursor",
    "Action",
    "Command",
    "dispatch",
]
