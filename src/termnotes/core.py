"""Application state machine for termnotes (no terminal I/O)."""

import dataclasses
import logging
from typing import Iterable, Optional, Tuple

from .buffer import EditBuffer
from .dispatch import Action, Command
from .errors import StoreError
from .models import UNTITLED, EditorScreen, ListScreen, Note, Screen
from .storage import NoteStore

log = logging.getLogger(__name__)


def clamp_cursor(cursor: Optional[int], size: int) -> Optional[int]:
    """Bring a list cursor back inside ``range(size)``; None for an empty list."""
    if size <= 0:
        return None
    if cursor is None:
        return 0
    return max(0, min(cursor, size - 1))


def display_name(note: Note) -> str:
    return note.name.strip() or UNTITLED


class AppState:
    """Notes, the current screen and the list cursor.

    Every transition method returns True when it did something and False
    when the action was not possible in the current state (empty list, wrong
    screen, store failure). Failures are reported through ``status``.
    """

    def __init__(self, store: NoteStore, notes: Iterable[Note] = ()):
        self.store = store
        self._notes = list(notes)
        self.screen: Screen = ListScreen()
        self.cursor: Optional[int] = clamp_cursor(None, len(self._notes))
        self.exit = False
        self.status = "Enter open | Ins new | Del delete | Esc quit"

    @classmethod
    def load(cls, store: NoteStore) -> "AppState":
        """Build the initial state from everything in ``store``."""
        return cls(store, store.load_all())

    # Read-only view for the renderer

    @property
    def notes(self) -> Tuple[Note, ...]:
        return tuple(self._notes)

    @property
    def selected(self) -> Optional[Note]:
        if self.cursor is None:
            return None
        return self._notes[self.cursor]

    @property
    def in_editor(self) -> bool:
        return isinstance(self.screen, EditorScreen)

    @property
    def buffer(self) -> Optional[EditBuffer]:
        if isinstance(self.screen, EditorScreen):
            return self.screen.buffer
        return None

    def message(self, text: str):
        self.status = text

    # List screen

    def _move(self, target: int) -> bool:
        if self.in_editor or not self._notes:
            return False
        self.cursor = clamp_cursor(target, len(self._notes))
        return True

    def move_down(self) -> bool:
        if self.cursor is None:
            return self._move(0)
        return self._move(self.cursor + 1)

    def move_up(self) -> bool:
        if self.cursor is None:
            return self._move(0)
        return self._move(self.cursor - 1)

    def move_top(self) -> bool:
        return self._move(0)

    def move_bottom(self) -> bool:
        return self._move(len(self._notes) - 1)

    def open_selected(self) -> bool:
        if self.in_editor:
            return False
        note = self.selected
        if note is None:
            self.message("No note selected.")
            return False
        self.screen = EditorScreen(buffer=EditBuffer.from_note(note), index=self.cursor)
        self.message("Esc save & close | Ctrl-X discard")
        return True

    def new_note(self) -> bool:
        if self.in_editor:
            return False
        self._notes.insert(0, Note.new())
        self.cursor = 0
        return self.open_selected()

    def delete_selected(self) -> bool:
        if self.in_editor:
            return False
        note = self.selected
        if note is None:
            self.message("Nothing to delete.")
            return False
        if note.persisted:
            try:
                self.store.delete(note.id)
            except StoreError as exc:
                log.error("Delete failed for note id=%s: %s", note.id, exc)
                self.message(f"Delete failed: {exc}")
                return False
        del self._notes[self.cursor]
        self.cursor = clamp_cursor(self.cursor, len(self._notes))
        self.message(f"Deleted: {display_name(note)}")
        return True

    def quit(self) -> bool:
        if self.in_editor:
            return False
        self.exit = True
        return True

    # Editor screen

    def edit(self, key: str) -> bool:
        buf = self.buffer
        if buf is None:
            return False
        return buf.handle_key(key)

    def commit(self) -> bool:
        """Save the edit buffer into its note and return to the list.

        On a store failure the editor stays open with the buffer untouched so
        the user can try again.
        """
        screen = self.screen
        if not isinstance(screen, EditorScreen):
            return False
        note = self._notes[screen.index]
        name, contents = screen.buffer.to_note()
        draft = dataclasses.replace(note, name=name, contents=contents)
        try:
            found = self.store.save(draft)
            if not found:
                # Row is gone; store the edit as a new row
                log.warning("Note id=%s missing from store, recreating", note.id)
                draft.id = None
                self.store.save(draft)
        except StoreError as exc:
            log.error("Save failed for note id=%s: %s", note.id, exc)
            self.message(f"Save failed, press Esc to retry: {exc}")
            return False

        note.id, note.name, note.contents = draft.id, draft.name, draft.contents
        self.screen = ListScreen()
        self.cursor = screen.index
        if found:
            self.message(f"Saved: {display_name(note)}")
        else:
            self.message(f"Warning: {display_name(note)} was missing from the database and has been re-added")
        return True

    def discard(self) -> bool:
        screen = self.screen
        if not isinstance(screen, EditorScreen):
            return False
        self.screen = ListScreen()
        self.cursor = screen.index
        self.message("Changes discarded.")
        return True

    # Dispatch

    def apply(self, action: Optional[Action]) -> bool:
        """Run the transition named by ``action``. None is a no-op."""
        if action is None:
            return False
        if action.command is Command.EDIT:
            return self.edit(action.key or "")
        return _HANDLERS[action.command](self)


_HANDLERS = {
    Command.MOVE_UP: AppState.move_up,
    Command.MOVE_DOWN: AppState.move_down,
    Command.MOVE_TOP: AppState.move_top,
    Command.MOVE_BOTTOM: AppState.move_bottom,
    Command.OPEN: AppState.open_selected,
    Command.NEW: AppState.new_note,
    Command.DELETE: AppState.delete_selected,
    Command.QUIT: AppState.quit,
    Command.COMMIT: AppState.commit,
    Command.DISCARD: AppState.discard,
}
