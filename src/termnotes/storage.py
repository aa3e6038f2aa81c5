"""SQLite persistence for termnotes."""

import logging
import sqlite3
from typing import List

from .errors import PreconditionError, StoreError
from .models import Note

log = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS notes (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    name TEXT NOT NULL,
    contents TEXT NOT NULL
)
"""


class NoteStore:
    """One SQLite connection holding the ``notes`` table.

    Open it once at startup and hand it to the AppState; it is not meant to
    be shared between threads.
    """

    def __init__(self, path: str):
        self.path = path
        try:
            self.conn = sqlite3.connect(path)
            with self.conn:
                self.conn.execute(SCHEMA)
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot open note database {path!r}: {exc}") from exc
        log.info("Opened note database %s", path)

    def __enter__(self) -> "NoteStore":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self.conn.close()

    def load_all(self) -> List[Note]:
        """Return every stored note in id order."""
        try:
            rows = self.conn.execute("SELECT id, name, contents FROM notes ORDER BY id").fetchall()
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot load notes: {exc}") from exc
        log.debug("Loaded %d notes", len(rows))
        return [Note(id=row[0], name=row[1], contents=row[2]) for row in rows]

    def create(self, note: Note) -> None:
        """Insert ``note`` and set its id. The id stays None on failure."""
        try:
            with self.conn:
                cur = self.conn.execute(
                    "INSERT INTO notes (name, contents) VALUES (?, ?)",
                    (note.name, note.contents),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot create note: {exc}") from exc
        note.id = cur.lastrowid
        log.info("Created note id=%s", note.id)

    def update(self, note: Note) -> bool:
        """Overwrite name and contents of a stored note.

        Returns False (and logs a warning) when the row no longer exists.
        """
        if note.id is None:
            raise PreconditionError("update() needs a note that has an id; use save()")
        try:
            with self.conn:
                cur = self.conn.execute(
                    "UPDATE notes SET name = ?, contents = ? WHERE id = ?",
                    (note.name, note.contents, note.id),
                )
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot update note {note.id}: {exc}") from exc
        if cur.rowcount == 0:
            log.warning("Update matched no row for note id=%s", note.id)
            return False
        log.info("Updated note id=%s", note.id)
        return True

    def save(self, note: Note) -> bool:
        """Create the note if it has no id yet, otherwise update it."""
        if note.id is None:
            self.create(note)
            return True
        return self.update(note)

    def delete(self, note_id: int) -> None:
        """Remove a note. Deleting an id that is already gone succeeds."""
        try:
            with self.conn:
                cur = self.conn.execute("DELETE FROM notes WHERE id = ?", (note_id,))
        except sqlite3.Error as exc:
            raise StoreError(f"Cannot delete note {note_id}: {exc}") from exc
        if cur.rowcount == 0:
            log.debug("Delete of note id=%s matched no row", note_id)
        else:
            log.info("Deleted note id=%s", note_id)
