import pytest

from termnotes.errors import PreconditionError, StoreError
from termnotes.models import Note


class FakeStore:
    """In-memory stand-in for NoteStore that records calls."""

    def __init__(self, notes=()):
        self.rows = {n.id: Note(n.name, n.contents, n.id) for n in notes if n.id is not None}
        self.next_id = max(self.rows, default=0) + 1
        self.calls = []
        self.fail_delete = False
        self.fail_save = False
        self.fail_create = False

    def load_all(self):
        return [Note(r.name, r.contents, r.id) for _, r in sorted(self.rows.items())]

    def create(self, note):
        self.calls.append(("create", note.name, note.contents))
        if self.fail_save or self.fail_create:
            raise StoreError("disk full")
        note.id = self.next_id
        self.next_id += 1
        self.rows[note.id] = Note(note.name, note.contents, note.id)

    def update(self, note):
        if note.id is None:
            raise PreconditionError("no id")
        self.calls.append(("update", note.id, note.name, note.contents))
        if self.fail_save:
            raise StoreError("disk full")
        if note.id not in self.rows:
            return False
        self.rows[note.id] = Note(note.name, note.contents, note.id)
        return True

    def save(self, note):
        if note.id is None:
            self.create(note)
            return True
        return self.update(note)

    def delete(self, note_id):
        self.calls.append(("delete", note_id))
        if self.fail_delete:
            raise StoreError("database is locked")
        self.rows.pop(note_id, None)


@pytest.fixture
def abc_store():
    return FakeStore([Note("A", "A", 1), Note("B", "B\nbody", 2), Note("C", "C", 3)])


@pytest.fixture
def empty_store():
    return FakeStore()
