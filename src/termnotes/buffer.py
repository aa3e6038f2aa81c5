"""Multi-line edit buffer bound to one note."""

from typing import List, Tuple

from .models import Note


class EditBuffer:
    """Working copy of a note's contents while it is open in the editor.

    ``lines`` never contains newline characters; ``row``/``col`` is the text
    cursor and is kept inside the buffer after every operation.
    """

    def __init__(self, lines: List[str], title: str = ""):
        self.lines = list(lines) if lines else [""]
        self.title = title
        self.row = 0
        self.col = 0
        self.modified = False

    @classmethod
    def from_note(cls, note: Note) -> "EditBuffer":
        return cls(note.contents.split("\n"), title=note.name)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)

    def to_note(self) -> Tuple[str, str]:
        """Return (name, contents): name is the first line, "" if there is none."""
        name = self.lines[0] if self.lines else ""
        return name, self.text

    def _clamp_cursor(self):
        if not self.lines:
            self.lines = [""]
        self.row = max(0, min(self.row, len(self.lines) - 1))
        self.col = max(0, min(self.col, len(self.lines[self.row])))

    # Editing

    def insert_char(self, ch: str):
        if ch == "\n":
            self.newline()
            return
        cur = self.lines[self.row]
        self.lines[self.row] = cur[: self.col] + ch + cur[self.col :]
        self.col += len(ch)
        self.modified = True

    def newline(self):
        cur = self.lines[self.row]
        self.lines[self.row] = cur[: self.col]
        self.lines.insert(self.row + 1, cur[self.col :])
        self.row += 1
        self.col = 0
        self.modified = True

    def backspace(self):
        if self.col > 0:
            cur = self.lines[self.row]
            self.lines[self.row] = cur[: self.col - 1] + cur[self.col :]
            self.col -= 1
            self.modified = True
        elif self.row > 0:
            prev = self.lines[self.row - 1]
            self.col = len(prev)
            self.lines[self.row - 1] = prev + self.lines.pop(self.row)
            self.row -= 1
            self.modified = True

    def delete(self):
        cur = self.lines[self.row]
        if self.col < len(cur):
            self.lines[self.row] = cur[: self.col] + cur[self.col + 1 :]
            self.modified = True
        elif self.row < len(self.lines) - 1:
            self.lines[self.row] = cur + self.lines.pop(self.row + 1)
            self.modified = True

    # Movement

    def move_left(self):
        if self.col > 0:
            self.col -= 1
        elif self.row > 0:
            self.row -= 1
            self.col = len(self.lines[self.row])

    def move_right(self):
        if self.col < len(self.lines[self.row]):
            self.col += 1
        elif self.row < len(self.lines) - 1:
            self.row += 1
            self.col = 0

    def move_up(self):
        if self.row > 0:
            self.row -= 1
            self._clamp_cursor()

    def move_down(self):
        if self.row < len(self.lines) - 1:
            self.row += 1
            self._clamp_cursor()

    def home(self):
        self.col = 0

    def end(self):
        self.col = len(self.lines[self.row])

    def handle_key(self, key: str) -> bool:
        """Apply one logical key. Returns False for keys the buffer ignores."""
        action = _KEY_ACTIONS.get(key)
        if action is not None:
            action(self)
        elif len(key) == 1 and key.isprintable():
            self.insert_char(key)
        else:
            return False
        self._clamp_cursor()
        return True


_KEY_ACTIONS = {
    "enter": EditBuffer.newline,
    "backspace": EditBuffer.backspace,
    "delete": EditBuffer.delete,
    "left": EditBuffer.move_left,
    "right": EditBuffer.move_right,
    "up": EditBuffer.move_up,
    "down": EditBuffer.move_down,
    "home": EditBuffer.home,
    "end": EditBuffer.end,
    "tab": lambda buf: buf.insert_char("    "),
}
