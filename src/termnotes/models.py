"""Data models and constants for termnotes."""

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Literal, Optional, Union

if TYPE_CHECKING:
    from .buffer import EditBuffer

NEW_NOTE_NAME = "New note"
UNTITLED = "(untitled)"

KeyKind = Literal["press", "repeat", "release"]


@dataclass
class Note:
    """A named text note. ``id`` is None until the store assigns one."""

    name: str
    contents: str
    id: Optional[int] = None

    @classmethod
    def new(cls) -> "Note":
        return cls(name=NEW_NOTE_NAME, contents="")

    @property
    def persisted(self) -> bool:
        return self.id is not None


@dataclass(frozen=True)
class ListScreen:
    """Browsing the note list."""


@dataclass(frozen=True)
class EditorScreen:
    """Editing the note at ``index`` through ``buffer``."""

    buffer: "EditBuffer" = field(compare=False)
    index: int


Screen = Union[ListScreen, EditorScreen]


@dataclass(frozen=True)
class KeyEvent:
    """One logical key event from the terminal."""

    key: str
    kind: KeyKind = "press"

    @property
    def is_press(self) -> bool:
        return self.kind == "press"
