"""termnotes curses-based terminal user interface."""

import curses
import logging
from typing import Optional, Union

from .core import AppState, display_name
from .dispatch import dispatch
from .errors import InputError
from .models import UNTITLED, EditorScreen, KeyEvent

log = logging.getLogger(__name__)

LIST_HELP = "up/k down/j move | Enter open | Ins/n new | Del delete | Esc/q quit"

_CHAR_KEYS = {
    "\n": "enter",
    "\r": "enter",
    "\x1b": "esc",
    "\x7f": "backspace",
    "\x08": "backspace",
    "\t": "tab",
    "\x18": "ctrl-x",
}

_CURSES_KEYS = {
    curses.KEY_UP: "up",
    curses.KEY_DOWN: "down",
    curses.KEY_LEFT: "left",
    curses.KEY_RIGHT: "right",
    curses.KEY_HOME: "home",
    curses.KEY_END: "end",
    curses.KEY_ENTER: "enter",
    curses.KEY_IC: "insert",
    curses.KEY_DC: "delete",
    curses.KEY_BACKSPACE: "backspace",
    curses.KEY_RESIZE: "resize",
}


def translate_key(raw: Union[str, int]) -> KeyEvent:
    """Turn a ``get_wch()`` result into a KeyEvent.

    curses only reports key presses, so every event is a press. Raises
    InputError for anything without a logical meaning.
    """
    if isinstance(raw, str):
        if raw in _CHAR_KEYS:
            return KeyEvent(_CHAR_KEYS[raw])
        if len(raw) == 1 and raw.isprintable():
            return KeyEvent(raw)
        raise InputError(raw)
    if raw in _CURSES_KEYS:
        return KeyEvent(_CURSES_KEYS[raw])
    raise InputError(raw)


class Renderer:
    """Draws an AppState onto a curses window."""

    def __init__(self, stdscr):
        self.stdscr = stdscr
        self.scroll = 0
        self.ed_top = 0
        self.ed_left = 0
        self.height, self.width = self.stdscr.getmaxyx()

        self.has_colors = curses.has_colors()
        if self.has_colors:
            curses.start_color()
            try:
                curses.use_default_colors()
            except curses.error:
                pass
            curses.init_pair(1, curses.COLOR_YELLOW, -1)
            curses.init_pair(2, curses.COLOR_GREEN, -1)
            self.COL_UNSAVED = curses.color_pair(1)
            self.COL_SELECTED = curses.color_pair(2) | curses.A_BOLD
        else:
            self.COL_UNSAVED = curses.A_UNDERLINE
            self.COL_SELECTED = curses.A_BOLD

    def draw(self, state: AppState):
        """Render the current screen and the status line."""
        self.stdscr.erase()
        self.height, self.width = self.stdscr.getmaxyx()
        if self.height < 2 or self.width < 2:
            self.stdscr.refresh()
            return
        if isinstance(state.screen, EditorScreen):
            self.draw_editor(state.screen)
        else:
            self.draw_list(state)
        self.stdscr.hline(self.height - 2, 0, curses.ACS_HLINE, self.width)
        self.stdscr.addnstr(self.height - 1, 0, state.status, self.width - 1)
        self.stdscr.refresh()

    def draw_list(self, state: AppState):
        curses.curs_set(0)
        header = f"Notes ({len(state.notes)})"
        self.stdscr.addnstr(0, 0, header, self.width - 1, curses.A_BOLD)
        self.stdscr.addnstr(1, 0, LIST_HELP, self.width - 1, curses.A_DIM)

        top = 2
        body_h = self.height - top - 2
        if body_h < 1:
            return
        if not state.notes:
            self.stdscr.addnstr(top, 0, "No notes yet. Press Insert to add one.", self.width - 1, curses.A_DIM)
            return

        cursor = state.cursor or 0
        if cursor < self.scroll:
            self.scroll = cursor
        elif cursor >= self.scroll + body_h:
            self.scroll = cursor - body_h + 1

        for i in range(self.scroll, min(self.scroll + body_h, len(state.notes))):
            note = state.notes[i]
            marker = " " if note.persisted else "*"
            pointer = ">" if i == cursor else " "
            line = f"{pointer}{marker} {display_name(note)}"
            attrs = curses.A_NORMAL
            if not note.persisted:
                attrs |= self.COL_UNSAVED
            if i == cursor:
                attrs |= curses.A_REVERSE | self.COL_SELECTED
            self.stdscr.addnstr(top + i - self.scroll, 0, line, self.width - 1, attrs)

    def draw_editor(self, screen: EditorScreen):
        buf = screen.buffer
        box_h = self.height - 2
        if box_h < 3 or self.width < 4:
            return
        inner_h, inner_w = box_h - 2, self.width - 2

        # Border with the note name as title
        win = self.stdscr.derwin(box_h, self.width, 0, 0)
        win.border()
        title = f" {buf.title or UNTITLED}{' [+]' if buf.modified else ''} "
        win.addnstr(0, 2, title, max(0, self.width - 4), curses.A_BOLD)

        if buf.row < self.ed_top:
            self.ed_top = buf.row
        elif buf.row >= self.ed_top + inner_h:
            self.ed_top = buf.row - inner_h + 1
        if buf.col < self.ed_left:
            self.ed_left = buf.col
        elif buf.col >= self.ed_left + inner_w - 1:
            self.ed_left = buf.col - inner_w + 2

        for y, line in enumerate(buf.lines[self.ed_top : self.ed_top + inner_h]):
            win.addnstr(1 + y, 1, line[self.ed_left :], inner_w - 1)

        curses.curs_set(1)
        self.stdscr.move(1 + buf.row - self.ed_top, 1 + buf.col - self.ed_left)

    def reset_editor_view(self):
        self.ed_top = 0
        self.ed_left = 0


def read_key(stdscr) -> Optional[Union[str, int]]:
    """Block for one key. Returns None for an unrecognised escape sequence.

    A bare Esc that arrives with more input right behind it is an Alt+key or
    an escape sequence terminfo did not decode; the whole burst is dropped.
    """
    raw = stdscr.get_wch()
    if raw != "\x1b":
        return raw
    stdscr.nodelay(True)
    try:
        trailing = []
        while True:
            try:
                trailing.append(stdscr.get_wch())
            except curses.error:
                break
    finally:
        stdscr.nodelay(False)
    if trailing:
        log.debug("Dropped escape sequence %r", trailing)
        return None
    return raw


def run(stdscr, state: AppState):
    """Main event loop: draw, wait for one key, apply it."""
    stdscr.keypad(True)
    renderer = Renderer(stdscr)
    while not state.exit:
        renderer.draw(state)
        raw = read_key(stdscr)
        if raw is None:
            continue
        try:
            event = translate_key(raw)
        except InputError as exc:
            log.debug("%s", exc)
            continue
        was_editing = state.in_editor
        state.apply(dispatch(state.screen, event))
        if state.in_editor != was_editing:
            renderer.reset_editor_view()


def start_curses(state: AppState):
    """Initialize curses and run the TUI."""

    def _main(stdscr):
        run(stdscr, state)

    curses.wrapper(_main)
