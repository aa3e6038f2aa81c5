import pytest

from termnotes.buffer import EditBuffer
from termnotes.models import Note


@pytest.mark.parametrize(
    "contents",
    ["", "single line", "Title\nline2", "trailing\n", "\n\nblank start"],
)
def test_unedited_buffer_round_trips(contents):
    name = contents.split("\n")[0]
    buf = EditBuffer.from_note(Note(name, contents))
    assert buf.to_note() == (name, contents)
    assert buf.modified is False


def test_empty_contents_gives_one_empty_line():
    buf = EditBuffer.from_note(Note("New note", ""))
    assert buf.lines == [""]
    assert buf.title == "New note"
    assert buf.to_note() == ("", "")


def test_zero_lines_does_not_raise():
    buf = EditBuffer([""])
    buf.lines = []
    assert buf.to_note() == ("", "")


def test_title_is_not_content():
    buf = EditBuffer.from_note(Note("Shown in border", "body"))
    assert buf.to_note() == ("body", "body")


def test_typing_a_note():
    buf = EditBuffer.from_note(Note("x", ""))
    for key in "Title":
        buf.handle_key(key)
    buf.handle_key("enter")
    for key in "line2":
        buf.handle_key(key)
    assert buf.to_note() == ("Title", "Title\nline2")
    assert buf.modified is True
    assert (buf.row, buf.col) == (1, 5)


def test_backspace_joins_lines():
    buf = EditBuffer(["ab", "cd"])
    buf.row, buf.col = 1, 0
    buf.handle_key("backspace")
    assert buf.lines == ["abcd"]
    assert (buf.row, buf.col) == (0, 2)


def test_backspace_at_start_is_noop():
    buf = EditBuffer(["ab"])
    buf.handle_key("backspace")
    assert buf.lines == ["ab"]
    assert buf.modified is False


def test_delete_forward_and_join():
    buf = EditBuffer(["ab", "cd"])
    buf.handle_key("delete")
    assert buf.lines == ["b", "cd"]
    buf.handle_key("end")
    buf.handle_key("delete")
    assert buf.lines == ["bcd"]


def test_delete_at_end_is_noop():
    buf = EditBuffer(["ab"])
    buf.handle_key("end")
    buf.handle_key("delete")
    assert buf.lines == ["ab"]


def test_vertical_movement_clamps_column():
    buf = EditBuffer(["long line", "ab"])
    buf.handle_key("end")
    buf.handle_key("down")
    assert (buf.row, buf.col) == (1, 2)
    buf.handle_key("down")
    assert buf.row == 1
    buf.handle_key("up")
    buf.handle_key("up")
    assert (buf.row, buf.col) == (0, 2)


def test_horizontal_movement_wraps_lines():
    buf = EditBuffer(["ab", "cd"])
    buf.handle_key("end")
    buf.handle_key("right")
    assert (buf.row, buf.col) == (1, 0)
    buf.handle_key("left")
    assert (buf.row, buf.col) == (0, 2)


def test_unknown_keys_are_ignored():
    buf = EditBuffer(["ab"])
    assert buf.handle_key("insert") is False
    assert buf.handle_key("\x01") is False
    assert buf.lines == ["ab"]


def test_split_line_in_middle():
    buf = EditBuffer(["abcd"])
    buf.col = 2
    buf.handle_key("enter")
    assert buf.lines == ["ab", "cd"]
    assert (buf.row, buf.col) == (1, 0)
