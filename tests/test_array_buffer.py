import pytest

from abstractions_kit.array_buffer import ArrayEditorBuffer


def _filled(text):
    buffer = ArrayEditorBuffer()
    for ch in text:
        buffer.insert_character(ch)
    return buffer


def test_empty_buffer():
    buffer = ArrayEditorBuffer()
    assert buffer.text() == ""
    assert buffer.cursor() == 0
    assert buffer.render() == "\n^"


def test_insert_advances_cursor():
    buffer = _filled("abc")
    assert buffer.text() == "abc"
    assert buffer.cursor() == 3


def test_insert_in_middle():
    buffer = _filled("ac")
    buffer.move_cursor_backward()
    buffer.insert_character("b")
    assert buffer.text() == "abc"
    assert buffer.cursor() == 2


def test_cursor_limits():
    buffer = _filled("ab")
    buffer.move_cursor_forward()
    assert buffer.cursor() == 2
    buffer.move_cursor_to_start()
    buffer.move_cursor_backward()
    assert buffer.cursor() == 0
    buffer.move_cursor_to_end()
    assert buffer.cursor() == len(buffer.text())


def test_delete_character_after_cursor():
    buffer = _filled("abc")
    buffer.move_cursor_to_start()
    buffer.delete_character()
    assert buffer.text() == "bc"
    assert buffer.cursor() == 0


def test_delete_at_end_has_no_effect():
    buffer = _filled("abc")
    buffer.delete_character()
    assert buffer.text() == "abc"


def test_many_insertions():
    text = "the quick brown fox jumps"
    buffer = _filled(text)
    assert buffer.text() == text
    assert buffer.cursor() == len(text)


def test_render_caret_position():
    buffer = _filled("ab")
    buffer.move_cursor_backward()
    lines = buffer.render().split("\n")
    assert lines[0] == " a b"
    assert lines[1] == " " * 2 + "^"


def test_insert_requires_single_character():
    with pytest.raises(ValueError):
        ArrayEditorBuffer().insert_character("xy")