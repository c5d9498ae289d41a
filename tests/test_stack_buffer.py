import pytest

from abstractions_kit.array_buffer import ArrayEditorBuffer
from abstractions_kit.stack_buffer import StackEditorBuffer


def _insert(buffer, text):
    for ch in text:
        buffer.insert_character(ch)


def test_insert_advances_cursor():
    buffer = StackEditorBuffer()
    _insert(buffer, "abc")
    assert buffer.text() == "abc"
    assert buffer.cursor() == 3


def test_empty_buffer_render():
    assert StackEditorBuffer().render() == "\n^"


def test_render_format():
    buffer = StackEditorBuffer()
    _insert(buffer, "ab")
    buffer.move_cursor_backward()
    assert buffer.render() == " a b\n  ^"


def test_render_keeps_cursor():
    buffer = StackEditorBuffer()
    _insert(buffer, "hello")
    buffer.move_cursor_backward()
    buffer.move_cursor_backward()
    buffer.render()
    assert buffer.cursor() == 3
    assert buffer.text() == "hello"


def test_delete_removes_character_after_cursor():
    buffer = StackEditorBuffer()
    _insert(buffer, "abc")
    buffer.move_cursor_to_start()
    buffer.delete_character()
    assert buffer.text() == "bc"
    assert buffer.cursor() == 0


def test_delete_at_end_has_no_effect():
    buffer = StackEditorBuffer()
    _insert(buffer, "abc")
    buffer.delete_character()
    assert buffer.text() == "abc"


def test_moves_stop_at_edges():
    buffer = StackEditorBuffer()
    _insert(buffer, "xy")
    buffer.move_cursor_forward()
    assert buffer.cursor() == 2
    buffer.move_cursor_to_start()
    buffer.move_cursor_backward()
    assert buffer.cursor() == 0
    buffer.move_cursor_to_end()
    assert buffer.cursor() == 2


def test_insert_in_middle():
    buffer = StackEditorBuffer()
    _insert(buffer, "ac")
    buffer.move_cursor_backward()
    buffer.insert_character("b")
    assert buffer.text() == "abc"
    assert buffer.cursor() == 2


def test_insert_rejects_multiple_characters():
    with pytest.raises(ValueError):
        StackEditorBuffer().insert_character("ab")


@pytest.mark.parametrize(
    "operations",
    [
        ["i:a", "i:b", "i:c", "back", "back", "del", "end", "i:d"],
        ["i:q", "start", "fwd", "fwd", "del", "i:r", "back", "back", "i:s"],
        ["del", "back", "i:1", "i:2", "start", "del", "del", "del"],
    ],
)
def test_matches_array_buffer(operations):
    stack_buffer = StackEditorBuffer()
    array_buffer = ArrayEditorBuffer()
    for op in operations:
        for buffer in (stack_buffer, array_buffer):
            if op.startswith("i:"):
                buffer.insert_character(op[2:])
            elif op == "back":
                buffer.move_cursor_backward()
            elif op == "fwd":
                buffer.move_cursor_forward()
            elif op == "start":
                buffer.move_cursor_to_start()
            elif op == "end":
                buffer.move_cursor_to_end()
            else:
                buffer.delete_character()
        assert stack_buffer.text() == array_buffer.text()
        assert stack_buffer.cursor() == array_buffer.cursor()
        assert stack_buffer.render() == array_buffer.render()