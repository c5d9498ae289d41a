"""An editor buffer holding its characters in two stacks around the cursor."""

from __future__ import annotations

from abstractions_kit.charstack import CharStack


class StackEditorBuffer:
    """An ordered sequence of characters with a cursor between them.

    Characters before the cursor live in one stack and characters after it in
    another. In both, the character nearest the cursor is on top, so inserting
    and deleting at the cursor take constant time.
    """

    __slots__ = ("_before", "_after")

    def __init__(self) -> None:
        self._before = CharStack()
        self._after = CharStack()

    def move_cursor_forward(self) -> None:
        """Move the cursor one character right; no effect at the end."""
        if not self._after.is_empty():
            self._before.push(self._after.pop())

    def move_cursor_backward(self) -> None:
        """Move the cursor one character left; no effect at the start."""
        if not self._before.is_empty():
            self._after.push(self._before.pop())

    def move_cursor_to_start(self) -> None:
        while not self._before.is_empty():
            self._after.push(self._before.pop())

    def move_cursor_to_end(self) -> None:
        while not self._after.is_empty():
            self._before.push(self._after.pop())

    def insert_character(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and advance the cursor past it."""
        self._before.push(ch)

    def delete_character(self) -> None:
        """Delete the character after the cursor; no effect at the end."""
        if not self._after.is_empty():
            self._after.pop()

    def _contents(self) -> str:
        """Read every character, leaving the cursor where it was."""
        position = len(self._before)
        self.move_cursor_to_start()
        chars = []
        while not self._after.is_empty():
            chars.append(self._after.peek())
            self.move_cursor_forward()
        self.move_cursor_to_start()
        for _ in range(position):
            self.move_cursor_forward()
        return "".join(chars)

    def render(self) -> str:
        """Return the contents, one space before each character, and a caret line below."""
        contents = "".join(" " + ch for ch in self._contents())
        return contents + "\n" + "  " * len(self._before) + "^"

    def text(self) -> str:
        """Return the buffer contents."""
        return self._contents()

    def cursor(self) -> int:
        """Return the cursor position."""
        return len(self._before)