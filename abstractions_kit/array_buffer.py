"""An editor buffer holding its characters in a single list."""

from __future__ import annotations


class ArrayEditorBuffer:
    """An ordered sequence of characters with a cursor between them.

    The cursor is the index of the character that follows it.
    """

    __slots__ = ("_chars", "_cursor")

    def __init__(self) -> None:
        self._chars: list[str] = []
        self._cursor = 0

    def move_cursor_forward(self) -> None:
        """Move the cursor one character right; no effect at the end."""
        if self._cursor < len(self._chars):
            self._cursor += 1

    def move_cursor_backward(self) -> None:
        """Move the cursor one character left; no effect at the start."""
        if self._cursor > 0:
            self._cursor -= 1

    def move_cursor_to_start(self) -> None:
        self._cursor = 0

    def move_cursor_to_end(self) -> None:
        self._cursor = len(self._chars)

    def insert_character(self, ch: str) -> None:
        """Insert ``ch`` at the cursor and advance the cursor past it."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("a single character is required")
        self._chars.insert(self._cursor, ch)
        self._cursor += 1

    def delete_character(self) -> None:
        """Delete the character after the cursor; no effect at the end."""
        if self._cursor < len(self._chars):
            del self._chars[self._cursor]

    def render(self) -> str:
        """Return the contents, one space before each character, and a caret line below."""
        contents = "".join(" " + ch for ch in self._chars)
        return contents + "\n" + " " * (2 * self._cursor) + "^"

    def text(self) -> str:
        """Return the buffer contents."""
        return "".join(self._chars)

    def cursor(self) -> int:
        """Return the cursor position."""
        return self._cursor