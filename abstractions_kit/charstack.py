"""A stack of single characters."""

from __future__ import annotations


class StackEmptyError(IndexError):
    """Raised when the top of an empty stack is requested."""


class CharStack:
    """A last-in, first-out stack holding single characters."""

    __slots__ = ("_items",)

    def __init__(self) -> None:
        self._items: list[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"CharStack({''.join(self._items)!r})"

    def is_empty(self) -> bool:
        """Return True if the stack holds no characters."""
        return not self._items

    def clear(self) -> None:
        """Remove every character from the stack."""
        self._items.clear()

    def push(self, ch: str) -> None:
        """Push a single character on top of the stack."""
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("a single character is required")
        self._items.append(ch)

    def pop(self) -> str:
        """Remove and return the top character."""
        if not self._items:
            raise StackEmptyError("pop: Attempting to pop an empty stack")
        return self._items.pop()

    def peek(self) -> str:
        """Return the top character without removing it."""
        if not self._items:
            raise StackEmptyError("peek: Attempting to peek at an empty stack")
        return self._items[-1]