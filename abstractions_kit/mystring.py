"""A mutable string type with bounds-checked character access."""

from __future__ import annotations

import operator
from collections.abc import Iterator

_OUT_OF_BOUNDS = "Index out of bounds"


class MyString:
    """A sequence of characters that can be changed one character at a time.

    Copies made with :func:`copy.copy` are independent of the original.
    Negative indices are out of bounds; they do not count from the end.
    """

    __slots__ = ("_chars",)

    def __init__(self, text: str = "") -> None:
        self._chars = list(str(text))

    def __len__(self) -> int:
        return len(self._chars)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"MyString({str(self)!r})"

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._chars))

    def substr(self, start: int, n: int = -1) -> MyString:
        """Return ``n`` characters from ``start``; -1 or too large an ``n`` means to the end."""
        start = operator.index(start)
        n = operator.index(n)
        if not 0 <= start <= len(self._chars):
            raise IndexError(_OUT_OF_BOUNDS)
        if n < -1:
            raise ValueError("n must be -1 or a non-negative length")
        end = len(self._chars) if n == -1 else min(start + n, len(self._chars))
        return MyString("".join(self._chars[start:end]))

    def __add__(self, other: MyString) -> MyString:
        if not isinstance(other, MyString):
            return NotImplemented
        return MyString(str(self) + str(other))

    def _check(self, k: int) -> int:
        k = operator.index(k)
        if not 0 <= k < len(self._chars):
            raise IndexError(_OUT_OF_BOUNDS)
        return k

    def __getitem__(self, k: int) -> str:
        return self._chars[self._check(k)]

    def __setitem__(self, k: int, ch: str) -> None:
        index = self._check(k)
        if not isinstance(ch, str) or len(ch) != 1:
            raise ValueError("a single character is required")
        self._chars[index] = ch

    def __copy__(self) -> MyString:
        return MyString(str(self))

    def __deepcopy__(self, memo: dict) -> MyString:
        return self.__copy__()

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MyString):
            return self._chars == other._chars
        if isinstance(other, str):
            return str(self) == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]