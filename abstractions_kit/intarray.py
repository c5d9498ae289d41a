"""A fixed-size, bounds-checked array of integers."""

from __future__ import annotations

import operator
from collections.abc import Iterator

_OUT_OF_BOUNDS = "Index out of bounds"


class IntArray:
    """An array of ``n`` integers, initially zero, with strict index checking.

    Negative indices are out of bounds; they do not count from the end.
    """

    __slots__ = ("_items",)

    def __init__(self, n: int) -> None:
        if n < 0:
            raise ValueError("size must not be negative")
        self._items = [0] * n

    def __len__(self) -> int:
        return len(self._items)

    def _check(self, k: int) -> int:
        k = operator.index(k)
        if not 0 <= k < len(self._items):
            raise IndexError(_OUT_OF_BOUNDS)
        return k

    def get(self, k: int) -> int:
        """Return the element at index ``k``."""
        return self._items[self._check(k)]

    def put(self, k: int, value: int) -> None:
        """Store ``value`` at index ``k``."""
        self._items[self._check(k)] = int(value)

    def __getitem__(self, k: int) -> int:
        return self.get(k)

    def __setitem__(self, k: int, value: int) -> None:
        self.put(k, value)

    def __iter__(self) -> Iterator[int]:
        return iter(list(self._items))

    def __copy__(self) -> IntArray:
        clone = IntArray(0)
        clone._items = list(self._items)
        return clone

    def __deepcopy__(self, memo: dict) -> IntArray:
        return self.__copy__()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IntArray):
            return NotImplemented
        return self._items == other._items

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"IntArray({self._items!r})"