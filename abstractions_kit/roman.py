"""Conversion of Roman numerals to integers."""

from __future__ import annotations

import sys
from collections.abc import Sequence

ROMAN_VALUES = {
    "I": 1,
    "V": 5,
    "X": 10,
    "L": 50,
    "C": 100,
    "D": 500,
    "M": 1000,
}


def roman_to_int(text: str) -> int:
    """Return the value of a Roman numeral written in upper-case letters.

    A symbol smaller than the one after it is subtracted, any other is added.
    """
    try:
        values = [ROMAN_VALUES[ch] for ch in text]
    except KeyError as exc:
        raise ValueError(f"invalid symbol!: {exc.args[0]}") from None
    following = values[1:] + [0]
    return sum(-value if value < nxt else value for value, nxt in zip(values, following))


def main(argv: Sequence[str] | None = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        print("Please provide a string as a command line argument.")
        return 1
    try:
        print(roman_to_int(args[0]))
    except ValueError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())