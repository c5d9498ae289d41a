"""Binary and Gray code enumeration and integer/string conversion in any base 2-36."""

from __future__ import annotations

import argparse
import itertools
import string
import sys
from collections.abc import Iterator, Sequence

DIGITS = string.digits + string.ascii_uppercase
MIN_BASE = 2
MAX_BASE = len(DIGITS)


def _check_base(base: int) -> None:
    if not MIN_BASE <= base <= MAX_BASE:
        raise ValueError(f"base must be between {MIN_BASE} and {MAX_BASE}, got {base}")


def binary_to_decimal(bits: str) -> int:
    """Return the value of a bit string; any character other than '1' counts as 0."""
    return sum(1 << power for power, ch in enumerate(reversed(bits)) if ch == "1")


def binary_codes(n_bits: int) -> Iterator[tuple[str, int]]:
    """Yield every n-bit pattern in ascending order together with its value."""
    if n_bits < 0:
        raise ValueError("invalid nBits!")
    return _binary_codes(n_bits)


def _binary_codes(n_bits: int) -> Iterator[tuple[str, int]]:
    for combo in itertools.product("01", repeat=n_bits):
        bits = "".join(combo)
        yield bits, binary_to_decimal(bits)


def gray_codes(n_bits: int) -> list[str]:
    """Return the reflected Gray code sequence for ``n_bits`` bits."""
    if n_bits < 1:
        raise ValueError("invalid nBits!")
    codes = ["0", "1"]
    for _ in range(n_bits - 1):
        codes = ["0" + code for code in codes] + ["1" + code for code in reversed(codes)]
    return codes


def integer_to_string(num: int, base: int) -> str:
    """Format ``num`` in ``base`` using digits 0-9 and letters A-Z."""
    _check_base(base)
    if num == 0:
        return "0"
    sign = "-" if num < 0 else ""
    num = abs(num)
    digits = []
    while num > 0:
        num, remainder = divmod(num, base)
        digits.append(DIGITS[remainder])
    return sign + "".join(reversed(digits))


def string_to_integer(text: str, base: int) -> int:
    """Parse ``text`` as an integer in ``base``; digits must be 0-9 or upper-case A-Z."""
    _check_base(base)
    negative = text.startswith("-")
    body = text[1:] if negative else text
    if not body:
        raise ValueError(f"no digits in {text!r}")
    result = 0
    for ch in body:
        if ch not in DIGITS:
            raise ValueError(f"invalid digit {ch!r}")
        digit = DIGITS.index(ch)
        if digit >= base:
            raise ValueError(f"digit out of range {ch!r} for base {base}")
        result = result * base + digit
    return -result if negative else result


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="codes", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    binary = commands.add_parser("binary", help="list all n-bit binary codes")
    binary.add_argument("n_bits", type=int)

    gray = commands.add_parser("gray", help="list the n-bit Gray code")
    gray.add_argument("n_bits", type=int)

    to_string = commands.add_parser("to-string", help="format an integer in a base")
    to_string.add_argument("num", type=int)
    to_string.add_argument("base", type=int)

    to_int = commands.add_parser("to-int", help="parse a string in a base")
    to_int.add_argument("text")
    to_int.add_argument("base", type=int)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "binary":
            for bits, value in binary_codes(args.n_bits):
                print(f"{bits} → {value}")
        elif args.command == "gray":
            for index, code in enumerate(gray_codes(args.n_bits)):
                print(f"{code}  -> {index}")
        elif args.command == "to-string":
            print(integer_to_string(args.num, args.base))
        else:
            print(string_to_integer(args.text, args.base))
    except ValueError as exc:
        print(exc, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())