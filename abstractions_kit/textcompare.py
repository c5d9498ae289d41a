"""Case-insensitive string comparison and title matching."""

from __future__ import annotations

import string

_UPPER_TO_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)
_KEPT = frozenset(string.ascii_lowercase + string.digits + " \t\n\r\v\f")
_IGNORED_PREFIXES = ("a ", "an ", "the ")


def compare_ignoring_case(s1: str, s2: str) -> bool:
    """Return True when the strings match, ignoring the case of ASCII letters."""
    return s1.translate(_UPPER_TO_LOWER) == s2.translate(_UPPER_TO_LOWER)


def normalize_title(title: str) -> str:
    """Lower-case a title, drop punctuation and strip a leading "a", "an" or "the".

    The articles are checked in that order, each once, so stacked articles
    such as "an the" are both removed.
    """
    cleaned = "".join(ch for ch in title.translate(_UPPER_TO_LOWER) if ch in _KEPT)
    for prefix in _IGNORED_PREFIXES:
        if cleaned.startswith(prefix):
            cleaned = cleaned[len(prefix):]
    return cleaned


def same_title(title1: str, title2: str) -> bool:
    """Return True when two titles are equal after normalisation."""
    return normalize_title(title1) == normalize_title(title2)