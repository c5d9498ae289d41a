"""Small numeric routines: quadratic roots, merge sort, integration and score summaries."""

from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass

SCORE_MIN = 0.0
SCORE_MAX = 10.0

# Leading decimal number as read by a stream extraction without skipping whitespace.
_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def solve_quadratic(a: float, b: float, c: float) -> tuple[float, float]:
    """Return the real roots of ``a*x**2 + b*x + c = 0``, larger root first."""
    if a == 0:
        raise ValueError("The coefficient a must be nonzero.")
    disc = b * b - 4 * a * c
    if disc < 0:
        raise ValueError("This equation has no real roots.")
    sqrt_disc = math.sqrt(disc)
    return (-b + sqrt_disc) / (2 * a), (-b - sqrt_disc) / (2 * a)


def merge(left: Sequence, right: Sequence) -> list:
    """Merge two sorted sequences into one sorted list.

    On ties the element from ``right`` is taken first.
    """
    result = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            result.append(left[i])
            i += 1
        else:
            result.append(right[j])
            j += 1
    result.extend(left[i:])
    result.extend(right[j:])
    return result


def merge_sort(values: Iterable) -> list:
    """Return a new list holding ``values`` in ascending order."""
    items = list(values)
    if len(items) <= 1:
        return items
    half = len(items) // 2
    return merge(merge_sort(items[:half]), merge_sort(items[half:]))


def integrate(
    fn: Callable[[float], float], left: float, right: float, num_slices: int
) -> float:
    """Approximate the integral of ``fn`` over ``[left, right]`` with rectangles.

    Heights are sampled half a slice before each of the ``num_slices + 1``
    grid points, starting at ``left``.
    """
    if num_slices <= 0:
        raise ValueError("num_slices must be positive")
    width = (right - left) / num_slices
    height = sum(fn(left + (i - 0.5) * width) for i in range(num_slices + 1))
    return width * height


def min_scaled_index(factor: float, values: Sequence[float]) -> int:
    """Return the index of the first value whose product with ``factor`` is smallest."""
    if not values:
        raise ValueError("values must not be empty")
    return min(range(len(values)), key=lambda i: factor * values[i])


def parse_score(text: str) -> float:
    """Read a judge's score from the start of ``text``.

    Leading whitespace is not accepted; trailing characters after the number
    are ignored. The score must lie strictly between 0 and 10.
    """
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    score = float(match.group())
    if not SCORE_MIN < score < SCORE_MAX:
        raise ValueError(f"score {score} is out of range ({SCORE_MIN:g}, {SCORE_MAX:g})")
    return score


@dataclass(frozen=True)
class ScoreSummary:
    """Statistics over a set of judges' scores."""

    count: int
    maximum: float
    minimum: float
    total: float
    average: float | None

    @property
    def has_average(self) -> bool:
        return self.average is not None


def summarize_scores(scores: Iterable[float]) -> ScoreSummary:
    """Summarise scores; the average drops the highest and lowest and needs three or more."""
    values = list(scores)
    if not values:
        raise ValueError("no scores given")
    maximum = max(values)
    minimum = min(values)
    total = sum(values)
    average = (total - minimum - maximum) / (len(values) - 2) if len(values) > 2 else None
    return ScoreSummary(
        count=len(values),
        maximum=maximum,
        minimum=minimum,
        total=total,
        average=average,
    )