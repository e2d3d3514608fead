"""Searching in sequences and the largest contiguous sum."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Any


def max_subarray_sum(values: Iterable[int]) -> int:
    """Return the largest sum of a contiguous run of ``values``.

    The empty run counts, so the result is never below zero.
    """
    best = 0
    running = 0
    for value in values:
        running += value
        best = max(best, running)
        running = max(running, 0)
    return best


def linear_search(values: Iterable[Any], target: Any) -> int | None:
    """Return the index of the first item equal to ``target``, or None."""
    for index, value in enumerate(values):
        if value == target:
            return index
    return None


def binary_search(values: Sequence[Any], target: Any) -> int | None:
    """Return an index of ``target`` in sorted ``values``, or None."""
    left, right = 0, len(values) - 1
    while left <= right:
        middle = (left + right) // 2
        item = values[middle]
        if target < item:
            right = middle - 1
        elif target == item:
            return middle
        else:
            left = middle + 1
    return None