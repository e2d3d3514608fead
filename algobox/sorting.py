"""Classic sorting algorithms; each returns a new ascending list."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by repeatedly swapping adjacent items that are out of order."""
    items = list(values)
    for end in range(len(items) - 1, 0, -1):
        for position in range(end):
            if items[position] > items[position + 1]:
                items[position], items[position + 1] = items[position + 1], items[position]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Sort by sinking each new item back past larger ones."""
    items: list[Any] = []
    for value in values:
        items.append(value)
        position = len(items) - 1
        while position > 0 and items[position - 1] > items[position]:
            items[position - 1], items[position] = items[position], items[position - 1]
            position -= 1
    return items


def _partition(items: list[Any], low: int, high: int) -> int:
    pivot = items[low]
    left, right = low, high + 1
    while True:
        left += 1
        while left <= high and items[left] < pivot:
            left += 1
        right -= 1
        while pivot < items[right]:
            right -= 1
        if left >= right:
            break
        items[left], items[right] = items[right], items[left]
    items[low], items[right] = items[right], pivot
    return right


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Sort with quicksort, using the first item of each range as pivot."""
    items = list(values)
    pending = [(0, len(items) - 1)]
    while pending:
        low, high = pending.pop()
        if low < high:
            split = _partition(items, low, high)
            pending.append((low, split - 1))
            pending.append((split + 1, high))
    return items


def counting_sort(values: Iterable[int]) -> list[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return []
    if min(items) < 0:
        raise ValueError("counting sort needs non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]