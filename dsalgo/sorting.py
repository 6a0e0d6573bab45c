"""Classic comparison sorts.

Each function takes any iterable of mutually comparable values and returns
a new sorted list; the input is never modified.
"""

from __future__ import annotations

from collections.abc import Iterable
from itertools import combinations
from typing import Any

__all__ = [
    "sequential_sort",
    "selection_sort",
    "bubble_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
]


def sequential_sort(values: Iterable[Any]) -> list[Any]:
    """Compare every pair (i, j) with i < j and swap when out of order. O(n^2)."""
    items = list(values)
    for i, j in combinations(range(len(items)), 2):
        if items[i] > items[j]:
            items[i], items[j] = items[j], items[i]
    return items


def selection_sort(values: Iterable[Any]) -> list[Any]:
    """Move the smallest remaining value to the front on each pass. O(n^2)."""
    items = list(values)
    for i in range(len(items)):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        items[i], items[smallest] = items[smallest], items[i]
    return items


def bubble_sort(values: Iterable[Any]) -> list[Any]:
    """Bubble the largest value of the unsorted prefix to its end. O(n^2)."""
    items = list(values)
    size = len(items)
    for done in range(size - 1):
        for j in range(size - 1 - done):
            if items[j] > items[j + 1]:
                items[j], items[j + 1] = items[j + 1], items[j]
    return items


def insertion_sort(values: Iterable[Any]) -> list[Any]:
    """Insert each value into the sorted prefix before it. O(n^2)."""
    items = list(values)
    for i in range(1, len(items)):
        target = items[i]
        j = i - 1
        while j >= 0 and target < items[j]:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = target
    return items


def _merge(left: list[Any], right: list[Any]) -> list[Any]:
    merged: list[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] < right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def _merge_sorted(items: list[Any]) -> list[Any]:
    if len(items) <= 1:
        return items
    half = (len(items) + 1) // 2
    return _merge(_merge_sorted(items[:half]), _merge_sorted(items[half:]))


def merge_sort(values: Iterable[Any]) -> list[Any]:
    """Split in halves, sort each and merge them. O(n log n)."""
    return _merge_sorted(list(values))


def _quick(items: list[Any], left: int, right: int) -> None:
    i, j = left, right
    pivot = items[(left + right) // 2]
    while i <= j:
        while items[i] < pivot:
            i += 1
        while items[j] > pivot:
            j -= 1
        if i <= j:
            items[i], items[j] = items[j], items[i]
            i += 1
            j -= 1
    if left < j:
        _quick(items, left, j)
    if i < right:
        _quick(items, i, right)


def quick_sort(values: Iterable[Any]) -> list[Any]:
    """Partition around the middle value and sort both sides. O(n log n) on average."""
    items = list(values)
    if len(items) > 1:
        _quick(items, 0, len(items) - 1)
    return items