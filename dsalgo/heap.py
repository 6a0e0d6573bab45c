"""A binary max-heap kept in a list."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

__all__ = ["MaxHeap"]


class MaxHeap:
    """Max-heap: ``pop`` always returns the largest stored value."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items: list[Any] = []
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add a value and sift it up. O(log n)."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index:
            parent = (index - 1) // 2
            if not value > items[parent]:
                break
            items[index] = items[parent]
            items[parent] = value
            index = parent

    def pop(self) -> Any:
        """Remove and return the largest value. Raises IndexError when empty."""
        items = self._items
        if not items:
            raise IndexError("pop from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            self._sift_down()
        return top

    def _sift_down(self) -> None:
        items = self._items
        size = len(items)
        index = 0
        while True:
            child = index * 2 + 1
            if child >= size:
                break
            if child + 1 < size and items[child] < items[child + 1]:
                child += 1
            if items[index] >= items[child]:
                break
            items[index], items[child] = items[child], items[index]
            index = child

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate in storage (level) order."""
        return iter(self._items)