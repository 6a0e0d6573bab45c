"""Linked stack and queue sharing one container interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["EmptyContainerError", "LinkedContainer", "LinkedStack", "LinkedQueue"]


class EmptyContainerError(IndexError):
    """Raised when reading or removing from an empty container."""


@dataclass(eq=False)
class _Element:
    value: Any
    next: Optional["_Element"] = None


class LinkedContainer(ABC):
    """A container of linked elements that can be copied and measured."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._size = 0
        self.clear()
        for value in values:
            self.insert(value)

    @abstractmethod
    def insert(self, value: Any) -> None:
        """Add a value."""

    @abstractmethod
    def erase(self) -> Any:
        """Remove and return the next value; raise EmptyContainerError if empty."""

    @abstractmethod
    def peek(self) -> Any:
        """Return the next value without removing it."""

    @abstractmethod
    def clear(self) -> None:
        """Remove every value."""

    @abstractmethod
    def __iter__(self) -> Iterator[Any]:
        """Iterate in removal order."""

    def _insertion_order(self) -> Iterable[Any]:
        return iter(self)

    def clone(self) -> "LinkedContainer":
        """Return an independent container of the same kind with the same values."""
        return type(self)(self._insertion_order())

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self._insertion_order())!r})"


class LinkedStack(LinkedContainer):
    """Last in, first out."""

    def insert(self, value: Any) -> None:
        """Push ``value`` on top."""
        self._top = _Element(value, self._top)
        self._size += 1

    def erase(self) -> Any:
        """Pop and return the top value."""
        if self._top is None:
            raise EmptyContainerError("erase from an empty stack")
        value = self._top.value
        self._top = self._top.next
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the top value."""
        if self._top is None:
            raise EmptyContainerError("peek at an empty stack")
        return self._top.value

    def clear(self) -> None:
        self._top: _Element | None = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        element = self._top
        while element is not None:
            yield element.value
            element = element.next

    def _insertion_order(self) -> Iterable[Any]:
        return reversed(list(self))


class LinkedQueue(LinkedContainer):
    """First in, first out."""

    def insert(self, value: Any) -> None:
        """Enqueue ``value`` at the back."""
        element = _Element(value)
        if self._last is None:
            self._first = element
        else:
            self._last.next = element
        self._last = element
        self._size += 1

    def erase(self) -> Any:
        """Dequeue and return the front value."""
        if self._first is None:
            raise EmptyContainerError("erase from an empty queue")
        value = self._first.value
        self._first = self._first.next
        if self._first is None:
            self._last = None
        self._size -= 1
        return value

    def peek(self) -> Any:
        """Return the front value."""
        if self._first is None:
            raise EmptyContainerError("peek at an empty queue")
        return self._first.value

    def clear(self) -> None:
        self._first: _Element | None = None
        self._last: _Element | None = None
        self._size = 0

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        element = self._first
        while element is not None:
            yield element.value
            element = element.next