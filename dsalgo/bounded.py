"""Fixed-capacity ring queues and stack, with an interactive text menu."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Iterable, Iterator
from typing import Any, TextIO, Union

__all__ = [
    "DEFAULT_CAPACITY",
    "ContainerFullError",
    "ContainerEmptyError",
    "RingQueue",
    "FullRingQueue",
    "BoundedStack",
    "run_menu",
    "main",
]

DEFAULT_CAPACITY = 10
_BORDER = "------------"


class ContainerFullError(OverflowError):
    """Raised when adding to a container that has no room left."""


class ContainerEmptyError(IndexError):
    """Raised when removing from an empty container."""


class RingQueue:
    """Circular queue that keeps one slot free, so it holds ``capacity - 1`` values."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 2:
            raise ValueError("a ring queue needs a capacity of at least 2")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._tail = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        following = (self._tail + 1) % self.capacity
        if following == self._head:
            raise ContainerFullError("queue is full")
        self._tail = following
        self._slots[following] = value

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if self._head == self._tail:
            raise ContainerEmptyError("queue is already empty")
        self._head = (self._head + 1) % self.capacity
        value, self._slots[self._head] = self._slots[self._head], None
        return value

    def __len__(self) -> int:
        return (self._tail - self._head) % self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        for offset in range(1, len(self) + 1):
            yield self._slots[(self._head + offset) % self.capacity]


class FullRingQueue:
    """Circular queue that uses every slot, telling full from empty with a flag."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("a ring queue needs a capacity of at least 1")
        self._slots: list[Any] = [None] * capacity
        self._head = 0
        self._tail = 0
        self._full = False

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Add ``value`` at the back."""
        if self._full:
            raise ContainerFullError("queue is full")
        self._tail = (self._tail + 1) % self.capacity
        self._slots[self._tail] = value
        self._full = self._tail == self._head

    def dequeue(self) -> Any:
        """Remove and return the front value."""
        if not self:
            raise ContainerEmptyError("queue is already empty")
        self._head = (self._head + 1) % self.capacity
        value, self._slots[self._head] = self._slots[self._head], None
        self._full = False
        return value

    def __len__(self) -> int:
        if self._full:
            return self.capacity
        return (self._tail - self._head) % self.capacity

    def __iter__(self) -> Iterator[Any]:
        """Iterate from front to back."""
        for offset in range(1, len(self) + 1):
            yield self._slots[(self._head + offset) % self.capacity]


class BoundedStack:
    """Stack that refuses to grow past its capacity."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity < 1:
            raise ValueError("a stack needs a capacity of at least 1")
        self.capacity = capacity
        self._items: list[Any] = []

    def push(self, value: Any) -> None:
        """Put ``value`` on top."""
        if len(self._items) >= self.capacity:
            raise ContainerFullError("stack is full")
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top value."""
        if not self._items:
            raise ContainerEmptyError("stack is already empty")
        return self._items.pop()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        """Iterate from top to bottom."""
        return reversed(self._items)


Bounded = Union[RingQueue, FullRingQueue, BoundedStack]


def _render(container: Bounded) -> str:
    if not len(container):
        return f"{_BORDER}\nEmpty\n{_BORDER}\n"
    separator = "\n" if isinstance(container, BoundedStack) else " "
    body = separator.join(str(value) for value in container)
    return f"{_BORDER}\n{body}\n{_BORDER}\n"


def run_menu(container: Bounded, lines: Iterable[str], out: TextIO) -> None:
    """Drive ``container`` from whitespace-separated commands read from ``lines``.

    Command 1 adds the integer that follows it, 2 removes a value, 3 quits.
    The menu also stops when the input runs out.
    """
    if isinstance(container, BoundedStack):
        names = ("Push", "Pop")
        add, remove = container.push, container.pop
    else:
        names = ("EnQueue", "DeQueue")
        add, remove = container.enqueue, container.dequeue

    out.write(f"1. {names[0]}\n2. {names[1]}\n3. Quit\n")
    tokens = (token for line in lines for token in line.split())

    while True:
        out.write(_render(container))
        out.write("> ")
        command = next(tokens, None)
        if command is None:
            out.write("\n")
            return
        if command == "1":
            out.write("\tvalue : ")
            raw = next(tokens, None)
            if raw is None:
                out.write("\n")
                return
            try:
                add(int(raw))
            except ValueError:
                out.write(f"Invalid value: {raw}\n")
            except ContainerFullError as error:
                out.write(f"{error}\n")
        elif command == "2":
            try:
                remove()
            except ContainerEmptyError as error:
                out.write(f"{error}\n")
        elif command == "3":
            return
        else:
            out.write("Invalid command.\n")


_KINDS = {
    "queue": RingQueue,
    "full-queue": FullRingQueue,
    "stack": BoundedStack,
}


def main(argv: list[str] | None = None) -> int:
    """Run the interactive menu on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="dsalgo-bounded",
        description="Play with a fixed-capacity queue or stack.",
    )
    parser.add_argument("kind", nargs="?", choices=sorted(_KINDS), default="queue")
    parser.add_argument("--capacity", type=int, default=DEFAULT_CAPACITY)
    args = parser.parse_args(argv)
    try:
        container = _KINDS[args.kind](args.capacity)
    except ValueError as error:
        parser.error(str(error))
    run_menu(container, sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())