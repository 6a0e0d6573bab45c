"""Singly and doubly linked lists of named monsters."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Optional

__all__ = ["NAME_LENGTH", "Monster", "SinglyLinkedMonsters", "DoublyLinkedMonsters"]

NAME_LENGTH = 10
"""Size of the name field, terminator included: names hold at most 9 characters."""


@dataclass
class Monster:
    """A monster with a short name and hit points."""

    name: str
    hp: int

    def __post_init__(self) -> None:
        if len(self.name) >= NAME_LENGTH:
            raise ValueError(
                f"monster name {self.name!r} is longer than {NAME_LENGTH - 1} characters"
            )

    def __str__(self) -> str:
        return f"{self.name} : {self.hp}"


@dataclass(eq=False)
class _SingleNode:
    monster: Monster
    next: Optional["_SingleNode"] = None


@dataclass(eq=False)
class _DoubleNode:
    monster: Monster
    next: Optional["_DoubleNode"] = None
    previous: Optional["_DoubleNode"] = None


class SinglyLinkedMonsters:
    """Monsters kept in a singly linked list with head and tail references."""

    def __init__(self) -> None:
        self._head: _SingleNode | None = None
        self._tail: _SingleNode | None = None

    def create(self, name: str, hp: int) -> Monster:
        """Append a new monster at the tail and return it."""
        node = _SingleNode(Monster(name, hp))
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        return node.monster

    def find(self, name: str) -> Monster | None:
        """Return the first monster called ``name``, or None."""
        return next((monster for monster in self if monster.name == name), None)

    def delete(self, name: str) -> bool:
        """Unlink the first monster called ``name``; tell whether one was found."""
        previous: _SingleNode | None = None
        node = self._head
        while node is not None and node.monster.name != name:
            previous = node
            node = node.next
        if node is None:
            return False
        if previous is None:
            self._head = node.next
        else:
            previous.next = node.next
        if node is self._tail:
            self._tail = previous
        return True

    def clear(self) -> None:
        """Remove every monster."""
        self._head = self._tail = None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Monster]:
        node = self._head
        while node is not None:
            yield node.monster
            node = node.next


class DoublyLinkedMonsters:
    """Monsters kept in a doubly linked list, walkable in both directions."""

    def __init__(self) -> None:
        self._head: _DoubleNode | None = None
        self._tail: _DoubleNode | None = None

    def create(self, name: str, hp: int) -> Monster:
        """Append a new monster at the tail and return it."""
        node = _DoubleNode(Monster(name, hp))
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
            node.previous = self._tail
        self._tail = node
        return node.monster

    def _find_node(self, name: str) -> _DoubleNode | None:
        node = self._head
        while node is not None and node.monster.name != name:
            node = node.next
        return node

    def find(self, name: str) -> Monster | None:
        """Return the first monster called ``name``, or None."""
        node = self._find_node(name)
        return None if node is None else node.monster

    def delete(self, name: str) -> bool:
        """Unlink the first monster called ``name``; tell whether one was found."""
        node = self._find_node(name)
        if node is None:
            return False
        if node.previous is not None:
            node.previous.next = node.next
        else:
            self._head = node.next
        if node.next is not None:
            node.next.previous = node.previous
        else:
            self._tail = node.previous
        return True

    def clear(self) -> None:
        """Remove every monster."""
        self._head = self._tail = None

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __iter__(self) -> Iterator[Monster]:
        node = self._head
        while node is not None:
            yield node.monster
            node = node.next

    def __reversed__(self) -> Iterator[Monster]:
        node = self._tail
        while node is not None:
            yield node.monster
            node = node.previous