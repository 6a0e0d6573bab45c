"""Binary trees: traversals, searches and a binary search tree."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

__all__ = ["Node", "BinaryTree", "BinarySearchTree"]


@dataclass(eq=False)
class Node:
    """A tree node holding a value and two optional children."""

    value: Any = 0
    left: Optional["Node"] = None
    right: Optional["Node"] = None


class BinaryTree:
    """A binary tree that starts with a single root node."""

    def __init__(self, root_value: Any = 0) -> None:
        self.root: Node | None = Node(root_value)

    def insert_left(self, parent: Node, value: Any) -> Node:
        """Attach a new left child to ``parent``, replacing any existing one."""
        parent.left = Node(value)
        return parent.left

    def insert_right(self, parent: Node, value: Any) -> Node:
        """Attach a new right child to ``parent``, replacing any existing one."""
        parent.right = Node(value)
        return parent.right

    def breadth_first(self) -> Iterator[Any]:
        """Yield values level by level from the root."""
        queue = deque([self.root] if self.root is not None else [])
        while queue:
            node = queue.popleft()
            yield node.value
            if node.left is not None:
                queue.append(node.left)
            if node.right is not None:
                queue.append(node.right)

    def depth_first(self) -> Iterator[Any]:
        """Yield values depth first from the root, using an explicit stack."""
        stack = [self.root] if self.root is not None else []
        while stack:
            node = stack.pop()
            yield node.value
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)

    def pre_order(self, node: Node | None) -> Iterator[Any]:
        """Yield node, then left subtree, then right subtree."""
        if node is None:
            return
        yield node.value
        yield from self.pre_order(node.left)
        yield from self.pre_order(node.right)

    def in_order(self, node: Node | None) -> Iterator[Any]:
        """Yield left subtree, then node, then right subtree."""
        if node is None:
            return
        yield from self.in_order(node.left)
        yield node.value
        yield from self.in_order(node.right)

    def post_order(self, node: Node | None) -> Iterator[Any]:
        """Yield left subtree, then right subtree, then node."""
        if node is None:
            return
        yield from self.post_order(node.left)
        yield from self.post_order(node.right)
        yield node.value

    def sum(self, node: Node | None) -> Any:
        """Return the sum of all values under ``node``."""
        if node is None:
            return 0
        return self.sum(node.left) + node.value + self.sum(node.right)

    def search(self, node: Node | None, value: Any) -> bool:
        """Tell whether ``value`` occurs anywhere under ``node``."""
        if node is None:
            return False
        return node.value == value or self.search(node.left, value) or self.search(node.right, value)

    def depth(self, node: Node | None) -> int:
        """Return the number of levels under ``node``; 0 for an empty subtree."""
        if node is None:
            return 0
        return 1 + max(self.depth(node.left), self.depth(node.right))


class BinarySearchTree(BinaryTree):
    """Binary search tree of distinct values; smaller values go left."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> Node | None:
        """Insert ``value``; return the new node, or None if it was already present."""
        if self.root is None:
            self.root = Node(value)
            return self.root
        node = self.root
        while True:
            if value < node.value:
                if node.left is None:
                    node.left = Node(value)
                    return node.left
                node = node.left
            elif value > node.value:
                if node.right is None:
                    node.right = Node(value)
                    return node.right
                node = node.right
            else:
                return None

    def find(self, value: Any) -> Node | None:
        """Return the node holding ``value``, or None."""
        node = self.root
        while node is not None and node.value != value:
            node = node.left if value < node.value else node.right
        return node

    def erase(self, value: Any) -> None:
        """Remove ``value``. Raises KeyError if it is not in the tree."""
        parent: Node | None = None
        node = self.root
        while node is not None and node.value != value:
            parent = node
            node = node.left if value < node.value else node.right
        if node is None:
            raise KeyError(value)

        if node.left is None:
            self._replace_child(parent, node, node.right)
            return

        # Replace the value with its in-order predecessor, then unlink that node.
        pred_parent = node
        pred = node.left
        while pred.right is not None:
            pred_parent = pred
            pred = pred.right
        if pred_parent is node:
            node.left = pred.left
        else:
            pred_parent.right = pred.left
        node.value = pred.value

    def _replace_child(self, parent: Node | None, old: Node, new: Node | None) -> None:
        if parent is None:
            self.root = new
        elif parent.left is old:
            parent.left = new
        else:
            parent.right = new

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None