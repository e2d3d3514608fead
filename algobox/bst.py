"""An unbalanced binary search tree of comparable values."""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    value: Any
    left: _Node | None = None
    right: _Node | None = None


class BinarySearchTree:
    """Binary search tree; equal values are placed in the left subtree."""

    def __init__(self, values=()) -> None:
        self._root: _Node | None = None
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add ``value`` to the tree."""
        node = _Node(value)
        if self._root is None:
            self._root = node
            return
        current = self._root
        while True:
            if value > current.value:
                if current.right is None:
                    current.right = node
                    return
                current = current.right
            else:
                if current.left is None:
                    current.left = node
                    return
                current = current.left

    def __contains__(self, value: Any) -> bool:
        current = self._root
        while current is not None:
            if current.value == value:
                return True
            current = current.left if current.value > value else current.right
        return False

    def _extreme(self, side: str) -> Any:
        if self._root is None:
            raise ValueError("tree is empty")
        current = self._root
        while getattr(current, side) is not None:
            current = getattr(current, side)
        return current.value

    def minimum(self) -> Any:
        """Return the smallest value; raise ValueError if the tree is empty."""
        return self._extreme("left")

    def maximum(self) -> Any:
        """Return the largest value; raise ValueError if the tree is empty."""
        return self._extreme("right")

    def height(self) -> int:
        """Return the height of the root: -1 when empty, 0 for a single node."""
        if self._root is None:
            return -1
        level = deque([self._root])
        height = -1
        while level:
            height += 1
            for _ in range(len(level)):
                node = level.popleft()
                level.extend(child for child in (node.left, node.right) if child)
        return height

    def inorder(self) -> list[Any]:
        """Return the values in left, node, right order."""
        result = []
        stack: list[_Node] = []
        current = self._root
        while stack or current is not None:
            while current is not None:
                stack.append(current)
                current = current.left
            current = stack.pop()
            result.append(current.value)
            current = current.right
        return result

    def preorder(self) -> list[Any]:
        """Return the values in node, left, right order."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.right:
                stack.append(node.right)
            if node.left:
                stack.append(node.left)
        return result

    def postorder(self) -> list[Any]:
        """Return the values in left, right, node order."""
        result = []
        stack = [self._root] if self._root else []
        while stack:
            node = stack.pop()
            result.append(node.value)
            if node.left:
                stack.append(node.left)
            if node.right:
                stack.append(node.right)
        result.reverse()
        return result