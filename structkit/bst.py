"""Binary search tree that keeps duplicates on the right-hand side."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable

_ORDERS = {1: "preorder", 2: "inorder", 3: "postorder"}


@dataclass(eq=False)
class _Node:
    data: Any
    left: _Node | None = None
    right: _Node | None = None


class BST:
    """Unbalanced binary search tree; equal values are stored to the right."""

    def __init__(self, items: Iterable = ()):
        self._root: _Node | None = None
        for item in items:
            self.insert(item)

    def insert(self, data: Any) -> None:
        """Add ``data``; an equal value goes into the right subtree."""
        if self._root is None:
            self._root = _Node(data)
            return
        node = self._root
        while True:
            if data < node.data:
                if node.left is None:
                    node.left = _Node(data)
                    return
                node = node.left
            else:
                if node.right is None:
                    node.right = _Node(data)
                    return
                node = node.right

    def __contains__(self, data: Any) -> bool:
        node = self._root
        while node is not None:
            if data == node.data:
                return True
            node = node.left if data < node.data else node.right
        return False

    def count(self, data: Any) -> int:
        """How many times ``data`` occurs on its search path."""
        total = 0
        node = self._root
        while node is not None:
            if data == node.data:
                total += 1
            node = node.left if data < node.data else node.right
        return total

    def remove(self, data: Any) -> bool:
        """Remove one occurrence of ``data``; return whether it was found."""
        parent: _Node | None = None
        node = self._root
        while node is not None and node.data != data:
            parent = node
            node = node.left if data < node.data else node.right
        if node is None:
            return False

        if node.left is not None and node.right is not None:
            # Replace with the largest value of the left subtree.
            if node.left.right is None:
                node.data = node.left.data
                node.left = node.left.left
            else:
                father = node.left
                child = father.right
                while child.right is not None:
                    father, child = child, child.right
                node.data = child.data
                father.right = child.left
            return True

        child = node.left if node.left is not None else node.right
        if parent is None:
            self._root = child
        elif data < parent.data:
            parent.left = child
        else:
            parent.right = child
        return True

    def preorder(self) -> list:
        """Values in root, left, right order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.right is not None:
                stack.append(node.right)
            if node.left is not None:
                stack.append(node.left)
        return result

    def inorder(self) -> list:
        """Values in ascending order."""
        result = []
        stack: list[_Node] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            result.append(node.data)
            node = node.right
        return result

    def postorder(self) -> list:
        """Values in left, right, root order."""
        result = []
        stack = [self._root] if self._root is not None else []
        while stack:
            node = stack.pop()
            result.append(node.data)
            if node.left is not None:
                stack.append(node.left)
            if node.right is not None:
                stack.append(node.right)
        result.reverse()
        return result

    def visit(self, order: int) -> str:
        """Traversal 1 (pre), 2 (in) or 3 (post) rendered as ``a->b->``."""
        try:
            name = _ORDERS[order]
        except KeyError:
            raise ValueError("Invalid option") from None
        return "".join(f"{value}->" for value in getattr(self, name)())

    def height(self) -> int:
        """Number of levels; an empty tree has height 0."""
        levels = 0
        layer = [self._root] if self._root is not None else []
        while layer:
            levels += 1
            layer = [c for n in layer for c in (n.left, n.right) if c is not None]
        return levels

    def ancestors(self, data: Any) -> list:
        """Values on the path from the root down to ``data``, farthest first."""
        path = []
        node = self._root
        while node is not None and data != node.data:
            path.append(node.data)
            node = node.left if data < node.data else node.right
        return path

    def level_of(self, data: Any) -> int | None:
        """The tree height minus the depth of ``data``, or ``None`` if absent."""
        depth = 0
        node = self._root
        while node is not None:
            if data == node.data:
                return self.height() - depth
            node = node.left if data < node.data else node.right
            depth += 1
        return None

    def render(self) -> str:
        """Sideways drawing: right subtree on top, two spaces per level."""
        if self._root is None:
            return "\nThe BST is empty\n\n"
        lines = []
        stack: list[tuple[_Node, int]] = []
        node, level = self._root, 0
        while stack or node is not None:
            while node is not None:
                stack.append((node, level))
                node, level = node.right, level + 1
            node, level = stack.pop()
            lines.append("  " * level + f"{node.data}\n")
            node, level = node.left, level + 1
        return "\n" + "".join(lines) + "\n"

    def is_empty(self) -> bool:
        return self._root is None

    def __repr__(self) -> str:
        return f"BST({self.inorder()!r})"