"""Binary search trees: node-level helpers and a tree class built on them.

Values less than or equal to a node go into its left subtree and greater
values go into its right subtree, so duplicates are kept on the left.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """A tree node holding a value and links to its two children."""

    value: Any
    left: Node | None = None
    right: Node | None = None


def _insert(root: Node | None, value: Any, goes_left) -> Node:
    node = Node(value)
    if root is None:
        return node
    current = root
    while True:
        if goes_left(value, current.value):
            if current.left is None:
                current.left = node
                return root
            current = current.left
        else:
            if current.right is None:
                current.right = node
                return root
            current = current.right


def insert_node(root: Node | None, value: Any) -> Node:
    """Insert a value into the tree under root and return the (new) root."""
    return _insert(root, value, lambda new, existing: new <= existing)


def insert_mirrored(root: Node | None, value: Any) -> Node:
    """Insert with the ordering reversed: greater values go to the left.

    The result is not a binary search tree once it has children; it is
    useful for exercising is_binary_search_tree.
    """
    return _insert(root, value, lambda new, existing: new > existing)


def height(root: Node | None) -> int:
    """Return the number of edges on the longest root-to-leaf path; -1 if empty."""
    if root is None:
        return -1
    return max(height(root.left), height(root.right)) + 1


def is_binary_search_tree(root: Node | None) -> bool:
    """Check the ordering between every node and its immediate children.

    A left child must not exceed its parent and a right child must be
    greater than its parent.
    """
    if root is None:
        return True
    if root.left is not None and root.left.value > root.value:
        return False
    if root.right is not None and root.right.value <= root.value:
        return False
    return is_binary_search_tree(root.left) and is_binary_search_tree(root.right)


def inorder(root: Node | None) -> Iterator[Any]:
    """Yield values left subtree first, then the node, then the right subtree."""
    if root is None:
        return
    yield from inorder(root.left)
    yield root.value
    yield from inorder(root.right)


def preorder(root: Node | None) -> Iterator[Any]:
    """Yield each node's value before the values of its subtrees."""
    if root is None:
        return
    yield root.value
    yield from preorder(root.left)
    yield from preorder(root.right)


def postorder(root: Node | None) -> Iterator[Any]:
    """Yield each node's value after the values of its subtrees."""
    if root is None:
        return
    yield from postorder(root.left)
    yield from postorder(root.right)
    yield root.value


def level_order(root: Node | None) -> Iterator[Any]:
    """Yield values breadth first, left to right within each level."""
    if root is None:
        return
    pending: deque[Node] = deque([root])
    while pending:
        current = pending.popleft()
        yield current.value
        if current.left is not None:
            pending.append(current.left)
        if current.right is not None:
            pending.append(current.right)


def _contains(root: Node | None, value: Any) -> bool:
    current = root
    while current is not None:
        if value == current.value:
            return True
        current = current.left if value <= current.value else current.right
    return False


def _detach_max(root: Node) -> tuple[Node | None, Any]:
    """Remove the rightmost node of a subtree; return the new subtree and its value."""
    if root.right is None:
        return root.left, root.value
    root.right, value = _detach_max(root.right)
    return root, value


def _delete(root: Node | None, value: Any) -> tuple[Node | None, bool]:
    if root is None:
        return None, False
    if value == root.value:
        if root.left is None:
            return root.right, True
        if root.right is None:
            return root.left, True
        root.left, root.value = _detach_max(root.left)
        return root, True
    if value < root.value:
        root.left, removed = _delete(root.left, value)
    else:
        root.right, removed = _delete(root.right, value)
    return root, removed


class BinarySearchTree:
    """A binary search tree that keeps duplicate values."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self.root: Node | None = None
        self._size = 0
        for value in values:
            self.insert(value)

    def insert(self, value: Any) -> None:
        """Add a value to the tree."""
        self.root = insert_node(self.root, value)
        self._size += 1

    def __contains__(self, value: Any) -> bool:
        return _contains(self.root, value)

    def delete(self, value: Any) -> None:
        """Remove one occurrence of a value; do nothing if it is absent.

        A node with two children takes the largest value of its left subtree.
        """
        self.root, removed = _delete(self.root, value)
        if removed:
            self._size -= 1

    def minimum(self) -> Any:
        """Return the smallest value."""
        if self.root is None:
            raise ValueError("tree is empty")
        current = self.root
        while current.left is not None:
            current = current.left
        return current.value

    def maximum(self) -> Any:
        """Return the largest value."""
        if self.root is None:
            raise ValueError("tree is empty")
        current = self.root
        while current.right is not None:
            current = current.right
        return current.value

    def height(self) -> int:
        """Return the tree's height; -1 for an empty tree."""
        return height(self.root)

    def is_balanced(self) -> bool:
        """Return True if the root's subtrees differ in height by at most one."""
        if self.root is None:
            return True
        return abs(height(self.root.left) - height(self.root.right)) <= 1

    def inorder(self) -> list[Any]:
        return list(inorder(self.root))

    def preorder(self) -> list[Any]:
        return list(preorder(self.root))

    def postorder(self) -> list[Any]:
        return list(postorder(self.root))

    def level_order(self) -> list[Any]:
        return list(level_order(self.root))

    def __iter__(self) -> Iterator[Any]:
        """Iterate over the values in ascending order."""
        return inorder(self.root)

    def __len__(self) -> int:
        return self._size