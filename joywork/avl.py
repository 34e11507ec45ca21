"""Self-balancing AVL search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    element: Any
    left: _Node | None = None
    right: _Node | None = None
    height: int = 0


def _height(node: _Node | None) -> int:
    return -1 if node is None else node.height


def _update(node: _Node) -> None:
    node.height = max(_height(node.left), _height(node.right)) + 1


def _rotate_with_left(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    _update(node)
    _update(pivot)
    return pivot


def _rotate_with_right(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    _update(node)
    _update(pivot)
    return pivot


def _double_with_left(node: _Node) -> _Node:
    assert node.left is not None
    node.left = _rotate_with_right(node.left)
    return _rotate_with_left(node)


def _double_with_right(node: _Node) -> _Node:
    assert node.right is not None
    node.right = _rotate_with_left(node.right)
    return _rotate_with_right(node)


def _insert(node: _Node | None, element: Any) -> _Node:
    if node is None:
        return _Node(element)
    if node.element < element:
        node.right = _insert(node.right, element)
        if _height(node.right) - _height(node.left) > 1:
            if element < node.right.element:
                node = _double_with_right(node)
            else:
                node = _rotate_with_right(node)
    elif element < node.element:
        node.left = _insert(node.left, element)
        if _height(node.left) - _height(node.right) > 1:
            if element < node.left.element:
                node = _rotate_with_left(node)
            else:
                node = _double_with_left(node)
    _update(node)
    return node


def _clone(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    return _Node(node.element, _clone(node.left), _clone(node.right), node.height)


def _max_diff(node: _Node | None) -> int:
    if node is None:
        return 0
    own = abs(_height(node.left) - _height(node.right))
    return max(own, _max_diff(node.left), _max_diff(node.right))


def _inorder(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _inorder(node.left)
        yield node.element
        yield from _inorder(node.right)


def _preorder(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield node.element
        yield from _preorder(node.left)
        yield from _preorder(node.right)


def _postorder(node: _Node | None) -> Iterator[Any]:
    if node is not None:
        yield from _postorder(node.left)
        yield from _postorder(node.right)
        yield node.element


class AVLTree:
    """Search tree whose subtree heights differ by at most one at every node."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for element in elements:
            self.insert(element)

    def insert(self, element: Any) -> None:
        """Insert ``element`` and rebalance; duplicates are ignored."""
        self._root = _insert(self._root, element)

    def height(self) -> int:
        """Height of the tree; an empty tree has height -1."""
        return _height(self._root)

    def max_depth_diff(self) -> int:
        """Largest difference between sibling subtree heights anywhere in the tree."""
        return _max_diff(self._root)

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None

    def copy(self) -> AVLTree:
        """Return a deep structural copy."""
        duplicate = AVLTree()
        duplicate._root = _clone(self._root)
        return duplicate

    def inorder(self) -> Iterator[Any]:
        return _inorder(self._root)

    def preorder(self) -> Iterator[Any]:
        return _preorder(self._root)

    def postorder(self) -> Iterator[Any]:
        return _postorder(self._root)

    def format_tree(self) -> str:
        """Render height information and the three traversals."""
        lines = [
            f"Tree Deep: {self.height()}, Max Deep Diff: {self.max_depth_diff()}",
            "PreOrder =================",
        ]
        lines.extend(str(item) for item in self.preorder())
        lines.append("InOrder ==================")
        lines.extend(str(item) for item in self.inorder())
        lines.append("PostOrder ================")
        lines.extend(str(item) for item in self.postorder())
        return "\n".join(lines) + "\n"