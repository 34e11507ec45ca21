"""Unbalanced binary search tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    element: Any
    left: _Node | None = None
    right: _Node | None = None


def _insert(node: _Node | None, element: Any) -> _Node:
    if node is None:
        return _Node(element)
    if node.element < element:
        node.right = _insert(node.right, element)
    elif element < node.element:
        node.left = _insert(node.left, element)
    return node


def _remove_min(node: _Node) -> tuple[_Node | None, Any]:
    if node.left is not None:
        node.left, element = _remove_min(node.left)
        return node, element
    return node.right, node.element


def _remove(node: _Node | None, element: Any) -> _Node | None:
    if node is None:
        return None
    if node.element < element:
        node.right = _remove(node.right, element)
    elif element < node.element:
        node.left = _remove(node.left, element)
    elif node.left is not None and node.right is not None:
        node.right, node.element = _remove_min(node.right)
    else:
        return node.left if node.left is not None else node.right
    return node


def _clone(node: _Node | None) -> _Node | None:
    if node is None:
        return None
    return _Node(node.element, _clone(node.left), _clone(node.right))


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


class BinarySearchTree:
    """Binary search tree ordered by ``<``; duplicates are ignored."""

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for element in elements:
            self.insert(element)

    def insert(self, element: Any) -> None:
        self._root = _insert(self._root, element)

    def remove(self, element: Any) -> None:
        """Remove ``element`` if present; absent elements are ignored."""
        self._root = _remove(self._root, element)

    def find_min(self) -> Any:
        if self._root is None:
            raise ValueError("empty tree has no minimum")
        node = self._root
        while node.left is not None:
            node = node.left
        return node.element

    def find_max(self) -> Any:
        if self._root is None:
            raise ValueError("empty tree has no maximum")
        node = self._root
        while node.right is not None:
            node = node.right
        return node.element

    def __contains__(self, element: Any) -> bool:
        node = self._root
        while node is not None:
            if node.element < element:
                node = node.right
            elif element < node.element:
                node = node.left
            else:
                return True
        return False

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None

    def copy(self) -> BinarySearchTree:
        """Return a deep structural copy."""
        duplicate = BinarySearchTree()
        duplicate._root = _clone(self._root)
        return duplicate

    def inorder(self) -> Iterator[Any]:
        return _inorder(self._root)

    def preorder(self) -> Iterator[Any]:
        return _preorder(self._root)

    def postorder(self) -> Iterator[Any]:
        return _postorder(self._root)

    def format_tree(self) -> str:
        """Render the three traversals, one element per line."""
        lines = ["InOrder=========="]
        lines.extend(str(item) for item in self.inorder())
        lines.append("PreOrder==========")
        lines.extend(str(item) for item in self.preorder())
        lines.append("PostOrder==========")
        lines.extend(str(item) for item in self.postorder())
        return "\n".join(lines) + "\n"