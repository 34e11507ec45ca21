"""Top-down splay tree."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass(slots=True)
class _Node:
    element: Any
    left: _Node | None = None
    right: _Node | None = None


def _rotate_with_left(node: _Node) -> _Node:
    pivot = node.left
    assert pivot is not None
    node.left = pivot.right
    pivot.right = node
    return pivot


def _rotate_with_right(node: _Node) -> _Node:
    pivot = node.right
    assert pivot is not None
    node.right = pivot.left
    pivot.left = node
    return pivot


def _splay(node: _Node, element: Any) -> _Node:
    """Bring ``element`` (or the last node on its search path) to the top."""
    # header.left collects the right tree, header.right collects the left tree.
    header = _Node(None)
    left_max = right_min = header
    while True:
        if element < node.element:
            if node.left is None:
                break
            if element < node.left.element:
                node = _rotate_with_left(node)
                if node.left is None:
                    break
            right_min.left = node
            right_min = node
            node = node.left
        elif node.element < element:
            if node.right is None:
                break
            if node.right.element < element:
                node = _rotate_with_right(node)
                if node.right is None:
                    break
            left_max.right = node
            left_max = node
            node = node.right
        else:
            break
    right_min.left = node.right
    left_max.right = node.left
    node.right = header.left
    node.left = header.right
    return node


def _build(node: _Node | None, element: Any) -> _Node:
    if node is None:
        return _Node(element)
    if node.element < element:
        node.right = _build(node.right, element)
    elif element < node.element:
        node.left = _build(node.left, element)
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


class SplayTree:
    """Search tree that moves every accessed element to the root.

    Elements given to the constructor are placed by plain search-tree
    insertion, without splaying.
    """

    def __init__(self, elements: Iterable[Any] = ()) -> None:
        self._root: _Node | None = None
        for element in elements:
            self._root = _build(self._root, element)

    def insert(self, element: Any) -> None:
        """Insert ``element`` as the new root; duplicates are ignored."""
        if self._root is None:
            self._root = _Node(element)
            return
        root = _splay(self._root, element)
        if root.element < element:
            self._root = _Node(element, root, root.right)
            root.right = None
        elif element < root.element:
            self._root = _Node(element, root.left, root)
            root.left = None
        else:
            self._root = root

    def remove(self, element: Any) -> None:
        """Remove ``element`` if present; absent elements are ignored."""
        if self._root is None:
            return
        root = _splay(self._root, element)
        if root.element != element:
            self._root = root
            return
        if root.left is None:
            self._root = root.right
        elif root.right is None:
            self._root = root.left
        else:
            new_root = _splay(root.left, element)
            new_root.right = root.right
            self._root = new_root

    def contains(self, element: Any) -> bool:
        """Splay towards ``element`` and report whether it is present."""
        if self._root is None:
            return False
        self._root = _splay(self._root, element)
        return self._root.element == element

    def find_min(self) -> Any:
        """Return the smallest element after splaying it to the root."""
        if self._root is None:
            raise ValueError("empty tree has no minimum")
        node = self._root
        while node.left is not None:
            node = node.left
        self._root = _splay(self._root, node.element)
        return node.element

    def find_max(self) -> Any:
        """Return the largest element after splaying it to the root."""
        if self._root is None:
            raise ValueError("empty tree has no maximum")
        node = self._root
        while node.right is not None:
            node = node.right
        self._root = _splay(self._root, node.element)
        return node.element

    def root(self) -> Any:
        """Element currently at the root."""
        if self._root is None:
            raise ValueError("empty tree has no root")
        return self._root.element

    def is_empty(self) -> bool:
        return self._root is None

    def clear(self) -> None:
        self._root = None

    def copy(self) -> SplayTree:
        """Return a deep structural copy."""
        duplicate = SplayTree()
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
        lines = ["PreOrder ================="]
        lines.extend(str(item) for item in self.preorder())
        lines.append("InOrder ==================")
        lines.extend(str(item) for item in self.inorder())
        lines.append("PostOrder ================")
        lines.extend(str(item) for item in self.postorder())
        return "\n".join(lines) + "\n"