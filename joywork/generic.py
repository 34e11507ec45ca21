"""Small generic helpers: three-way comparison and last-element lookup."""

from __future__ import annotations

import operator
from collections.abc import Callable, Sequence
from typing import Any, TypeVar

T = TypeVar("T")


def compare(lhs: T, rhs: T, less: Callable[[T, T], bool] = operator.lt) -> int:
    """Return -1, 1 or 0 according to the ordering ``less``."""
    if less(lhs, rhs):
        return -1
    if less(rhs, lhs):
        return 1
    return 0


def top(container: Sequence[T], default_factory: Callable[[], Any] | None = None) -> Any:
    """Last element of ``container``, or ``default_factory()`` when it is empty."""
    if container:
        return container[-1]
    return default_factory() if default_factory is not None else None