"""Minimal type descriptions: named, typed members at byte offsets."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from enum import Enum


class PrimitiveType(Enum):
    INT = "int"
    FLOAT = "float"
    STRING = "string"


@dataclass(frozen=True)
class MemberVariable:
    """A member of a described type."""

    name: str
    primitive_type: PrimitiveType
    offset: int


class DataType:
    """An ordered collection of member variables."""

    def __init__(self, members: Iterable[MemberVariable]) -> None:
        self._members = tuple(members)

    def member(self, name: str) -> MemberVariable:
        """Return the member called ``name``."""
        for candidate in self._members:
            if candidate.name == name:
                return candidate
        raise KeyError(name)

    def __iter__(self) -> Iterator[MemberVariable]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)