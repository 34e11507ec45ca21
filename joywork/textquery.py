"""Index of the lines on which each word of a text appears."""

from __future__ import annotations

from collections import defaultdict
from collections.abc import Iterable


class TextGraph:
    """Reads lines of text and records, for each word, the lines it occurs on.

    Line numbers start at 0; words are separated by whitespace.
    """

    def __init__(self, stream: Iterable[str]) -> None:
        self._lines: list[str] = []
        index: defaultdict[str, set[int]] = defaultdict(set)
        for line_no, raw in enumerate(stream):
            line = raw.removesuffix("\n")
            self._lines.append(line)
            for word in line.split():
                index[word].add(line_no)
        self._index = dict(index)

    def lines(self) -> list[str]:
        """All lines read, without their line terminators."""
        return list(self._lines)

    def line_numbers(self, word: str) -> list[int]:
        """Sorted line numbers on which ``word`` occurs; empty if it never does."""
        return sorted(self._index.get(word, ()))

    def words(self) -> list[str]:
        """Every distinct word, in sorted order."""
        return sorted(self._index)