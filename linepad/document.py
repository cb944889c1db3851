"""A document made of numbered lines of text."""

from __future__ import annotations

import os
from collections.abc import Iterator

__all__ = ["Document"]


class Document:
    """An ordered collection of text lines addressed by 1-based line numbers."""

    def __init__(self) -> None:
        self._lines: list[str] = []

    def __len__(self) -> int:
        return len(self._lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self._lines)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._lines!r})"

    def _check_position(self, position: int, upper: int) -> None:
        if not 1 <= position <= upper:
            raise IndexError(f"line {position} is out of range 1..{upper}")

    def insert_line(self, text: str, position: int) -> None:
        """Insert ``text`` so that it becomes line ``position``.

        The line previously at ``position`` and all after it move down by one.
        ``position`` may be one past the last line to append.
        """
        self._check_position(position, len(self._lines) + 1)
        self._lines.insert(position - 1, text)

    def delete_line(self, position: int) -> None:
        """Remove the line at ``position``."""
        self._check_position(position, len(self._lines))
        del self._lines[position - 1]

    def edit_line(self, position: int, new_text: str) -> None:
        """Replace the text of the line at ``position``."""
        self._check_position(position, len(self._lines))
        self._lines[position - 1] = new_text

    def numbered_lines(self) -> Iterator[tuple[int, str]]:
        """Yield ``(line_number, text)`` for every line, starting at 1."""
        return enumerate(self._lines, start=1)

    def search(self, word: str) -> list[tuple[int, str]]:
        """Return ``(line_number, text)`` for every line containing ``word``."""
        return [(number, text) for number, text in self.numbered_lines() if word in text]

    def save(self, filename: str | os.PathLike[str]) -> None:
        """Write every line to ``filename``, each followed by a space and a newline."""
        with open(filename, "w", encoding="utf-8", newline="\n") as stream:
            for text in self._lines:
                stream.write(f"{text} \n")

    def load(self, filename: str | os.PathLike[str]) -> int:
        """Insert the lines of ``filename`` at the top of the document.

        The file's lines become lines 1, 2, 3, ... in file order and any
        existing lines follow them. Returns the number of lines read.
        Raises ``OSError`` (such as ``FileNotFoundError``) if the file cannot be opened.
        """
        with open(filename, encoding="utf-8", newline="\n") as stream:
            loaded = [raw[:-1] if raw.endswith("\n") else raw for raw in stream]
        self._lines[0:0] = loaded
        return len(loaded)