"""
TextBuffer: read-only buffer access consumed by the scanner.

The host editor implements the protocol; StringBuffer is an in-memory
implementation used by tests and the demo runner.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol, Tuple

from smart_input.config.constants import NEWLINE


class TextBuffer(Protocol):
    """Character and line access by absolute offset."""

    def char_at(self, offset: int) -> Optional[str]:
        """Character at *offset*, or None outside the buffer."""
        ...

    def line_bounds(self, offset: int) -> Tuple[int, int]:
        """(line_start, line_end) of the line holding *offset*; line_end excludes the newline."""
        ...


@dataclass
class StringBuffer:
    """Mutable in-memory text buffer."""

    text: str = ""

    def __len__(self) -> int:
        return len(self.text)

    def char_at(self, offset: int) -> Optional[str]:
        if 0 <= offset < len(self.text):
            return self.text[offset]
        return None

    def line_bounds(self, offset: int) -> Tuple[int, int]:
        offset = max(0, min(offset, len(self.text)))
        start = self.text.rfind(NEWLINE, 0, offset) + 1
        end = self.text.find(NEWLINE, offset)
        if end == -1:
            end = len(self.text)
        return start, end

    def insert(self, offset: int, text: str) -> int:
        """Insert *text* at *offset*; returns the offset just after it."""
        self.text = self.text[:offset] + text + self.text[offset:]
        return offset + len(text)

    def delete(self, start: int, end: int) -> None:
        self.text = self.text[:start] + self.text[end:]

    @classmethod
    def with_cursor(cls, marked: str, marker: str = "|") -> Tuple["StringBuffer", int]:
        """
        Build a buffer from text with a cursor marker, e.g. "hello 你好 |".

        Returns:
            (buffer, cursor_offset)

        Raises:
            ValueError: If the marker is missing.
        """
        cursor = marked.find(marker)
        if cursor == -1:
            raise ValueError(f"cursor marker '{marker}' not found")
        return cls(marked[:cursor] + marked[cursor + len(marker):]), cursor
