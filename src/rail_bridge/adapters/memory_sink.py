"""
In-Memory Line Sink.

Collects emitted lines in a list. Used by tests and by callers who want
the lines without printing them.
"""

from __future__ import annotations

from typing import List


class InMemoryLineSink:
    """Line sink that stores lines in memory."""

    def __init__(self) -> None:
        self._lines: List[str] = []

    def emit(self, line: str) -> None:
        """Store one line."""
        self._lines.append(line)

    @property
    def lines(self) -> List[str]:
        """Copy of all lines emitted so far, in order."""
        return list(self._lines)

    def clear(self) -> None:
        """Drop all stored lines."""
        self._lines.clear()
