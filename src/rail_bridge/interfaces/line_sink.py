"""
Line Sink Protocol.

Destination for the lines leads emit. Keeping it behind a protocol lets
the demo print to the console while tests collect lines in memory.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineSinkProtocol(Protocol):
    """Abstract interface for line output."""

    def emit(self, line: str) -> None:
        """Write one line of text."""
        ...
