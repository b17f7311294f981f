"""
Console Line Sink.

Writes emitted lines to the console, one per line.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO


class ConsoleLineSink:
    """Simple console-based line sink."""

    def __init__(self, stream: Optional[TextIO] = None) -> None:
        """
        Initialize console sink.

        Args:
            stream: Target stream. Resolved at emit time when None so that
                redirected stdout (e.g. under pytest's capsys) is honored.
        """
        self._stream = stream

    def emit(self, line: str) -> None:
        """Write one line to the stream."""
        print(line, file=self._stream or sys.stdout)
