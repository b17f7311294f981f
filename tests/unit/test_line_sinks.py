"""
Unit Tests for Line Sinks.

Test Aspects Covered:
    ✅ Business Logic: Lines written in order
"""

from __future__ import annotations

import io

import pytest

from rail_bridge.adapters.console_sink import ConsoleLineSink
from rail_bridge.adapters.memory_sink import InMemoryLineSink
from rail_bridge.interfaces.line_sink import LineSinkProtocol


class TestConsoleLineSink:
    """Test cases for ConsoleLineSink."""

    def test_prints_to_stdout(self, capsys: pytest.CaptureFixture) -> None:
        sink = ConsoleLineSink()

        sink.emit("first")
        sink.emit("second")

        assert capsys.readouterr().out == "first\nsecond\n"

    def test_writes_to_given_stream(self) -> None:
        stream = io.StringIO()

        ConsoleLineSink(stream=stream).emit("hello")

        assert stream.getvalue() == "hello\n"


class TestInMemoryLineSink:
    """Test cases for InMemoryLineSink."""

    def test_collects_in_order(self) -> None:
        sink = InMemoryLineSink()

        sink.emit("a")
        sink.emit("b")

        assert sink.lines == ["a", "b"]

    def test_lines_is_a_copy(self) -> None:
        sink = InMemoryLineSink()
        sink.emit("a")

        sink.lines.append("tampered")

        assert sink.lines == ["a"]

    def test_clear(self) -> None:
        sink = InMemoryLineSink()
        sink.emit("a")

        sink.clear()

        assert sink.lines == []

    @pytest.mark.parametrize("sink", [ConsoleLineSink(), InMemoryLineSink()])
    def test_satisfies_protocol(self, sink) -> None:
        assert isinstance(sink, LineSinkProtocol)
