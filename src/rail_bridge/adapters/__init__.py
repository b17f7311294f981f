"""
Adapters Package - Infrastructure Implementations.

Concrete implementations of the LineSinkProtocol. Following the
Hexagonal Architecture (Ports & Adapters) pattern.

Sinks:
    - ConsoleLineSink: Prints to stdout
    - InMemoryLineSink: Collects lines for inspection
"""

from rail_bridge.adapters.console_sink import ConsoleLineSink
from rail_bridge.adapters.memory_sink import InMemoryLineSink

__all__ = ["ConsoleLineSink", "InMemoryLineSink"]
