"""
Interfaces Layer - Abstract Protocols for Both Sides of the Bridge.

Following the Dependency Inversion Principle, trains and leads depend
on these abstractions, never on each other's concrete classes.

Protocols:
    - TrainProtocol: The abstraction (holds a lead, delegates manage())
    - LeadProtocol: The implementation (performs try_manage())
    - LineSinkProtocol: Output destination for emitted lines

Design Principles:
    - Use typing.Protocol (not ABC) for Pythonic interfaces
    - Interface Segregation: Small, focused interfaces
"""

from rail_bridge.interfaces.lead import LeadProtocol
from rail_bridge.interfaces.line_sink import LineSinkProtocol
from rail_bridge.interfaces.train import TrainProtocol

__all__ = ["LeadProtocol", "LineSinkProtocol", "TrainProtocol"]
