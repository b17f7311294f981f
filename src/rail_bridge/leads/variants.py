"""
Lead Variants.

NorthLead and SouthLead carry their own identity; the line format is
shared through Lead.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rail_bridge.leads.base import Lead

if TYPE_CHECKING:
    from rail_bridge.interfaces.line_sink import LineSinkProtocol


class NorthLead(Lead):
    """Lead identifying itself as the north lead."""

    DEFAULT_NAME = "North Lead"

    def __init__(
        self,
        sink: Optional[LineSinkProtocol] = None,
        verb: str = "manages",
        name: Optional[str] = None,
    ) -> None:
        super().__init__(self.DEFAULT_NAME if name is None else name, verb, sink)


class SouthLead(Lead):
    """Lead identifying itself as the south lead."""

    DEFAULT_NAME = "South Lead"

    def __init__(
        self,
        sink: Optional[LineSinkProtocol] = None,
        verb: str = "manages",
        name: Optional[str] = None,
    ) -> None:
        super().__init__(self.DEFAULT_NAME if name is None else name, verb, sink)
