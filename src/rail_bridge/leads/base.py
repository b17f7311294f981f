"""
Lead - The Implementation Side of the Bridge.

A lead does the actual work when a train is managed: it combines its own
identity with the train's category label into one line, writes the line
to its sink and returns a ManageEvent describing it.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any, Optional

from rail_bridge.adapters.console_sink import ConsoleLineSink
from rail_bridge.domain.entities import ManageEvent

if TYPE_CHECKING:
    from rail_bridge.interfaces.line_sink import LineSinkProtocol

logger = logging.getLogger(__name__)


class Lead:
    """Base lead writing "<name> <verb> <category label>" lines."""

    def __init__(
        self,
        name: str,
        verb: str = "manages",
        sink: Optional[LineSinkProtocol] = None,
    ) -> None:
        """
        Initialize lead.

        Args:
            name: Identity of the lead, e.g. "North Lead"
            verb: Word placed between lead name and category label
            sink: Output destination (defaults to the console)
        """
        if not name:
            raise ValueError("Lead name must be a non-empty string")
        if not verb:
            raise ValueError("Lead verb must be a non-empty string")
        self._name = name
        self._verb = verb
        self._sink = sink if sink is not None else ConsoleLineSink()

    @property
    def name(self) -> str:
        return self._name

    @property
    def verb(self) -> str:
        return self._verb

    def try_manage(self, train: Any) -> ManageEvent:
        """
        Manage a train.

        Args:
            train: Any object exposing category_label

        Returns:
            ManageEvent describing the emitted line

        Raises:
            ValueError: If train is None
        """
        if train is None:
            raise ValueError(f"{self._name} cannot manage a missing train")

        label = train.category_label
        event = ManageEvent(
            lead_name=self._name,
            category_label=label,
            text=f"{self._name} {self._verb} {label}",
        )
        self._sink.emit(event.text)
        logger.debug(f"Emitted: {event.text}")
        return event

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self._name!r})"
