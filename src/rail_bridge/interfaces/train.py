"""
Train Protocol.

Defines the abstraction side of the bridge. A train knows its category
label and holds a reference to whichever lead currently manages it.
It does not know the lead's concrete type.

The train is responsible for:
    - Exposing its category label for leads to read
    - Holding (and swapping) its lead reference
    - Delegating manage() to the lead, passing itself

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - manage() without a lead raises UnconfiguredError
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rail_bridge.domain.entities import ManageEvent, TrainCategory
    from rail_bridge.interfaces.lead import LeadProtocol


@runtime_checkable
class TrainProtocol(Protocol):
    """Abstract interface for trains."""

    @property
    def category(self) -> TrainCategory:
        """Category this train belongs to."""
        ...

    @property
    def category_label(self) -> str:
        """Display label of the category, e.g. "South-category"."""
        ...

    @property
    def lead(self) -> Optional[LeadProtocol]:
        """Currently assigned lead, or None."""
        ...

    def set_lead(self, lead: LeadProtocol) -> None:
        """Assign or replace the lead."""
        ...

    def manage(self) -> ManageEvent:
        """
        Delegate to the assigned lead.

        Returns:
            The ManageEvent produced by the lead

        Raises:
            UnconfiguredError: If no lead has been assigned
        """
        ...
