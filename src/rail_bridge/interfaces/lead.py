"""
Lead Protocol.

Defines the implementation side of the bridge. A lead performs the
actual work of managing a train: it reads the train's category label,
writes one line to its sink and reports what it wrote.

Design Notes:
    - Leads only rely on the train exposing category_label
    - Leads are stateless apart from injected collaborators
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from rail_bridge.domain.entities import ManageEvent


@runtime_checkable
class LeadProtocol(Protocol):
    """Abstract interface for leads."""

    @property
    def name(self) -> str:
        """Identity of the lead, e.g. "North Lead"."""
        ...

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
        ...
