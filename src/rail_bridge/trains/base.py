"""
Train - The Abstraction Side of the Bridge.

A Train holds a category label and a reference to a lead. It never
decides how it is managed: manage() hands the train itself to whatever
lead is currently assigned, so any train works with any lead.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Optional

from rail_bridge.domain.entities import ManageEvent, TrainCategory
from rail_bridge.errors import UnconfiguredError

if TYPE_CHECKING:
    from rail_bridge.interfaces.lead import LeadProtocol

logger = logging.getLogger(__name__)


class Train:
    """Base train holding a category label and an optional lead."""

    def __init__(
        self,
        category: TrainCategory,
        category_label: str,
        lead: Optional[LeadProtocol] = None,
    ) -> None:
        """
        Initialize train.

        Args:
            category: Category of this train
            category_label: Display label read by leads
            lead: Optional lead to manage this train
        """
        self._category = category
        self._category_label = self._validate_label(category_label)
        self._lead = lead

    @property
    def category(self) -> TrainCategory:
        return self._category

    @property
    def category_label(self) -> str:
        return self._category_label

    @category_label.setter
    def category_label(self, value: str) -> None:
        self._category_label = self._validate_label(value)

    @property
    def lead(self) -> Optional[LeadProtocol]:
        return self._lead

    @lead.setter
    def lead(self, lead: Optional[LeadProtocol]) -> None:
        self._lead = lead

    def set_lead(self, lead: LeadProtocol) -> None:
        """Assign or replace the lead managing this train."""
        self._lead = lead

    @property
    def is_configured(self) -> bool:
        """True once a lead has been assigned."""
        return self._lead is not None

    def manage(self) -> ManageEvent:
        """
        Delegate management to the assigned lead.

        Returns:
            ManageEvent produced by the lead

        Raises:
            UnconfiguredError: If no lead has been assigned
        """
        if self._lead is None:
            logger.warning(f"manage() called on {self._category_label} without a lead")
            raise UnconfiguredError(self._category_label)

        logger.debug(f"{self._category_label} delegating to {self._lead.name}")
        return self._lead.try_manage(self)

    @staticmethod
    def _validate_label(label: str) -> str:
        if not label:
            raise ValueError("category_label must be a non-empty string")
        return label

    def __repr__(self) -> str:
        lead_name = self._lead.name if self._lead is not None else None
        return (
            f"{type(self).__name__}(category_label={self._category_label!r}, "
            f"lead={lead_name!r})"
        )
