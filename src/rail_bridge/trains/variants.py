"""
Train Variants.

SouthTrain and NorthTrain differ only in their category and default
label. Both delegate manage() the same way through Train.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from rail_bridge.domain.entities import TrainCategory
from rail_bridge.trains.base import Train

if TYPE_CHECKING:
    from rail_bridge.interfaces.lead import LeadProtocol


class SouthTrain(Train):
    """Train of the south category."""

    DEFAULT_LABEL = "South-category"

    def __init__(
        self,
        lead: Optional[LeadProtocol] = None,
        category_label: Optional[str] = None,
    ) -> None:
        super().__init__(
            TrainCategory.SOUTH,
            self.DEFAULT_LABEL if category_label is None else category_label,
            lead,
        )


class NorthTrain(Train):
    """Train of the north category."""

    DEFAULT_LABEL = "North-category"

    def __init__(
        self,
        lead: Optional[LeadProtocol] = None,
        category_label: Optional[str] = None,
    ) -> None:
        super().__init__(
            TrainCategory.NORTH,
            self.DEFAULT_LABEL if category_label is None else category_label,
            lead,
        )
