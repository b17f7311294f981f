"""
Core Domain Entities.

The vocabulary shared by both sides of the bridge: which category a
train belongs to, and the record a lead produces when it manages one.
"""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class TrainCategory(str, Enum):
    """Category of a train, used as the key for display labels."""

    SOUTH = "south"
    NORTH = "north"


class ManageEvent(BaseModel):
    """One line emitted by a lead managing a train."""

    lead_name: str = Field(..., description="Identity of the managing lead")
    category_label: str = Field(..., description="Label of the managed train")
    text: str = Field(..., description="Exact line written to the sink")

    model_config = {"frozen": True}

    def __str__(self) -> str:
        return self.text
