"""
Domain Layer - Core Entities.

Entities:
    - TrainCategory: Enum of train categories (south, north)
    - ManageEvent: Immutable record of one managed train

Design Principles:
    - Immutable where possible (frozen pydantic models)
    - No infrastructure dependencies
"""

from rail_bridge.domain.entities import ManageEvent, TrainCategory

__all__ = ["ManageEvent", "TrainCategory"]
