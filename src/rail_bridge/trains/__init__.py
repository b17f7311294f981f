"""
Trains Package - The Abstraction Family.

    - Train: Holds a category label and a lead, delegates manage()
    - SouthTrain, NorthTrain: Variants with fixed categories
"""

from rail_bridge.trains.base import Train
from rail_bridge.trains.variants import NorthTrain, SouthTrain

__all__ = ["NorthTrain", "SouthTrain", "Train"]
