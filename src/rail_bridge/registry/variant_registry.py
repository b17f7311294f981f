"""
Variant Registry - Named Factories for Trains and Leads.

Keeps the two families of the bridge apart: trains and leads are
registered independently under short names ("north", "south") and
created on demand, so the driver can pair any train with any lead
without importing concrete classes.

Usage:
    registry = default_registry()
    train = registry.create_train("south", "South-category")
    lead = registry.create_lead("north", "North Lead", "manages", sink)
    lead.try_manage(train)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Callable, Dict, List, Optional

from rail_bridge.leads.variants import NorthLead, SouthLead
from rail_bridge.trains.variants import NorthTrain, SouthTrain

if TYPE_CHECKING:
    from rail_bridge.interfaces.lead import LeadProtocol
    from rail_bridge.interfaces.line_sink import LineSinkProtocol
    from rail_bridge.interfaces.train import TrainProtocol

logger = logging.getLogger(__name__)

# label -> train
TrainFactory = Callable[[str], "TrainProtocol"]

# (name, verb, sink) -> lead
LeadFactory = Callable[[str, str, Optional["LineSinkProtocol"]], "LeadProtocol"]


class VariantRegistry:
    """
    Registry of train and lead variants.

    Supports:
        - Independent registration of both families
        - Factory pattern for instantiation
        - Registration order preserved for listing
    """

    def __init__(self) -> None:
        """Initialize empty registry."""
        self._trains: Dict[str, TrainFactory] = {}
        self._leads: Dict[str, LeadFactory] = {}
        logger.debug("VariantRegistry initialized")

    def register_train(self, name: str, factory: TrainFactory) -> None:
        """
        Register a train variant.

        Args:
            name: Unique variant name
            factory: Callable taking the category label

        Raises:
            ValueError: If a train with this name is already registered
        """
        if name in self._trains:
            raise ValueError(
                f"Train '{name}' is already registered. Use unregister_train() first."
            )
        self._trains[name] = factory
        logger.info(f"Registered train variant: {name}")

    def register_lead(self, name: str, factory: LeadFactory) -> None:
        """
        Register a lead variant.

        Args:
            name: Unique variant name
            factory: Callable taking (name, verb, sink)

        Raises:
            ValueError: If a lead with this name is already registered
        """
        if name in self._leads:
            raise ValueError(
                f"Lead '{name}' is already registered. Use unregister_lead() first."
            )
        self._leads[name] = factory
        logger.info(f"Registered lead variant: {name}")

    def unregister_train(self, name: str) -> bool:
        """Remove a train variant. Returns False if it was not registered."""
        if name not in self._trains:
            logger.warning(f"Cannot unregister: train '{name}' not found")
            return False
        del self._trains[name]
        logger.info(f"Unregistered train variant: {name}")
        return True

    def unregister_lead(self, name: str) -> bool:
        """Remove a lead variant. Returns False if it was not registered."""
        if name not in self._leads:
            logger.warning(f"Cannot unregister: lead '{name}' not found")
            return False
        del self._leads[name]
        logger.info(f"Unregistered lead variant: {name}")
        return True

    def create_train(self, name: str, category_label: str) -> TrainProtocol:
        """
        Instantiate a registered train variant.

        Raises:
            ValueError: If the variant is unknown
        """
        factory = self._trains.get(name)
        if factory is None:
            raise ValueError(f"Unknown train variant: {name}")
        return factory(category_label)

    def create_lead(
        self,
        name: str,
        lead_name: str,
        verb: str,
        sink: Optional[LineSinkProtocol] = None,
    ) -> LeadProtocol:
        """
        Instantiate a registered lead variant.

        Raises:
            ValueError: If the variant is unknown
        """
        factory = self._leads.get(name)
        if factory is None:
            raise ValueError(f"Unknown lead variant: {name}")
        return factory(lead_name, verb, sink)

    @property
    def train_names(self) -> List[str]:
        return list(self._trains)

    @property
    def lead_names(self) -> List[str]:
        return list(self._leads)

    def clear(self) -> None:
        """Remove all registered variants."""
        self._trains.clear()
        self._leads.clear()
        logger.info("Cleared all variants from registry")


def default_registry() -> VariantRegistry:
    """Registry pre-populated with the north and south variants."""
    registry = VariantRegistry()
    registry.register_train(
        "north", lambda label: NorthTrain(category_label=label)
    )
    registry.register_train(
        "south", lambda label: SouthTrain(category_label=label)
    )
    registry.register_lead(
        "north", lambda name, verb, sink: NorthLead(sink=sink, verb=verb, name=name)
    )
    registry.register_lead(
        "south", lambda name, verb, sink: SouthLead(sink=sink, verb=verb, name=name)
    )
    return registry
