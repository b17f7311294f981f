"""
Demo Driver - Pairs Every Train With Every Lead.

Builds one instance of each train variant and each lead variant named in
the configured pairings, then has each lead manage each train directly.
The default pairings are the four cross combinations:

    north lead x north train
    south lead x south train
    north lead x south train
    south lead x north train
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Dict, List, Optional

from rail_bridge.adapters.console_sink import ConsoleLineSink
from rail_bridge.config.models import BridgeConfig
from rail_bridge.domain.entities import ManageEvent
from rail_bridge.registry.variant_registry import VariantRegistry, default_registry

if TYPE_CHECKING:
    from rail_bridge.interfaces.lead import LeadProtocol
    from rail_bridge.interfaces.line_sink import LineSinkProtocol
    from rail_bridge.interfaces.train import TrainProtocol

logger = logging.getLogger(__name__)


def run_demo(
    config: Optional[BridgeConfig] = None,
    sink: Optional[LineSinkProtocol] = None,
    registry: Optional[VariantRegistry] = None,
) -> List[ManageEvent]:
    """
    Run the configured lead/train pairings.

    Args:
        config: Configuration (defaults to BridgeConfig())
        sink: Output destination (defaults to the console)
        registry: Variant registry (defaults to default_registry())

    Returns:
        ManageEvents in invocation order

    Raises:
        ValueError: If a pairing names an unknown variant
    """
    config = config or BridgeConfig()
    sink = sink if sink is not None else ConsoleLineSink()
    registry = registry or default_registry()
    locale = config.active_locale

    trains: Dict[str, TrainProtocol] = {}
    leads: Dict[str, LeadProtocol] = {}
    for pairing in config.demo.pairings:
        if pairing.train not in trains:
            trains[pairing.train] = registry.create_train(
                pairing.train, locale.category_label(pairing.train)
            )
        if pairing.lead not in leads:
            leads[pairing.lead] = registry.create_lead(
                pairing.lead, locale.lead_name(pairing.lead), locale.verb, sink
            )

    logger.info(
        f"Running {len(config.demo.pairings)} pairings (locale={config.locale})"
    )
    events = [
        leads[pairing.lead].try_manage(trains[pairing.train])
        for pairing in config.demo.pairings
    ]
    logger.info("Demo complete")
    return events
