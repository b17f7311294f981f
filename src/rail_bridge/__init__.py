"""
Rail Bridge - The Bridge Pattern With Trains and Leads.

An abstraction (Train) is decoupled from an implementation family (Lead).
A train holds a reference to a lead and delegates manage() to it, passing
itself so the lead can read the train's category label. Any train works
with any lead; the pairing is chosen at runtime.

Architecture:
    - Protocols for both sides of the bridge (interfaces)
    - Dependency Injection for output sinks
    - Configuration-driven labels and pairings via YAML

Main Components:
    - domain: TrainCategory, ManageEvent
    - interfaces: TrainProtocol, LeadProtocol, LineSinkProtocol
    - trains: Train, SouthTrain, NorthTrain
    - leads: Lead, NorthLead, SouthLead
    - adapters: Console and in-memory line sinks
    - registry: Named variant factories
    - config: Configuration models and loaders
    - demo: The cross-combination driver

Example:
    >>> from rail_bridge import NorthLead, SouthTrain
    >>> event = SouthTrain(lead=NorthLead()).manage()
    North Lead manages South-category

"""

import logging

from rail_bridge.errors import ErrorKind, RailBridgeError, UnconfiguredError
from rail_bridge.leads import Lead, NorthLead, SouthLead
from rail_bridge.trains import NorthTrain, SouthTrain, Train

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Rail Bridge.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format

    Example:
        >>> import rail_bridge
        >>> rail_bridge.configure_logging(logging.DEBUG)
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("rail_bridge").setLevel(level)


__all__ = [
    "ErrorKind",
    "Lead",
    "NorthLead",
    "NorthTrain",
    "RailBridgeError",
    "SouthLead",
    "SouthTrain",
    "Train",
    "UnconfiguredError",
    "configure_logging",
]
