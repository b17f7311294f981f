"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - BridgeConfig: Root configuration object
    - LocaleConfig: Lead names, category labels and verb for one locale
    - DemoConfig: Lead/train pairings run by the demo driver

Design Principles:
    - Type-safe via Pydantic
    - Validation on load (fail fast)
    - Support for profiles (e.g. zh)
"""

from rail_bridge.config.loader import ConfigLoader, load_config
from rail_bridge.config.models import (
    BridgeConfig,
    DemoConfig,
    LocaleConfig,
    PairingConfig,
)

__all__ = [
    "BridgeConfig",
    "ConfigLoader",
    "DemoConfig",
    "LocaleConfig",
    "PairingConfig",
    "load_config",
]
