"""
Registry Package - Named Variant Management.

    - VariantRegistry: Factories for train and lead variants
    - default_registry: Registry with the north/south variants
"""

from rail_bridge.registry.variant_registry import VariantRegistry, default_registry

__all__ = ["VariantRegistry", "default_registry"]
