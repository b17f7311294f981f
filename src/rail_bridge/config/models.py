"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator, model_validator


class LocaleConfig(BaseModel):
    """Display text for one locale."""

    lead_names: Dict[str, str] = Field(
        default_factory=lambda: {"north": "North Lead", "south": "South Lead"}
    )
    category_labels: Dict[str, str] = Field(
        default_factory=lambda: {"south": "South-category", "north": "North-category"}
    )
    verb: str = Field(default="manages", min_length=1)

    def lead_name(self, variant: str) -> str:
        """Display name for a lead variant."""
        try:
            return self.lead_names[variant]
        except KeyError:
            raise ValueError(f"No lead name configured for '{variant}'") from None

    def category_label(self, variant: str) -> str:
        """Display label for a train variant."""
        try:
            return self.category_labels[variant]
        except KeyError:
            raise ValueError(f"No category label configured for '{variant}'") from None


def _default_locales() -> Dict[str, LocaleConfig]:
    return {
        "en": LocaleConfig(),
        "zh": LocaleConfig(
            category_labels={"south": "南车", "north": "北车"},
            verb="管理",
        ),
    }


class PairingConfig(BaseModel):
    """A single lead/train combination to run in the demo."""

    lead: str
    train: str


def _default_pairings() -> List[PairingConfig]:
    return [
        PairingConfig(lead="north", train="north"),
        PairingConfig(lead="south", train="south"),
        PairingConfig(lead="north", train="south"),
        PairingConfig(lead="south", train="north"),
    ]


class DemoConfig(BaseModel):
    """Configuration for the demonstration driver."""

    pairings: List[PairingConfig] = Field(default_factory=_default_pairings)


class BridgeConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    locale: str = "en"
    locales: Dict[str, LocaleConfig] = Field(default_factory=_default_locales)
    demo: DemoConfig = Field(default_factory=DemoConfig)

    @field_validator("locales")
    @classmethod
    def _require_locales(cls, value: Dict[str, LocaleConfig]) -> Dict[str, LocaleConfig]:
        if not value:
            raise ValueError("at least one locale must be defined")
        return value

    @model_validator(mode="after")
    def _check_locale_defined(self) -> "BridgeConfig":
        if self.locale not in self.locales:
            raise ValueError(
                f"locale '{self.locale}' is not defined "
                f"(available: {sorted(self.locales)})"
            )
        return self

    @property
    def active_locale(self) -> LocaleConfig:
        """LocaleConfig selected by `locale`."""
        return self.locales[self.locale]
