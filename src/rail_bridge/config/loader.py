"""
Configuration Loader - YAML Loading with Validation.

Reads the bridge configuration (locale labels and demo pairings) from
YAML and validates it with the Pydantic models. Relative paths resolve
against a base directory laid out as:

    <base>/config/default.yaml
    <base>/config/profiles/<profile>.yaml

The package ships such a tree next to this module, so the default base
is the installed rail_bridge directory.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

from rail_bridge.config.models import BridgeConfig

logger = logging.getLogger(__name__)

PACKAGE_BASE_PATH = Path(__file__).resolve().parent.parent
DEFAULT_CONFIG_PATH = Path("config") / "default.yaml"


class ConfigLoader:
    """Loads and validates bridge configuration from YAML files."""

    def __init__(self, base_path: Optional[Path] = None) -> None:
        """
        Initialize config loader.

        Args:
            base_path: Directory holding config/ (defaults to the package)
        """
        self._base_path = base_path or PACKAGE_BASE_PATH

    @property
    def base_path(self) -> Path:
        return self._base_path

    def load(
        self,
        config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
        profile: Optional[str] = None,
    ) -> BridgeConfig:
        """
        Load configuration from a YAML file.

        Args:
            config_path: YAML file, relative to the base path unless absolute
            profile: Optional profile (e.g. "zh") merged over the file

        Returns:
            Validated BridgeConfig object

        Raises:
            FileNotFoundError: If the file or the profile doesn't exist
            ValidationError: If the merged config is invalid
        """
        path = self._resolve_path(config_path)
        config_dict = self._read(path)

        if profile:
            config_dict = self._merge_configs(config_dict, self._read_profile(profile))

        config = BridgeConfig.model_validate(config_dict)
        logger.debug(
            f"Loaded {path} (profile={profile}, locale={config.locale}, "
            f"{len(config.demo.pairings)} pairings)"
        )
        return config

    def load_from_dict(self, config_dict: Dict[str, Any]) -> BridgeConfig:
        """Validate a configuration dictionary."""
        return BridgeConfig.model_validate(config_dict)

    def _resolve_path(self, path: Union[str, Path]) -> Path:
        p = Path(path)
        return p if p.is_absolute() else self._base_path / p

    def _read(self, path: Path) -> Dict[str, Any]:
        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f) or {}

    def _read_profile(self, profile: str) -> Dict[str, Any]:
        profile_path = self._base_path / "config" / "profiles" / f"{profile}.yaml"
        if not profile_path.exists():
            raise FileNotFoundError(f"Profile not found: {profile}")
        return self._read(profile_path)

    def _merge_configs(
        self,
        base: Dict[str, Any],
        overlay: Dict[str, Any],
    ) -> Dict[str, Any]:
        """Deep merge overlay into base; lists such as pairings are replaced."""
        result = dict(base)
        for key, value in overlay.items():
            if isinstance(result.get(key), dict) and isinstance(value, dict):
                result[key] = self._merge_configs(result[key], value)
            else:
                result[key] = value
        return result


def load_config(
    config_path: Union[str, Path] = DEFAULT_CONFIG_PATH,
    profile: Optional[str] = None,
    base_path: Optional[Path] = None,
) -> BridgeConfig:
    """
    Convenience function to load configuration.

    With no arguments this reads the packaged config/default.yaml.
    """
    return ConfigLoader(base_path=base_path).load(config_path, profile)
