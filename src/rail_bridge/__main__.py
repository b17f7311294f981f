"""Run the bridge demonstration: ``python -m rail_bridge``."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from rail_bridge import configure_logging
from rail_bridge.config.loader import load_config
from rail_bridge.demo.driver import run_demo


def main(base_path: Optional[Path] = None, profile: Optional[str] = None) -> int:
    """
    Load config/default.yaml and run the configured pairings.

    Args:
        base_path: Directory holding config/ (defaults to the package)
        profile: Optional profile name, e.g. "zh"
    """
    configure_logging(logging.WARNING)
    config = load_config(profile=profile, base_path=base_path)
    run_demo(config=config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
