"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from rail_bridge.adapters.memory_sink import InMemoryLineSink
from rail_bridge.config.models import BridgeConfig
from rail_bridge.leads.variants import NorthLead, SouthLead
from rail_bridge.trains.variants import NorthTrain, SouthTrain


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def memory_sink() -> InMemoryLineSink:
    """Sink collecting emitted lines."""
    return InMemoryLineSink()


@pytest.fixture
def north_lead(memory_sink: InMemoryLineSink) -> NorthLead:
    return NorthLead(sink=memory_sink)


@pytest.fixture
def south_lead(memory_sink: InMemoryLineSink) -> SouthLead:
    return SouthLead(sink=memory_sink)


@pytest.fixture
def north_train() -> NorthTrain:
    return NorthTrain()


@pytest.fixture
def south_train() -> SouthTrain:
    return SouthTrain()


@pytest.fixture
def default_config() -> BridgeConfig:
    """Create default bridge configuration."""
    return BridgeConfig()
