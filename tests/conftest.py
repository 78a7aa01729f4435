from __future__ import annotations

import pytest

from pynukimqtt.config import NukiConfig


@pytest.fixture
def config() -> NukiConfig:
    return NukiConfig(base_topic="nuki", device_id="45A2F2BF")
