"""Transport envelope parsing.

Whatever the transport hands over (a paho ``MQTTMessage``, a host JSON
string or decoded object with ``Topic``/``Payload`` keys, a plain dict) is
reduced to the two fields the router needs. Envelopes that are not valid
JSON, or miss either field, are dropped here.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

_TOPIC_KEYS = ("topic", "Topic")
_PAYLOAD_KEYS = ("payload", "Payload")


@dataclass(frozen=True)
class MqttEnvelope:
    """Topic and raw payload of one inbound message."""

    topic: str
    payload: bytes | str


def _lookup(data: Any, keys: tuple[str, ...]) -> Any:
    if isinstance(data, Mapping):
        for key in keys:
            if key in data:
                return data[key]
        return None
    for key in keys:
        value = getattr(data, key, None)
        if value is not None:
            return value
    return None


def parse_envelope(data: Any) -> MqttEnvelope | None:
    """Return an :class:`MqttEnvelope`, or ``None`` when topic or payload is missing."""
    if data is None:
        return None
    if isinstance(data, MqttEnvelope):
        return data
    if isinstance(data, (str, bytes, bytearray)):
        try:
            data = json.loads(data)
        except ValueError:
            return None

    topic = _lookup(data, _TOPIC_KEYS)
    payload = _lookup(data, _PAYLOAD_KEYS)
    if not isinstance(topic, str) or not topic:
        return None
    if payload is None:
        return None
    if isinstance(payload, (bytearray, memoryview)):
        payload = bytes(payload)
    elif not isinstance(payload, (bytes, str)):
        payload = str(payload)
    return MqttEnvelope(topic=topic, payload=payload)
