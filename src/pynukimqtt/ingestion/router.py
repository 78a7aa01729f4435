"""Inbound topic routing.

Maps ``<base_topic>/<device_id>/<suffix>`` messages onto lock fields.
The dispatch table is keyed by the exact topic suffix, and a topic only
matches when it equals the configured root plus a known suffix, so locks
sharing a broker never see each other's values.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pynukimqtt._constants import (
    SUFFIX_BATTERY_CHARGE_STATE,
    SUFFIX_BATTERY_CHARGING,
    SUFFIX_BATTERY_CRITICAL,
    SUFFIX_CONNECTED,
    SUFFIX_DOOR_SENSOR_STATE,
    SUFFIX_FIRMWARE,
    SUFFIX_KEYPAD_BATTERY_CRITICAL,
    SUFFIX_LOCK_ACTION_EVENT,
    SUFFIX_LOCK_STATE,
)
from pynukimqtt.config import NukiConfig
from pynukimqtt.ingestion.lock_event import decode_lock_event
from pynukimqtt.ingestion.normalize import clamp, parse_true_literal, payload_text, safe_int
from pynukimqtt.models.lock import DoorSensorState, LockField, LockState
from pynukimqtt.state.events import FieldUpdate, UpdateSource

_logger = logging.getLogger(__name__)

Decoder = Callable[[str], Any]


def _decode_lock_state(text: str) -> Any:
    return LockState.coerce(text)


def _decode_door_sensor(text: str) -> Any:
    return DoorSensorState.coerce(text)


def _decode_percent(text: str) -> int | None:
    value = safe_int(text)
    if value is None:
        return None
    return clamp(value, 0, 100)


def _decode_text(text: str) -> str:
    return text


@dataclass(frozen=True)
class Route:
    """One entry of the dispatch table."""

    field: LockField
    decode: Decoder


ROUTES: dict[str, Route] = {
    SUFFIX_LOCK_STATE: Route(LockField.LOCK_STATE, _decode_lock_state),
    SUFFIX_CONNECTED: Route(LockField.CONNECTED, parse_true_literal),
    SUFFIX_BATTERY_CHARGE_STATE: Route(LockField.BATTERY_CHARGE, _decode_percent),
    SUFFIX_BATTERY_CRITICAL: Route(LockField.BATTERY_CRITICAL, parse_true_literal),
    SUFFIX_BATTERY_CHARGING: Route(LockField.BATTERY_CHARGING, parse_true_literal),
    SUFFIX_KEYPAD_BATTERY_CRITICAL: Route(LockField.KEYPAD_BATTERY_CRITICAL, parse_true_literal),
    SUFFIX_DOOR_SENSOR_STATE: Route(LockField.DOOR_SENSOR_STATE, _decode_door_sensor),
    SUFFIX_FIRMWARE: Route(LockField.FIRMWARE, _decode_text),
    SUFFIX_LOCK_ACTION_EVENT: Route(LockField.LAST_ACTION, decode_lock_event),
}
"""Topic suffix -> target field and payload decoder."""


class TopicRouter:
    """Decode inbound messages for one configured lock."""

    def __init__(self, config: NukiConfig) -> None:
        self._config = config
        # Full topic -> route, resolved once per configuration.
        self._routes: dict[str, Route] = {config.topic_for(suffix): route for suffix, route in ROUTES.items()}

    @property
    def config(self) -> NukiConfig:
        return self._config

    def handles(self, topic: str) -> bool:
        return topic in self._routes

    def route(self, topic: str, payload: Any) -> FieldUpdate | None:
        """Return the field update for *topic*/*payload*, or ``None``.

        ``None`` covers foreign topics, unknown suffixes and payloads the
        field's decoder cannot interpret. Nothing here raises for inbound
        data.
        """
        route = self._routes.get(topic)
        if route is None:
            return None

        text = payload_text(payload)
        if text is None:
            return None

        value = route.decode(text)
        if value is None:
            _logger.debug("Discarding undecodable payload topic=%s payload=%r", topic, text)
            return None
        return FieldUpdate(field=route.field, value=value, source=UpdateSource.MQTT, topic=topic)
