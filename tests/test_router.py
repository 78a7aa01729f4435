from __future__ import annotations

from typing import Any

import pytest

from pynukimqtt.config import NukiConfig
from pynukimqtt.ingestion.router import ROUTES, TopicRouter
from pynukimqtt.models.lock import DoorSensorState, LockField, LockSnapshot, LockState
from pynukimqtt.state.events import UpdateSource
from pynukimqtt.state.store import LockStateStore

ROOT = "nuki/45A2F2BF/"


@pytest.mark.parametrize(
    ("suffix", "payload", "field", "expected"),
    [
        ("lockState", b"1", LockField.LOCK_STATE, LockState.LOCKED),
        ("connected", b"true", LockField.CONNECTED, True),
        ("connected", b"false", LockField.CONNECTED, False),
        ("batteryChargeState", b"87", LockField.BATTERY_CHARGE, 87),
        ("batteryCritical", b"true", LockField.BATTERY_CRITICAL, True),
        ("batteryCharging", b"false", LockField.BATTERY_CHARGING, False),
        ("keypadBatteryCritical", b"true", LockField.KEYPAD_BATTERY_CRITICAL, True),
        ("doorsensorState", b"3", LockField.DOOR_SENSOR_STATE, DoorSensorState.OPEN),
        ("firmware", b"3.6.9", LockField.FIRMWARE, "3.6.9"),
        ("lockActionEvent", b"2,1,0,0,0", LockField.LAST_ACTION, "Lock via System"),
    ],
)
def test_route_updates_only_mapped_field(
    config: NukiConfig, suffix: str, payload: bytes, field: LockField, expected: Any
) -> None:
    router = TopicRouter(config)
    store = LockStateStore()
    before = store.snapshot().model_dump()

    update = router.route(ROOT + suffix, payload)

    assert update is not None
    assert update.field is field
    assert update.source is UpdateSource.MQTT
    assert update.topic == ROOT + suffix
    store.apply(update)

    after = store.snapshot().model_dump()
    changed = {key for key in after if after[key] != before[key]}
    assert changed == {field.value}
    assert store.get(field) == expected


def test_dispatch_table_covers_every_inbound_field() -> None:
    fields = {route.field for route in ROUTES.values()}
    assert fields == set(LockField) - {LockField.LOCK_ACTION}


@pytest.mark.parametrize(
    "topic",
    [
        "nuki/OTHERLOCK/lockState",
        "other/45A2F2BF/lockState",
        "nuki/45A2F2BF/lockState/extra",
        "prefix/nuki/45A2F2BF/lockState",
        "nuki/45A2F2BF/lockstate",
        "nuki/45A2F2BF/unknownSuffix",
        "nuki/45A2F2BF/lockAction",
        "nuki/45A2F2BF/",
        "",
    ],
)
def test_foreign_or_unknown_topics_are_noop(config: NukiConfig, topic: str) -> None:
    router = TopicRouter(config)
    assert router.route(topic, b"1") is None


def test_bytes_and_str_payloads_decode_the_same(config: NukiConfig) -> None:
    router = TopicRouter(config)
    from_bytes = router.route(ROOT + "lockState", b" 3 \n")
    from_str = router.route(ROOT + "lockState", "3")
    assert from_bytes is not None and from_str is not None
    assert from_bytes.value == from_str.value == LockState.UNLOCKED


@pytest.mark.parametrize("suffix", ["lockState", "batteryChargeState", "doorsensorState"])
@pytest.mark.parametrize("payload", [b"abc", b"", b"\xff\xfe", b"nan"])
def test_non_numeric_integer_payload_is_discarded(config: NukiConfig, suffix: str, payload: bytes) -> None:
    router = TopicRouter(config)
    assert router.route(ROOT + suffix, payload) is None


def test_boolean_fields_only_accept_exact_true_literal(config: NukiConfig) -> None:
    router = TopicRouter(config)
    for payload in (b"TRUE", b"1", b"yes", b"True"):
        update = router.route(ROOT + "connected", payload)
        assert update is not None
        assert update.value is False


def test_unmapped_lock_state_kept_as_int(config: NukiConfig) -> None:
    router = TopicRouter(config)
    update = router.route(ROOT + "lockState", b"42")
    assert update is not None
    assert update.value == 42
    assert not isinstance(update.value, LockState)

    store = LockStateStore()
    store.apply(update)
    assert store.get(LockField.LOCK_STATE) == 42


def test_motor_blocked_and_undefined_states(config: NukiConfig) -> None:
    router = TopicRouter(config)
    blocked = router.route(ROOT + "lockState", b"254")
    undefined = router.route(ROOT + "lockState", b"255")
    assert blocked is not None and blocked.value is LockState.MOTOR_BLOCKED
    assert undefined is not None and undefined.value is LockState.UNDEFINED


def test_battery_charge_clamped_to_percent_range(config: NukiConfig) -> None:
    router = TopicRouter(config)
    high = router.route(ROOT + "batteryChargeState", b"120")
    low = router.route(ROOT + "batteryChargeState", b"-5")
    assert high is not None and high.value == 100
    assert low is not None and low.value == 0


def test_short_lock_event_is_discarded(config: NukiConfig) -> None:
    router = TopicRouter(config)
    assert router.route(ROOT + "lockActionEvent", b"5") is None


def test_same_message_twice_is_idempotent(config: NukiConfig) -> None:
    router = TopicRouter(config)
    once = LockStateStore()
    twice = LockStateStore()
    messages = [
        ("lockState", b"1"),
        ("batteryChargeState", b"55"),
        ("lockActionEvent", b"1,172"),
        ("connected", b"true"),
    ]
    for suffix, payload in messages:
        update = router.route(ROOT + suffix, payload)
        assert update is not None
        once.apply(update)
        twice.apply(update)
        twice.apply(router.route(ROOT + suffix, payload))  # type: ignore[arg-type]

    assert once.snapshot() == twice.snapshot()
    assert twice.snapshot() == LockSnapshot(
        lock_state=LockState.LOCKED,
        battery_charge=55,
        last_action="Unlock via MQTT",
        connected=True,
    )


def test_router_uses_configured_namespace() -> None:
    router = TopicRouter(NukiConfig(base_topic="home/nuki", device_id="ABC123"))
    assert router.handles("home/nuki/ABC123/lockState")
    assert not router.handles("nuki/ABC123/lockState")
    update = router.route("home/nuki/ABC123/firmware", b"4.0.1")
    assert update is not None and update.value == "4.0.1"
