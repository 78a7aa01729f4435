from __future__ import annotations

import logging

import pytest
from pydantic import ValidationError

from pynukimqtt.models.lock import LockAction, LockField, LockState
from pynukimqtt.state.events import FieldUpdate, UpdateSource
from pynukimqtt.state.store import LockStateStore


def test_apply_reports_change_once() -> None:
    store = LockStateStore()
    update = FieldUpdate(field=LockField.LOCK_STATE, value=1)

    assert store.apply(update) is True
    assert store.apply(update) is False
    assert store.get(LockField.LOCK_STATE) is LockState.LOCKED


def test_listener_not_called_for_unchanged_value() -> None:
    received: list[FieldUpdate] = []
    store = LockStateStore(listener=received.append)

    store.set(LockField.FIRMWARE, "3.6.9")
    store.set(LockField.FIRMWARE, "3.6.9")
    store.set(LockField.FIRMWARE, "3.7.0")

    assert [u.value for u in received] == ["3.6.9", "3.7.0"]


def test_listener_failure_does_not_propagate(caplog: pytest.LogCaptureFixture) -> None:
    def _boom(_update: FieldUpdate) -> None:
        raise RuntimeError("host adapter broke")

    store = LockStateStore(listener=_boom)
    with caplog.at_level(logging.DEBUG, logger="pynukimqtt.state.store"):
        assert store.set(LockField.CONNECTED, True) is True

    assert store.get(LockField.CONNECTED) is True
    assert any("State listener failed" in r.getMessage() for r in caplog.records)


def test_source_tracking() -> None:
    store = LockStateStore()
    assert store.source_of(LockField.LOCK_ACTION) is None

    store.set(LockField.LOCK_ACTION, LockAction.LOCK, source=UpdateSource.OPTIMISTIC)
    assert store.source_of(LockField.LOCK_ACTION) is UpdateSource.OPTIMISTIC

    store.set(LockField.LOCK_ACTION, LockAction.UNLOCK)
    assert store.source_of(LockField.LOCK_ACTION) is UpdateSource.HOST


def test_invalid_value_rejected_and_state_untouched() -> None:
    store = LockStateStore()
    store.set(LockField.BATTERY_CHARGE, 50)

    with pytest.raises(ValidationError):
        store.set(LockField.BATTERY_CHARGE, 500)

    assert store.get(LockField.BATTERY_CHARGE) == 50


def test_snapshot_is_detached() -> None:
    store = LockStateStore()
    store.set(LockField.LAST_ACTION, "Lock via System")

    snapshot = store.snapshot()
    store.set(LockField.LAST_ACTION, "Unlock via Button")

    assert snapshot.last_action == "Lock via System"
    assert store.snapshot().last_action == "Unlock via Button"


def test_clear() -> None:
    store = LockStateStore()
    store.set(LockField.CONNECTED, True)
    store.clear()
    assert store.get(LockField.CONNECTED) is None
    assert store.source_of(LockField.CONNECTED) is None
