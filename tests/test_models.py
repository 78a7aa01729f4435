"""Tests for lock enums, the state snapshot, and field definitions."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from pynukimqtt.models.fields import FIELD_DEFINITIONS, NO_COLOR, PROFILES, FieldKind, field_by_ident
from pynukimqtt.models.lock import (
    DoorSensorState,
    EventAction,
    EventTrigger,
    LockAction,
    LockField,
    LockSnapshot,
    LockState,
)

# ------------------------------------------------------------------
# NukiEnum
# ------------------------------------------------------------------


class TestNukiEnum:
    def test_members_are_ints_with_labels(self) -> None:
        assert LockState.LOCKED == 1
        assert LockState.LOCKED.label == "Locked"
        assert LockState.UNLOCKED_LOCK_N_GO.label == "Unlocked (Lock 'n' Go)"
        assert LockAction.UNLATCH.label == "Unlatch (Open)"

    def test_lock_state_codes(self) -> None:
        assert [int(m) for m in LockState] == [0, 1, 2, 3, 4, 5, 6, 7, 254, 255]

    def test_door_sensor_codes(self) -> None:
        assert [int(m) for m in DoorSensorState] == [1, 2, 3, 4, 5]

    def test_coerce_keeps_unmapped_codes(self) -> None:
        assert LockState.coerce("1") is LockState.LOCKED
        assert LockState.coerce(99) == 99
        assert LockState.coerce("junk") is None

    def test_label_for(self) -> None:
        assert EventAction.label_for(4) == "Lock 'n' Go"
        assert EventTrigger.label_for("172") == "MQTT"
        assert EventTrigger.label_for(5) == "5"
        assert EventTrigger.label_for(None) is None

    def test_labels_table(self) -> None:
        assert LockAction.labels() == {1: "Unlock", 2: "Lock", 3: "Unlatch (Open)"}


# ------------------------------------------------------------------
# LockSnapshot
# ------------------------------------------------------------------


class TestLockSnapshot:
    def test_defaults_are_unset(self) -> None:
        snapshot = LockSnapshot()
        assert all(value is None for value in snapshot.model_dump().values())
        assert snapshot.is_locked is None
        assert snapshot.is_door_open is None

    def test_assignment_coerces_codes(self) -> None:
        snapshot = LockSnapshot()
        snapshot.lock_state = 1
        snapshot.door_sensor_state = "2"
        assert snapshot.lock_state is LockState.LOCKED
        assert snapshot.door_sensor_state is DoorSensorState.CLOSED
        assert snapshot.is_locked is True
        assert snapshot.is_door_open is False

    def test_unmapped_code_kept(self) -> None:
        snapshot = LockSnapshot(lock_state=77)
        assert snapshot.lock_state == 77
        assert snapshot.is_locked is False

    def test_battery_charge_bounds(self) -> None:
        snapshot = LockSnapshot()
        with pytest.raises(ValidationError):
            snapshot.battery_charge = 101

    def test_unknown_field_rejected(self) -> None:
        with pytest.raises(ValidationError):
            LockSnapshot(color="red")  # type: ignore[call-arg]

    def test_every_lock_field_is_a_snapshot_attribute(self) -> None:
        assert {field.value for field in LockField} == set(LockSnapshot.model_fields)


# ------------------------------------------------------------------
# Field definitions
# ------------------------------------------------------------------


class TestFieldDefinitions:
    def test_every_field_defined(self) -> None:
        assert set(FIELD_DEFINITIONS) == set(LockField)

    def test_only_action_is_writable(self) -> None:
        writable = [d.field for d in FIELD_DEFINITIONS.values() if d.writable]
        assert writable == [LockField.LOCK_ACTION]

    def test_idents_and_profiles(self) -> None:
        state = FIELD_DEFINITIONS[LockField.LOCK_STATE]
        assert state.ident == "LockState"
        assert state.kind is FieldKind.INTEGER
        assert PROFILES[state.profile].associations[254].label == "Motor Blocked"
        assert FIELD_DEFINITIONS[LockField.CONNECTED].profile == "~Alert.Reversed"

    def test_profiles_carry_icons_and_colors(self) -> None:
        action = PROFILES["Nuki.Action"]
        assert action.icon == "Power"
        assert action.associations[1].icon == "LockOpen"
        assert action.associations[1].color == 0x00FF00
        assert action.associations[2].color == 0xFF0000
        assert action.associations[3].label == "Unlatch (Open)"
        assert action.associations[3].color == 0x0000FF

        door = PROFILES["Nuki.DoorSensor"]
        assert door.icon == "Door"
        assert door.associations[3].color == 0xFF0000
        assert door.associations[1].icon == ""
        assert door.associations[1].color == NO_COLOR

        state = PROFILES["Nuki.State"]
        assert state.associations[254].icon == "Warning"
        assert state.associations[0].color == NO_COLOR

    def test_profile_labels_follow_enums(self) -> None:
        assert PROFILES["Nuki.State"].labels() == LockState.labels()
        assert PROFILES["Nuki.DoorSensor"].labels() == DoorSensorState.labels()

    def test_positions_are_unique(self) -> None:
        positions = [d.position for d in FIELD_DEFINITIONS.values()]
        assert len(positions) == len(set(positions))

    @pytest.mark.parametrize(
        ("name", "expected"),
        [
            ("LockAction", LockField.LOCK_ACTION),
            ("lock_action", LockField.LOCK_ACTION),
            ("KeypadBatteryCritical", LockField.KEYPAD_BATTERY_CRITICAL),
            ("nope", None),
        ],
    )
    def test_field_by_ident(self, name: str, expected: LockField | None) -> None:
        assert field_by_ident(name) is expected
