"""Static field and value-profile definitions.

Hosts that model state as named variables with value profiles (label, icon
and colour per integer code) can register these tables once in their
adapter.  Nothing here is created at runtime.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from pynukimqtt.models._base import NukiEnum
from pynukimqtt.models.lock import DoorSensorState, LockAction, LockField, LockState


class FieldKind(enum.StrEnum):
    INTEGER = "integer"
    BOOLEAN = "boolean"
    STRING = "string"


@dataclass(frozen=True)
class FieldDefinition:
    """How one lock field is presented to a host platform."""

    field: LockField
    ident: str
    name: str
    kind: FieldKind
    profile: str = ""
    position: int = 0
    writable: bool = False


PROFILE_STATE = "Nuki.State"
PROFILE_ACTION = "Nuki.Action"
PROFILE_DOOR_SENSOR = "Nuki.DoorSensor"

NO_COLOR = -1
_RED = 0xFF0000
_GREEN = 0x00FF00
_BLUE = 0x0000FF


@dataclass(frozen=True)
class ProfileAssociation:
    """Label and presentation of one integer code. ``color`` is RGB, or ``NO_COLOR``."""

    label: str
    icon: str = ""
    color: int = NO_COLOR


@dataclass(frozen=True)
class ValueProfile:
    name: str
    associations: dict[int, ProfileAssociation]
    icon: str = ""

    def labels(self) -> dict[int, str]:
        return {code: association.label for code, association in self.associations.items()}


def _profile(
    name: str,
    enum_cls: type[NukiEnum],
    styles: dict[NukiEnum, tuple[str, int]],
    *,
    icon: str = "",
) -> ValueProfile:
    associations: dict[int, ProfileAssociation] = {}
    for member in enum_cls:
        member_icon, color = styles.get(member, ("", NO_COLOR))
        associations[int(member)] = ProfileAssociation(member.label, member_icon, color)
    return ValueProfile(name, associations, icon)


PROFILES: dict[str, ValueProfile] = {
    PROFILE_STATE: _profile(
        PROFILE_STATE,
        LockState,
        {
            LockState.LOCKED: ("Lock", _RED),
            LockState.UNLOCKED: ("LockOpen", _GREEN),
            LockState.UNLATCHED: ("Door", _GREEN),
            LockState.MOTOR_BLOCKED: ("Warning", _RED),
        },
    ),
    PROFILE_ACTION: _profile(
        PROFILE_ACTION,
        LockAction,
        {
            LockAction.UNLOCK: ("LockOpen", _GREEN),
            LockAction.LOCK: ("Lock", _RED),
            LockAction.UNLATCH: ("Door", _BLUE),
        },
        icon="Power",
    ),
    PROFILE_DOOR_SENSOR: _profile(
        PROFILE_DOOR_SENSOR,
        DoorSensorState,
        {
            DoorSensorState.CLOSED: ("Door", _GREEN),
            DoorSensorState.OPEN: ("Door", _RED),
        },
        icon="Door",
    ),
}

FIELD_DEFINITIONS: dict[LockField, FieldDefinition] = {
    d.field: d
    for d in (
        FieldDefinition(LockField.LOCK_STATE, "LockState", "Current Status", FieldKind.INTEGER, PROFILE_STATE, 10),
        FieldDefinition(
            LockField.LOCK_ACTION, "LockAction", "Control", FieldKind.INTEGER, PROFILE_ACTION, 20, writable=True
        ),
        FieldDefinition(LockField.CONNECTED, "Connected", "Connected", FieldKind.BOOLEAN, "~Alert.Reversed", 30),
        FieldDefinition(
            LockField.BATTERY_CHARGE, "BatteryCharge", "Battery Charge", FieldKind.INTEGER, "~Battery.100", 40
        ),
        FieldDefinition(LockField.BATTERY_CRITICAL, "BatteryCritical", "Battery Low", FieldKind.BOOLEAN, "~Alert", 41),
        FieldDefinition(
            LockField.BATTERY_CHARGING, "BatteryCharging", "Battery Charging", FieldKind.BOOLEAN, "~Switch", 42
        ),
        FieldDefinition(
            LockField.KEYPAD_BATTERY_CRITICAL,
            "KeypadBatteryCritical",
            "Keypad Battery Low",
            FieldKind.BOOLEAN,
            "~Alert",
            43,
        ),
        FieldDefinition(
            LockField.DOOR_SENSOR_STATE, "DoorSensorState", "Door Sensor", FieldKind.INTEGER, PROFILE_DOOR_SENSOR, 50
        ),
        FieldDefinition(LockField.FIRMWARE, "Firmware", "Firmware", FieldKind.STRING, "", 80),
        FieldDefinition(LockField.LAST_ACTION, "LastAction", "Last Action", FieldKind.STRING, "", 90),
    )
}

_BY_NAME: dict[str, LockField] = {}
for _definition in FIELD_DEFINITIONS.values():
    _BY_NAME[_definition.ident] = _definition.field
    _BY_NAME[_definition.field.value] = _definition.field


def field_by_ident(name: str) -> LockField | None:
    """Resolve a host ident (``"LockAction"``) or attribute name (``"lock_action"``)."""
    return _BY_NAME.get(name)
