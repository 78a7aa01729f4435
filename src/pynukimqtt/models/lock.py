"""Smart-lock state model.

Code tables follow the Nuki MQTT API documentation.
"""

from __future__ import annotations

import enum
from collections.abc import Callable
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, Field

from pynukimqtt.models._base import NukiEnum

# ------------------------------------------------------------------
# Enums
# ------------------------------------------------------------------


class LockState(NukiEnum):
    """Lock state reported on ``lockState``."""

    UNCALIBRATED = 0, "Uncalibrated"
    LOCKED = 1, "Locked"
    UNLOCKING = 2, "Unlocking"
    UNLOCKED = 3, "Unlocked"
    LOCKING = 4, "Locking"
    UNLATCHED = 5, "Unlatched"
    UNLOCKED_LOCK_N_GO = 6, "Unlocked (Lock 'n' Go)"
    UNLATCHING = 7, "Unlatching"
    MOTOR_BLOCKED = 254, "Motor Blocked"
    UNDEFINED = 255, "Undefined"


class DoorSensorState(NukiEnum):
    """Door sensor state reported on ``doorsensorState``.

    ``CALIBRATING`` is only sent by newer firmware.
    """

    DEACTIVATED = 1, "Deactivated"
    CLOSED = 2, "Closed"
    OPEN = 3, "Open"
    UNKNOWN = 4, "Unknown"
    CALIBRATING = 5, "Calibrating"


class LockAction(NukiEnum):
    """Command codes accepted on ``lockAction``."""

    UNLOCK = 1, "Unlock"
    LOCK = 2, "Lock"
    UNLATCH = 3, "Unlatch (Open)"


class EventAction(NukiEnum):
    """First field of a ``lockActionEvent`` line."""

    UNLOCK = 1, "Unlock"
    LOCK = 2, "Lock"
    UNLATCH = 3, "Unlatch"
    LOCK_N_GO = 4, "Lock 'n' Go"
    DOOR_OPENED = 240, "Door Open"
    DOOR_CLOSED = 241, "Door Closed"


class EventTrigger(NukiEnum):
    """Second field of a ``lockActionEvent`` line."""

    MANUAL = 0, "Manual/App"
    SYSTEM = 1, "System"
    BUTTON = 2, "Button"
    AUTOMATIC = 3, "Automatic"
    AUTO_LOCK = 6, "Auto Lock"
    MQTT = 172, "MQTT"


class LockField(enum.StrEnum):
    """State fields held for one lock. Values are :class:`LockSnapshot` attribute names."""

    LOCK_STATE = "lock_state"
    LOCK_ACTION = "lock_action"
    CONNECTED = "connected"
    BATTERY_CHARGE = "battery_charge"
    BATTERY_CRITICAL = "battery_critical"
    BATTERY_CHARGING = "battery_charging"
    KEYPAD_BATTERY_CRITICAL = "keypad_battery_critical"
    DOOR_SENSOR_STATE = "door_sensor_state"
    FIRMWARE = "firmware"
    LAST_ACTION = "last_action"


# ------------------------------------------------------------------
# Snapshot
# ------------------------------------------------------------------


def _enum_or_int(enum_cls: type[NukiEnum]) -> Callable[[Any], Any]:
    def _coerce(value: Any) -> Any:
        if value is None:
            return None
        coerced = enum_cls.coerce(value)
        # Leave uninterpretable input untouched so validation rejects it.
        return value if coerced is None else coerced

    return _coerce


LockStateValue = Annotated[LockState | int | None, BeforeValidator(_enum_or_int(LockState))]
LockActionValue = Annotated[LockAction | int | None, BeforeValidator(_enum_or_int(LockAction))]
DoorSensorValue = Annotated[DoorSensorState | int | None, BeforeValidator(_enum_or_int(DoorSensorState))]


class LockSnapshot(BaseModel):
    """Current value of every lock field.

    Fields that have not been reported yet are ``None``.  Integer codes
    without a mapped enum member are kept as plain ``int``.
    """

    model_config = ConfigDict(extra="forbid", validate_assignment=True)

    lock_state: LockStateValue = None
    lock_action: LockActionValue = None
    connected: bool | None = None
    battery_charge: int | None = Field(default=None, ge=0, le=100)
    battery_critical: bool | None = None
    battery_charging: bool | None = None
    keypad_battery_critical: bool | None = None
    door_sensor_state: DoorSensorValue = None
    firmware: str | None = None
    last_action: str | None = None

    @property
    def is_locked(self) -> bool | None:
        """Whether the bolt is thrown; ``None`` until a lock state arrived."""
        if self.lock_state is None:
            return None
        return self.lock_state == LockState.LOCKED

    @property
    def is_door_open(self) -> bool | None:
        if self.door_sensor_state is None:
            return None
        if self.door_sensor_state == DoorSensorState.OPEN:
            return True
        if self.door_sensor_state == DoorSensorState.CLOSED:
            return False
        return None
