"""Data models for Nuki lock state."""

from pynukimqtt.models._base import NukiEnum
from pynukimqtt.models.fields import (
    FIELD_DEFINITIONS,
    PROFILES,
    FieldDefinition,
    FieldKind,
    ProfileAssociation,
    ValueProfile,
    field_by_ident,
)
from pynukimqtt.models.lock import (
    DoorSensorState,
    EventAction,
    EventTrigger,
    LockAction,
    LockField,
    LockSnapshot,
    LockState,
)

__all__ = [
    "DoorSensorState",
    "EventAction",
    "EventTrigger",
    "FIELD_DEFINITIONS",
    "FieldDefinition",
    "FieldKind",
    "LockAction",
    "LockField",
    "LockSnapshot",
    "LockState",
    "NukiEnum",
    "PROFILES",
    "ProfileAssociation",
    "ValueProfile",
    "field_by_ident",
]
