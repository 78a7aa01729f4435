"""pynukimqtt - Bridge Nuki smart-lock MQTT topics to typed lock state."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pynukimqtt")
except PackageNotFoundError:
    __version__ = "0+local"
from pynukimqtt.bridge import NukiBridge
from pynukimqtt.commands import CommandEncoder, OutboundMessage
from pynukimqtt.config import MqttConnectionConfig, NukiConfig
from pynukimqtt.device import NukiLock
from pynukimqtt.exceptions import (
    NukiConfigError,
    NukiError,
    NukiTransportError,
    NukiUnsupportedActionError,
    NukiUnsupportedFieldError,
)
from pynukimqtt.ingestion.envelope import MqttEnvelope, parse_envelope
from pynukimqtt.ingestion.lock_event import decode_lock_event
from pynukimqtt.ingestion.router import TopicRouter
from pynukimqtt.models import (
    DoorSensorState,
    EventAction,
    EventTrigger,
    LockAction,
    LockField,
    LockSnapshot,
    LockState,
)
from pynukimqtt.ports import Publisher
from pynukimqtt.state.events import FieldUpdate, UpdateSource
from pynukimqtt.state.store import LockStateStore

__all__ = [
    "__version__",
    "CommandEncoder",
    "DoorSensorState",
    "EventAction",
    "EventTrigger",
    "FieldUpdate",
    "LockAction",
    "LockField",
    "LockSnapshot",
    "LockState",
    "LockStateStore",
    "MqttConnectionConfig",
    "MqttEnvelope",
    "NukiBridge",
    "NukiConfig",
    "NukiConfigError",
    "NukiError",
    "NukiLock",
    "NukiTransportError",
    "NukiUnsupportedActionError",
    "NukiUnsupportedFieldError",
    "OutboundMessage",
    "Publisher",
    "TopicRouter",
    "UpdateSource",
    "decode_lock_event",
    "parse_envelope",
]
