"""Custom exception hierarchy for pynukimqtt."""

from __future__ import annotations


class NukiError(Exception):
    """Base exception for all pynukimqtt errors."""


class NukiConfigError(NukiError):
    """Invalid or missing configuration."""


class NukiUnsupportedFieldError(NukiError, ValueError):
    """A command was requested for a field that does not accept commands.

    Raised by :meth:`pynukimqtt.device.NukiLock.request_action` when the host
    asks to write anything other than the lock action field.  This points at
    a UI/config mismatch, so it is surfaced to the caller instead of being
    dropped.
    """

    def __init__(self, field_name: str) -> None:
        self.field_name = field_name
        super().__init__(f"Unsupported field: {field_name!r}")


class NukiUnsupportedActionError(NukiError, ValueError):
    """A lock action value is not one of unlock/lock/unlatch."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unsupported lock action: {value!r}")


class NukiTransportError(NukiError):
    """MQTT transport failure (runtime not started, paho error code)."""

    def __init__(
        self,
        message: str,
        *,
        topic: str = "",
        rc: int | None = None,
    ) -> None:
        self.topic = topic
        self.rc = rc
        super().__init__(message)
