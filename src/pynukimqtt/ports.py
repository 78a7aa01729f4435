"""Collaborator interfaces the lock controller depends on."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from pynukimqtt.commands import OutboundMessage


@runtime_checkable
class Publisher(Protocol):
    """Fire-and-forget MQTT publish.

    Implementations must not block waiting for broker acknowledgement.
    """

    def publish(self, message: OutboundMessage) -> None: ...
