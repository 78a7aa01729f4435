"""Outbound command encoding.

A lock action becomes one publish on ``<base_topic>/<device_id>/lockAction``
whose payload is the action's decimal code.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pynukimqtt.config import NukiConfig
from pynukimqtt.exceptions import NukiUnsupportedActionError
from pynukimqtt.models.lock import LockAction


@dataclass(frozen=True)
class OutboundMessage:
    """A message ready to hand to the transport."""

    topic: str
    payload: str
    qos: int = 0
    retain: bool = False


def coerce_action(value: Any) -> LockAction:
    """Convert ``LockAction``/int/numeric string to :class:`LockAction`.

    Raises :class:`NukiUnsupportedActionError` for anything else.
    """
    if isinstance(value, LockAction):
        return value
    if isinstance(value, bool):
        raise NukiUnsupportedActionError(value)
    if isinstance(value, int):
        code = value
    elif isinstance(value, str) and value.strip().isdigit():
        code = int(value.strip())
    else:
        raise NukiUnsupportedActionError(value)
    try:
        return LockAction(code)
    except ValueError:
        raise NukiUnsupportedActionError(value) from None


class CommandEncoder:
    """Build ``lockAction`` messages for one configured lock."""

    def __init__(self, config: NukiConfig) -> None:
        self._config = config

    @property
    def config(self) -> NukiConfig:
        return self._config

    def encode(self, action: LockAction | int | str) -> OutboundMessage:
        code = coerce_action(action)
        return OutboundMessage(topic=self._config.command_topic, payload=str(int(code)))
