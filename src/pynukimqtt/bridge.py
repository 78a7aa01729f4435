"""High-level async bridge between a broker and one Nuki lock."""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from pynukimqtt._mqtt import NukiMqttRuntime
from pynukimqtt.commands import OutboundMessage
from pynukimqtt.config import MqttConnectionConfig, NukiConfig
from pynukimqtt.device import NukiLock
from pynukimqtt.exceptions import NukiError
from pynukimqtt.models.lock import LockSnapshot
from pynukimqtt.state.store import UpdateListener

_logger = logging.getLogger(__name__)


class NukiBridge:
    """Async bridge owning the MQTT runtime and the lock controller.

    Usage::

        async with NukiBridge(NukiConfig(), MqttConnectionConfig(host="broker")) as bridge:
            bridge.unlock()
            print(bridge.state.lock_state)
    """

    def __init__(
        self,
        config: NukiConfig,
        connection: MqttConnectionConfig,
        *,
        on_update: UpdateListener | None = None,
        runtime: NukiMqttRuntime | None = None,
    ) -> None:
        self._config = config
        self._connection = connection
        self._on_update = on_update
        self._runtime = runtime
        self._lock: NukiLock | None = None

    async def __aenter__(self) -> NukiBridge:
        loop = asyncio.get_running_loop()
        if self._runtime is None:
            self._runtime = NukiMqttRuntime(on_message=self._on_message, loop=loop, logger=_logger)
        self._lock = NukiLock(self._config, self._runtime, on_update=self._on_update)
        await loop.run_in_executor(None, self._runtime.start, self._connection, self._lock.subscription_filter)
        return self

    async def __aexit__(self, *exc: Any) -> None:
        runtime = self._runtime
        if runtime is not None:
            await asyncio.get_running_loop().run_in_executor(None, runtime.stop)
        self._lock = None

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _require_lock(self) -> NukiLock:
        if self._lock is None:
            raise NukiError("Bridge not started. Use 'async with NukiBridge(...) as bridge:'")
        return self._lock

    def _on_message(self, topic: str, payload: bytes) -> None:
        lock = self._lock
        if lock is None:
            return
        lock.handle_message(topic, payload)

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def lock_device(self) -> NukiLock:
        return self._require_lock()

    @property
    def state(self) -> LockSnapshot:
        return self._require_lock().state

    def lock(self) -> OutboundMessage:
        return self._require_lock().lock()

    def unlock(self) -> OutboundMessage:
        return self._require_lock().unlock()

    def unlatch(self) -> OutboundMessage:
        return self._require_lock().unlatch()

    def request_action(self, field_name: str, value: Any) -> OutboundMessage:
        return self._require_lock().request_action(field_name, value)

    def reconfigure(self, config: NukiConfig) -> None:
        """Switch device identity and move the broker subscription along."""
        new_filter = self._require_lock().reconfigure(config)
        self._config = config
        if self._runtime is not None:
            self._runtime.resubscribe(new_filter)
