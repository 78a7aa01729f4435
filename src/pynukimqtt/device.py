"""Lock controller tying routing, state and commands together."""

from __future__ import annotations

import logging
from typing import Any

from pynukimqtt.commands import CommandEncoder, OutboundMessage, coerce_action
from pynukimqtt.config import NukiConfig
from pynukimqtt.exceptions import NukiUnsupportedFieldError
from pynukimqtt.ingestion.envelope import parse_envelope
from pynukimqtt.ingestion.router import TopicRouter
from pynukimqtt.models.fields import field_by_ident
from pynukimqtt.models.lock import LockAction, LockField, LockSnapshot
from pynukimqtt.ports import Publisher
from pynukimqtt.state.events import FieldUpdate, UpdateSource
from pynukimqtt.state.store import LockStateStore, UpdateListener

_logger = logging.getLogger(__name__)


class NukiLock:
    """One bridged Nuki lock.

    Inbound messages update the field store; ``lock``/``unlock``/``unlatch``
    publish a ``lockAction`` command and optimistically record the requested
    action, which the next authoritative ``lockState`` supersedes.

    Usage::

        lock = NukiLock(NukiConfig(device_id="45A2F2BF"), publisher)
        lock.handle_message("nuki/45A2F2BF/lockState", b"1")
        lock.unlock()
    """

    def __init__(
        self,
        config: NukiConfig,
        publisher: Publisher,
        *,
        store: LockStateStore | None = None,
        on_update: UpdateListener | None = None,
    ) -> None:
        self._publisher = publisher
        self._store = store if store is not None else LockStateStore()
        if on_update is not None:
            self._store.listener = on_update
        self._apply_config(config)

    def _apply_config(self, config: NukiConfig) -> None:
        self._config = config
        self._router = TopicRouter(config)
        self._encoder = CommandEncoder(config)

    # ------------------------------------------------------------------
    # Properties
    # ------------------------------------------------------------------

    @property
    def config(self) -> NukiConfig:
        return self._config

    @property
    def subscription_filter(self) -> str:
        return self._config.subscription_filter

    @property
    def store(self) -> LockStateStore:
        return self._store

    @property
    def state(self) -> LockSnapshot:
        return self._store.snapshot()

    # ------------------------------------------------------------------
    # Configuration
    # ------------------------------------------------------------------

    def reconfigure(self, config: NukiConfig) -> str:
        """Switch to a new device identity and return the new subscription filter.

        Field values are kept; the caller is responsible for moving the
        transport subscription over to the returned filter.
        """
        previous = self._config.subscription_filter
        self._apply_config(config)
        _logger.debug("Reconfigured lock filter %s -> %s", previous, config.subscription_filter)
        return config.subscription_filter

    # ------------------------------------------------------------------
    # Inbound
    # ------------------------------------------------------------------

    def handle_envelope(self, envelope: Any) -> FieldUpdate | None:
        """Handle a raw transport envelope; incomplete envelopes are dropped."""
        parsed = parse_envelope(envelope)
        if parsed is None:
            _logger.debug("Dropping incomplete MQTT envelope")
            return None
        return self.handle_message(parsed.topic, parsed.payload)

    def handle_message(self, topic: str, payload: Any) -> FieldUpdate | None:
        """Route one message and apply the resulting update, if any."""
        _logger.debug("MQTT In topic=%s payload=%r", topic, payload)
        update = self._router.route(topic, payload)
        if update is None:
            return None
        self._store.apply(update)
        return update

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------

    def lock(self) -> OutboundMessage:
        return self._control(LockAction.LOCK)

    def unlock(self) -> OutboundMessage:
        return self._control(LockAction.UNLOCK)

    def unlatch(self) -> OutboundMessage:
        return self._control(LockAction.UNLATCH)

    def request_action(self, field_name: str, value: Any) -> OutboundMessage:
        """Host entry point for writable fields.

        Only the lock action field accepts writes; any other name raises
        :class:`NukiUnsupportedFieldError`.
        """
        if field_by_ident(field_name) is not LockField.LOCK_ACTION:
            raise NukiUnsupportedFieldError(field_name)
        return self._control(coerce_action(value))

    def _control(self, action: LockAction) -> OutboundMessage:
        message = self._encoder.encode(action)
        _logger.debug("MQTT Out topic=%s payload=%s", message.topic, message.payload)
        self._publisher.publish(message)
        # Only record actions that actually left the bridge.
        self._store.set(LockField.LOCK_ACTION, action, source=UpdateSource.OPTIMISTIC)
        return message
