"""paho-mqtt transport runtime.

The core never talks to the broker; this module is the transport
collaborator that feeds it. paho handles connection and keepalive on its
own network thread. Inbound messages are marshalled onto an asyncio loop
when one is given, so the lock controller only ever runs on one thread.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from typing import Any, cast

import paho.mqtt.client as mqtt

from pynukimqtt._redact import redact_connection
from pynukimqtt.commands import OutboundMessage
from pynukimqtt.config import MqttConnectionConfig
from pynukimqtt.exceptions import NukiTransportError

MessageHandler = Callable[[str, bytes], None]


class NukiMqttRuntime:
    """Threaded paho-mqtt runtime implementing the ``Publisher`` port."""

    def __init__(
        self,
        *,
        on_message: MessageHandler,
        loop: asyncio.AbstractEventLoop | None = None,
        logger: logging.Logger | None = None,
    ) -> None:
        self._on_message = on_message
        self._loop = loop
        self._logger = logger or logging.getLogger(__name__)
        self._client: mqtt.Client | None = None
        self._running = False
        self._subscription: str | None = None

    @property
    def is_running(self) -> bool:
        """Whether the MQTT runtime is actively running."""
        return self._running

    @property
    def subscription(self) -> str | None:
        return self._subscription

    def start(self, connection: MqttConnectionConfig, subscription: str) -> None:
        """Connect and subscribe to *subscription* once connected."""
        self.stop()
        self._logger.debug(
            "MQTT runtime start requested connection=%s subscription=%s",
            redact_connection(connection),
            subscription,
        )

        client = mqtt.Client(
            callback_api_version=cast(Any, mqtt).CallbackAPIVersion.VERSION2,
            client_id=connection.client_id,
            protocol=mqtt.MQTTv311,
        )
        client.enable_logger(self._logger)
        if connection.username:
            client.username_pw_set(connection.username, connection.password)
        if connection.tls:
            client.tls_set()

        self._subscription = subscription

        def on_connect(
            c: mqtt.Client,
            _userdata: Any,
            _flags: Any,
            reason_code: Any,
            _properties: Any,
        ) -> None:
            if reason_code.value != 0:
                self._logger.warning("MQTT connect failed: %s", reason_code)
                return
            self._logger.debug("MQTT connected successfully reason=%s", reason_code)
            # Re-subscribe on every (re)connect; paho does not keep subscriptions for us.
            if self._subscription:
                self._logger.debug("MQTT subscribing filter=%s", self._subscription)
                c.subscribe(self._subscription, qos=0)

        def on_message(_c: mqtt.Client, _userdata: Any, msg: mqtt.MQTTMessage) -> None:
            self._dispatch(msg.topic, msg.payload)

        def on_disconnect(
            _client: mqtt.Client,
            _userdata: Any,
            _disconnect_flags: Any,
            reason_code: Any,
            _properties: Any,
        ) -> None:
            if self._running:
                self._logger.debug("MQTT disconnected: %s", reason_code)

        client.on_connect = on_connect
        client.on_message = on_message
        client.on_disconnect = on_disconnect

        client.connect(connection.host, connection.effective_port, keepalive=connection.keepalive)
        client.loop_start()

        self._client = client
        self._running = True
        self._logger.debug("MQTT network loop started")

    def _dispatch(self, topic: str, payload: bytes) -> None:
        if self._loop is None:
            self._deliver(topic, payload)
            return
        self._loop.call_soon_threadsafe(self._deliver, topic, payload)

    def _deliver(self, topic: str, payload: bytes) -> None:
        try:
            self._on_message(topic, payload)
        except Exception:
            self._logger.debug("MQTT message handler failed topic=%s", topic, exc_info=True)

    def resubscribe(self, subscription: str) -> None:
        """Move the subscription to *subscription* (after a reconfiguration)."""
        previous = self._subscription
        self._subscription = subscription
        client = self._client
        if client is None or previous == subscription:
            return
        if previous:
            client.unsubscribe(previous)
        client.subscribe(subscription, qos=0)
        self._logger.debug("MQTT subscription moved %s -> %s", previous, subscription)

    def publish(self, message: OutboundMessage) -> None:
        """Queue *message* for sending without waiting for delivery."""
        client = self._client
        if client is None or not self._running:
            raise NukiTransportError("MQTT runtime is not running", topic=message.topic)
        info = client.publish(message.topic, message.payload, qos=message.qos, retain=message.retain)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            self._logger.warning("MQTT publish to %s not queued: %s", message.topic, mqtt.error_string(info.rc))

    def stop(self) -> None:
        """Stop and disconnect current MQTT client if running."""
        client = self._client
        self._client = None
        was_running = self._running
        self._running = False

        if client is None:
            return
        try:
            if was_running:
                self._logger.debug("MQTT disconnect requested")
                client.disconnect()
        finally:
            client.loop_stop()
            self._logger.debug("MQTT network loop stopped")
