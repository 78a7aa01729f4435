"""Bridge configuration for pynukimqtt."""

from __future__ import annotations

import dataclasses
import os
from typing import Any

from pynukimqtt._constants import (
    DEFAULT_BASE_TOPIC,
    DEFAULT_DEVICE_ID,
    DEFAULT_MQTT_KEEPALIVE,
    DEFAULT_MQTT_PORT,
    DEFAULT_MQTT_TLS_PORT,
    MQTT_WILDCARDS,
    SUFFIX_LOCK_ACTION,
)
from pynukimqtt.exceptions import NukiConfigError


def _env_bool(value: str | None, default: bool) -> bool:
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "y", "on"}:
        return True
    if normalized in {"0", "false", "no", "n", "off"}:
        return False
    return default


def _normalize_segment(name: str, value: str) -> str:
    if not isinstance(value, str):
        raise NukiConfigError(f"{name} must be a string, got {type(value).__name__}")
    segment = value.strip().strip("/")
    if not segment:
        raise NukiConfigError(f"{name} must be non-empty")
    if any(ch in segment for ch in MQTT_WILDCARDS):
        raise NukiConfigError(f"{name} must not contain MQTT wildcards: {value!r}")
    return segment


@dataclasses.dataclass(frozen=True)
class NukiConfig:
    """Device identity of one bridged lock.

    Parameters
    ----------
    base_topic : str
        Root segment of the lock's MQTT namespace. Defaults to ``"nuki"``.
        May itself contain ``/`` (e.g. ``"home/nuki"``).
    device_id : str
        Device-specific segment (the Nuki ID in hex).

    All topic strings are derived from these two values, so a new config
    object is the only way to change them at runtime.
    """

    base_topic: str = DEFAULT_BASE_TOPIC
    device_id: str = DEFAULT_DEVICE_ID

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_topic", _normalize_segment("base_topic", self.base_topic))
        object.__setattr__(self, "device_id", _normalize_segment("device_id", self.device_id))

    @property
    def topic_root(self) -> str:
        """Namespace prefix, always ending in ``/``."""
        return f"{self.base_topic}/{self.device_id}/"

    @property
    def subscription_filter(self) -> str:
        """MQTT filter covering every topic of this device."""
        return f"{self.topic_root}#"

    @property
    def command_topic(self) -> str:
        return f"{self.topic_root}{SUFFIX_LOCK_ACTION}"

    def topic_for(self, suffix: str) -> str:
        return f"{self.topic_root}{suffix}"

    @classmethod
    def from_env(cls, **overrides: Any) -> NukiConfig:
        """Create configuration from ``NUKI_BASE_TOPIC`` / ``NUKI_DEVICE_ID``.

        Explicit keyword arguments override environment values.
        """
        env = os.environ
        kwargs: dict[str, Any] = {}
        for env_key, field_name in (("NUKI_BASE_TOPIC", "base_topic"), ("NUKI_DEVICE_ID", "device_id")):
            val = env.get(env_key)
            if val is not None:
                kwargs[field_name] = val
        kwargs.update(overrides)
        return cls(**kwargs)


@dataclasses.dataclass(frozen=True)
class MqttConnectionConfig:
    """Broker connection settings for the bundled paho-mqtt runtime.

    Only used by :class:`pynukimqtt._mqtt.NukiMqttRuntime`; the core
    routing and encoding code never touches the broker.

    Parameters
    ----------
    host : str
        Broker host name.
    port : int or None
        Broker port. ``None`` picks 1883, or 8883 when ``tls`` is set.
    username, password : str or None
        Optional broker credentials.
    client_id : str
        MQTT client id. Empty lets paho generate one.
    keepalive : int
        Keepalive interval in seconds.
    tls : bool
        Enable TLS with the system CA bundle.
    """

    host: str = "localhost"
    port: int | None = None
    username: str | None = None
    password: str | None = None
    client_id: str = ""
    keepalive: int = DEFAULT_MQTT_KEEPALIVE
    tls: bool = False

    @property
    def effective_port(self) -> int:
        if self.port is not None:
            return self.port
        return DEFAULT_MQTT_TLS_PORT if self.tls else DEFAULT_MQTT_PORT

    @classmethod
    def from_env(cls, **overrides: Any) -> MqttConnectionConfig:
        """Create broker settings from ``NUKI_MQTT_*`` environment variables."""
        env = os.environ

        _ENV_CONFIG_MAP = {
            "NUKI_MQTT_HOST": "host",
            "NUKI_MQTT_USERNAME": "username",
            "NUKI_MQTT_PASSWORD": "password",
            "NUKI_MQTT_CLIENT_ID": "client_id",
        }
        config_kwargs: dict[str, Any] = {}
        for env_key, field_name in _ENV_CONFIG_MAP.items():
            val = env.get(env_key)
            if val is not None:
                config_kwargs[field_name] = val

        port_env = env.get("NUKI_MQTT_PORT")
        if port_env is not None and "port" not in overrides:
            config_kwargs["port"] = int(port_env)

        keepalive_env = env.get("NUKI_MQTT_KEEPALIVE")
        if keepalive_env is not None and "keepalive" not in overrides:
            config_kwargs["keepalive"] = int(keepalive_env)

        if "tls" not in overrides:
            config_kwargs["tls"] = _env_bool(env.get("NUKI_MQTT_TLS"), False)

        config_kwargs.update(overrides)
        return cls(**config_kwargs)
