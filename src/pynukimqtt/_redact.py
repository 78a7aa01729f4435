"""Log-safe view of broker connection settings."""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from pynukimqtt.config import MqttConnectionConfig

REDACTED = "<redacted>"


def redact_connection(connection: MqttConnectionConfig) -> dict[str, Any]:
    """Return the connection fields with the broker password masked.

    An unset password stays ``None`` so logs still show whether
    authentication was configured.
    """
    fields = asdict(connection)
    if connection.password is not None:
        fields["password"] = REDACTED
    fields["port"] = connection.effective_port
    return fields
