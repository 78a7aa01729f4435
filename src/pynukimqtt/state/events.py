"""Normalized field updates.

The router and the command entry points both convert their inputs into
these updates. Only the state/store layer is allowed to apply them.
"""

from __future__ import annotations

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from pynukimqtt.models.lock import LockField


class UpdateSource(StrEnum):
    MQTT = "mqtt"
    OPTIMISTIC = "optimistic"
    HOST = "host"


class FieldUpdate(BaseModel):
    """A single decoded value for one lock field."""

    model_config = ConfigDict(frozen=True)

    field: LockField
    value: Any
    source: UpdateSource = UpdateSource.MQTT
    topic: str = Field(default="", description="Topic the value arrived on, if any")
    observed_at: datetime = Field(default_factory=lambda: datetime.now(UTC))
