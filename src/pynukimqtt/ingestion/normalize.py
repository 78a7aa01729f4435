"""Normalization helpers.

Centralizes permissive payload parsing. Every helper returns ``None`` for
input it cannot interpret instead of raising, so a malformed MQTT payload
never reaches further than the router.
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import Any, TypeVar

from pynukimqtt._constants import TRUE_LITERAL

TEnum = TypeVar("TEnum", bound=IntEnum)


def payload_text(payload: Any) -> str | None:
    """Decode an MQTT payload to stripped text.

    ``bytes``/``bytearray``/``memoryview`` are decoded as UTF-8 with invalid
    sequences replaced. ``None`` stays ``None``.
    """
    if payload is None:
        return None
    if isinstance(payload, memoryview):
        payload = payload.tobytes()
    if isinstance(payload, (bytes, bytearray)):
        return bytes(payload).decode("utf-8", errors="replace").strip()
    return str(payload).strip()


def safe_float(value: Any) -> float | None:
    if value is None or value == "":
        return None
    try:
        result = float(value)
    except (TypeError, ValueError):
        return None
    if math.isnan(result) or math.isinf(result):
        return None
    return result


def safe_int(value: Any) -> int | None:
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    parsed = safe_float(value)
    if parsed is None:
        return None
    return int(parsed)


def parse_true_literal(value: Any) -> bool:
    """Return ``True`` only for the exact literal ``"true"``."""
    return value == TRUE_LITERAL


def clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


def to_enum(enum_cls: type[TEnum], value: Any, default: TEnum | None = None) -> TEnum | int | None:
    parsed = safe_int(value)
    if parsed is None:
        return default
    try:
        return enum_cls(parsed)
    except ValueError:
        return parsed
