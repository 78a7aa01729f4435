"""Decoder for ``lockActionEvent`` status lines.

The lock publishes the most recent physical action as a comma-separated
line: ``action,trigger,auth_id,code_id,auto_unlock``. Only the first two
fields are shown to users.
"""

from __future__ import annotations

from typing import Any

from pynukimqtt.ingestion.normalize import payload_text
from pynukimqtt.models.lock import EventAction, EventTrigger

_MIN_FIELDS = 2


def _label(enum_cls: type[EventAction] | type[EventTrigger], code: str) -> str:
    # Unmapped codes render as the bare code text.
    label = enum_cls.label_for(code) if code.isdigit() else None
    return label if label is not None else code


def decode_lock_event(payload: Any) -> str | None:
    """Return ``"<action> via <trigger>"`` or ``None`` for a short line.

    >>> decode_lock_event("2,1,0,0,0")
    'Lock via System'
    >>> decode_lock_event("172,6")
    '172 via Auto Lock'
    """
    text = payload_text(payload)
    if text is None:
        return None
    parts = [part.strip() for part in text.split(",")]
    if len(parts) < _MIN_FIELDS:
        return None
    action = _label(EventAction, parts[0])
    trigger = _label(EventTrigger, parts[1])
    return f"{action} via {trigger}"
