"""In-memory state store for one lock.

This is the only component allowed to write lock fields.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import Any

from pynukimqtt.models.lock import LockField, LockSnapshot
from pynukimqtt.state.events import FieldUpdate, UpdateSource

_logger = logging.getLogger(__name__)

UpdateListener = Callable[[FieldUpdate], None]


class LockStateStore:
    """Holds the current value of every lock field.

    Updates overwrite; nothing accumulates. Applying the same update twice
    leaves the store exactly as applying it once, and the listener is only
    told about updates that actually changed a value.
    """

    def __init__(self, *, listener: UpdateListener | None = None) -> None:
        self._snapshot = LockSnapshot()
        self._sources: dict[LockField, UpdateSource] = {}
        self._listener = listener

    @property
    def listener(self) -> UpdateListener | None:
        return self._listener

    @listener.setter
    def listener(self, value: UpdateListener | None) -> None:
        self._listener = value

    def apply(self, update: FieldUpdate) -> bool:
        """Apply *update*; return ``True`` when the field value changed."""
        previous = getattr(self._snapshot, update.field.value)
        setattr(self._snapshot, update.field.value, update.value)
        self._sources[update.field] = update.source

        current = getattr(self._snapshot, update.field.value)
        changed = current != previous or type(current) is not type(previous)
        if changed and self._listener is not None:
            try:
                self._listener(update)
            except Exception:
                _logger.debug("State listener failed for %s", update.field, exc_info=True)
        return changed

    def set(self, field: LockField, value: Any, *, source: UpdateSource = UpdateSource.HOST) -> bool:
        """Write *value* to *field* directly."""
        return self.apply(FieldUpdate(field=field, value=value, source=source))

    def get(self, field: LockField) -> Any:
        return getattr(self._snapshot, field.value)

    def source_of(self, field: LockField) -> UpdateSource | None:
        """Source of the last applied update for *field*."""
        return self._sources.get(field)

    def snapshot(self) -> LockSnapshot:
        """Return a detached copy of the current state."""
        return self._snapshot.model_copy()

    def clear(self) -> None:
        self._snapshot = LockSnapshot()
        self._sources.clear()
