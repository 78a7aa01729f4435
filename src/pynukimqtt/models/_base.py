"""Base enum for Nuki state codes.

Every Nuki enumeration inherits from :class:`NukiEnum`, which carries a
human-readable ``label`` per member (the text the host shows for the code)
and can render the whole table as a ``{code: label}`` mapping for the
host's value profiles.

Codes the lock sends without a mapped member are not forced into an
``UNKNOWN`` bucket; :meth:`NukiEnum.coerce` hands them back as plain ``int``
so no information is lost.
"""

from __future__ import annotations

import enum
from typing import Any

from pynukimqtt.ingestion.normalize import to_enum


class NukiEnum(enum.IntEnum):
    """Integer enum whose members are declared as ``NAME = code, "Label"``."""

    label: str

    def __new__(cls, value: int, label: str = "") -> NukiEnum:
        obj = int.__new__(cls, value)
        obj._value_ = value
        obj.label = label
        return obj

    @classmethod
    def labels(cls) -> dict[int, str]:
        """Return ``{code: label}`` for every member, in declaration order."""
        return {int(member): member.label or member.name.replace("_", " ").title() for member in cls}

    @classmethod
    def coerce(cls, value: Any) -> NukiEnum | int | None:
        """Map *value* onto a member, keeping unmapped integers as ``int``."""
        return to_enum(cls, value)

    @classmethod
    def label_for(cls, value: Any) -> str | None:
        """Return the label for *value*, or the bare code when unmapped."""
        coerced = cls.coerce(value)
        if coerced is None:
            return None
        if isinstance(coerced, cls):
            return coerced.label
        return str(coerced)
