"""Bidirectional string conversions used to decide map-key eligibility."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class StringConversion:
    """Pair of functions converting a value to and from its string form."""

    to_string: Callable[[Any], str]
    from_string: Callable[[str], Any]


class StringConversionRegistry:
    """Registered string conversions keyed by type."""

    def __init__(self, *, include_defaults: bool = True) -> None:
        self._conversions: dict[type, StringConversion] = {}
        if include_defaults:
            self.register(int, str, int)
            self.register(Decimal, str, Decimal)
            self.register(uuid.UUID, str, uuid.UUID)
            self.register(datetime, datetime.isoformat, datetime.fromisoformat)

    def register(
        self, target: type, to_string: Callable[[Any], str], from_string: Callable[[str], Any]
    ) -> None:
        self._conversions[target] = StringConversion(to_string=to_string, from_string=from_string)

    def conversion_for(self, target: object) -> StringConversion | None:
        """Return the conversion for ``target`` or None.

        Enum classes convert through their member names without registration.
        """
        if not isinstance(target, type):
            return None
        if target in self._conversions:
            return self._conversions[target]
        if issubclass(target, Enum):
            enum_cls = target
            return StringConversion(
                to_string=lambda member: member.name,
                from_string=lambda name: enum_cls[name],
            )
        return None

    def supports(self, target: object) -> bool:
        return self.conversion_for(target) is not None
