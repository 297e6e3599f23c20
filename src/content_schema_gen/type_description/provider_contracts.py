"""Type description provider contract."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from .description_models import MemberDescriptor, TypeDescription


class TypeDescriptionProvider(Protocol):
    """Answers shape questions about the types of one program.

    Member lists are queried lazily, one composite at a time, so that a
    provider can describe cyclic type graphs without building them eagerly.
    """

    def describe(self, type_ref: object) -> TypeDescription:
        """Return the description of ``type_ref``."""

    def members(self, description: TypeDescription) -> Sequence[MemberDescriptor]:
        """Return the members of a composite type in enumeration order.

        Raises:
          MemberResolutionError: If a member type cannot be resolved.
        """

    def has_string_conversion(self, description: TypeDescription) -> bool:
        """Return whether the type converts to and from strings."""


class MemberResolutionError(Exception):
    """Raised by providers when the members of a composite cannot be enumerated."""
