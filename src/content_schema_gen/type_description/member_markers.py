"""Annotation markers understood by the annotation type provider."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Annotated, TypeVar

from .description_models import PrimitiveKind

SCHEMA_DESCRIPTION_ATTRIBUTE = "__schema_description__"

_ClassT = TypeVar("_ClassT", bound=type)


@dataclass(frozen=True)
class SchemaField:
    """Per-member schema metadata, attached with ``typing.Annotated``.

    Attributes:
      name: Exposed property name overriding the attribute name.
      required: Lists the member under ``required``.
      ignore: Leaves the member out of the schema.
      include: Opts a non-public (underscore) member into the schema.
      description: Human-readable description of the member.
    """

    name: str | None = None
    required: bool = False
    ignore: bool = False
    include: bool = False
    description: str | None = None


def schema_description(text: str) -> Callable[[_ClassT], _ClassT]:
    """Attach a type-level description to a class or enum."""

    def _decorate(cls: _ClassT) -> _ClassT:
        setattr(cls, SCHEMA_DESCRIPTION_ATTRIBUTE, text)
        return cls

    return _decorate


Int8 = Annotated[int, PrimitiveKind.INT8]
UInt8 = Annotated[int, PrimitiveKind.UINT8]
Int16 = Annotated[int, PrimitiveKind.INT16]
UInt16 = Annotated[int, PrimitiveKind.UINT16]
Int32 = Annotated[int, PrimitiveKind.INT32]
UInt32 = Annotated[int, PrimitiveKind.UINT32]
Int64 = Annotated[int, PrimitiveKind.INT64]
UInt64 = Annotated[int, PrimitiveKind.UINT64]
Float32 = Annotated[float, PrimitiveKind.FLOAT]
