"""Fixed schemas for primitive kinds."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from content_schema_gen.type_description.description_models import PrimitiveKind

from .schema_nodes import PrimitiveNode


def _integer(minimum: int, maximum: int) -> PrimitiveNode:
    return PrimitiveNode(json_type="integer", minimum=minimum, maximum=maximum)


PRIMITIVE_SCHEMAS: Mapping[PrimitiveKind, PrimitiveNode] = MappingProxyType(
    {
        PrimitiveKind.STRING: PrimitiveNode(json_type="string"),
        PrimitiveKind.BOOLEAN: PrimitiveNode(json_type="boolean"),
        PrimitiveKind.INT8: _integer(-(2**7), 2**7 - 1),
        PrimitiveKind.UINT8: _integer(0, 2**8 - 1),
        PrimitiveKind.INT16: _integer(-(2**15), 2**15 - 1),
        PrimitiveKind.UINT16: _integer(0, 2**16 - 1),
        PrimitiveKind.INT32: _integer(-(2**31), 2**31 - 1),
        PrimitiveKind.UINT32: _integer(0, 2**32 - 1),
        PrimitiveKind.INT64: _integer(-(2**63), 2**63 - 1),
        PrimitiveKind.UINT64: _integer(0, 2**64 - 1),
        PrimitiveKind.INTEGER: PrimitiveNode(json_type="integer"),
        PrimitiveKind.FLOAT: PrimitiveNode(json_type="number"),
        PrimitiveKind.DOUBLE: PrimitiveNode(json_type="number"),
        PrimitiveKind.DECIMAL: PrimitiveNode(json_type="number"),
        PrimitiveKind.DATE_TIME: PrimitiveNode(json_type="string", format="date-time"),
        PrimitiveKind.DATE_TIME_OFFSET: PrimitiveNode(json_type="string", format="date-time"),
        PrimitiveKind.BYTES: PrimitiveNode(json_type="string"),
        PrimitiveKind.TYPE_REFERENCE: PrimitiveNode(json_type="string"),
        PrimitiveKind.UUID: PrimitiveNode(json_type="string", format="uuid"),
    }
)


def primitive_schema(kind: PrimitiveKind | None) -> PrimitiveNode | None:
    """Return the schema for ``kind``, or None when the kind has no fixed schema."""
    if kind is None:
        return None
    return PRIMITIVE_SCHEMAS.get(kind)
