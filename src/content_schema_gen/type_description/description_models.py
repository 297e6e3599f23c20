"""Type description entities consumed by the schema registry."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from enum import Enum


class TypeShape(str, Enum):
    """Closed set of shape classifications a provider can report."""

    PRIMITIVE = "primitive"
    ARRAY = "array"
    GENERIC = "generic"
    ENUM = "enum"
    OBJECT = "object"
    UNSUPPORTED = "unsupported"


class PrimitiveKind(str, Enum):
    """Primitive kinds with a fixed schema representation."""

    STRING = "string"
    BOOLEAN = "boolean"
    INT8 = "int8"
    UINT8 = "uint8"
    INT16 = "int16"
    UINT16 = "uint16"
    INT32 = "int32"
    UINT32 = "uint32"
    INT64 = "int64"
    UINT64 = "uint64"
    INTEGER = "integer"
    FLOAT = "float"
    DOUBLE = "double"
    DECIMAL = "decimal"
    DATE_TIME = "date_time"
    DATE_TIME_OFFSET = "date_time_offset"
    BYTES = "bytes"
    TYPE_REFERENCE = "type_reference"
    UUID = "uuid"


@dataclass(frozen=True)
class TypeDescription:  # pylint: disable=too-many-instance-attributes
    """Shape of one type as reported by a type description provider."""

    shape: TypeShape
    identity: str | None = None
    nullable: bool = False
    primitive: PrimitiveKind | None = None
    element: TypeDescription | None = None
    rank: int = 1
    generic_origin: str | None = None
    type_arguments: tuple[TypeDescription, ...] = ()
    enum_variants: tuple[str, ...] = ()
    description: str | None = None
    source: object = field(default=None, compare=False, repr=False)

    def non_nullable(self) -> TypeDescription:
        """Return the same description without the nullable flag."""
        if not self.nullable:
            return self
        return replace(self, nullable=False)


@dataclass(frozen=True)
class MemberDescriptor:  # pylint: disable=too-many-instance-attributes
    """One field or property of a composite type."""

    name: str
    type: TypeDescription
    required: bool = False
    ignored: bool = False
    override_name: str | None = None
    description: str | None = None
    public: bool = True
    included: bool = False

    @property
    def exposed_name(self) -> str:
        return self.override_name or self.name
