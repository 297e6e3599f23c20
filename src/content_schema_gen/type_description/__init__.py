"""Type description exports."""

from .annotation_provider import AnnotationTypeProvider
from .description_models import MemberDescriptor, PrimitiveKind, TypeDescription, TypeShape
from .manual_catalog import (
    CatalogLookupError,
    ManualTypeCatalog,
    array_type,
    enum_type,
    generic_type,
    member,
    nullable,
    object_type,
    primitive_type,
    unsupported_type,
)
from .member_markers import (
    Float32,
    Int8,
    Int16,
    Int32,
    Int64,
    SchemaField,
    UInt8,
    UInt16,
    UInt32,
    UInt64,
    schema_description,
)
from .provider_contracts import MemberResolutionError, TypeDescriptionProvider
from .string_conversions import StringConversion, StringConversionRegistry

__all__ = [
    "AnnotationTypeProvider",
    "CatalogLookupError",
    "Float32",
    "Int8",
    "Int16",
    "Int32",
    "Int64",
    "ManualTypeCatalog",
    "MemberDescriptor",
    "MemberResolutionError",
    "PrimitiveKind",
    "SchemaField",
    "StringConversion",
    "StringConversionRegistry",
    "TypeDescription",
    "TypeDescriptionProvider",
    "TypeShape",
    "UInt8",
    "UInt16",
    "UInt32",
    "UInt64",
    "array_type",
    "enum_type",
    "generic_type",
    "member",
    "nullable",
    "object_type",
    "primitive_type",
    "schema_description",
    "unsupported_type",
]
