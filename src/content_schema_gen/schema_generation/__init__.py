"""Schema generation exports."""

from .definition_registry import LIST_LIKE_ORIGINS, MAP_LIKE_ORIGINS, SchemaRegistry
from .generation_errors import (
    MissingTypeIdentityError,
    SchemaGenerationError,
    UnsupportedKeyTypeError,
    UnsupportedShapeError,
    UnsupportedTypeError,
)
from .primitive_table import PRIMITIVE_SCHEMAS, primitive_schema
from .schema_document import SchemaDocument, generate_schema_document
from .schema_nodes import (
    DEFINITIONS_POINTER,
    ArrayNode,
    EnumNode,
    MapNode,
    NullNode,
    ObjectNode,
    OneOfNode,
    PrimitiveNode,
    RefNode,
    SchemaNode,
    with_description,
)

__all__ = [
    "DEFINITIONS_POINTER",
    "LIST_LIKE_ORIGINS",
    "MAP_LIKE_ORIGINS",
    "PRIMITIVE_SCHEMAS",
    "ArrayNode",
    "EnumNode",
    "MapNode",
    "MissingTypeIdentityError",
    "NullNode",
    "ObjectNode",
    "OneOfNode",
    "PrimitiveNode",
    "RefNode",
    "SchemaDocument",
    "SchemaGenerationError",
    "SchemaNode",
    "SchemaRegistry",
    "UnsupportedKeyTypeError",
    "UnsupportedShapeError",
    "UnsupportedTypeError",
    "generate_schema_document",
    "primitive_schema",
    "with_description",
]
