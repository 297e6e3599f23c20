"""Schema registry: turns type descriptions into schema nodes and definitions."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType

from content_schema_gen.type_description.description_models import (
    PrimitiveKind,
    TypeDescription,
    TypeShape,
)
from content_schema_gen.type_description.provider_contracts import (
    MemberResolutionError,
    TypeDescriptionProvider,
)

from .generation_errors import (
    MissingTypeIdentityError,
    UnsupportedKeyTypeError,
    UnsupportedShapeError,
    UnsupportedTypeError,
)
from .primitive_table import primitive_schema
from .schema_nodes import (
    ArrayNode,
    EnumNode,
    MapNode,
    NullNode,
    ObjectNode,
    OneOfNode,
    RefNode,
    SchemaNode,
    with_description,
)

logger = logging.getLogger(__name__)

LIST_LIKE_ORIGINS = frozenset(
    {
        "collections.abc.Iterable",
        "collections.abc.Collection",
        "collections.abc.Sequence",
        "collections.abc.MutableSequence",
        "builtins.list",
        "builtins.tuple",
    }
)

MAP_LIKE_ORIGINS = frozenset(
    {
        "collections.abc.Mapping",
        "collections.abc.MutableMapping",
        "builtins.dict",
        "builtins.mappingproxy",
        "collections.OrderedDict",
        "collections.defaultdict",
    }
)


class SchemaRegistry:
    """Registry of composite definitions discovered during one generation run.

    A definition name is inserted at most once and never removed. Composite
    types are only ever embedded as references to their definition.
    The registry is not thread-safe; use one instance per run.
    """

    def __init__(self, provider: TypeDescriptionProvider) -> None:
        self._provider = provider
        self._definitions: dict[str, SchemaNode] = {}

    def register_type(self, type_ref: object) -> SchemaNode:
        """Describe ``type_ref`` with the provider and register it."""
        return self.register(self._provider.describe(type_ref))

    def register(self, description: TypeDescription) -> SchemaNode:
        """Return the schema node to embed where ``description`` is used."""
        alternatives = self._create_alternatives(description)
        if len(alternatives) == 1 and not isinstance(alternatives[0], RefNode):
            return alternatives[0]
        # A lone reference stays wrapped in oneOf.
        return OneOfNode(alternatives=tuple(alternatives))

    def definitions(self) -> Mapping[str, SchemaNode]:
        """Return a read-only snapshot of the definitions discovered so far."""
        return MappingProxyType(dict(self._definitions))

    def _create_alternatives(self, description: TypeDescription) -> list[SchemaNode]:
        alternatives: list[SchemaNode] = []
        if description.nullable:
            alternatives.append(NullNode())

        inner = description.non_nullable()
        if inner.shape is TypeShape.PRIMITIVE:
            predefined = primitive_schema(inner.primitive)
            if predefined is not None:
                alternatives.append(predefined)
                return alternatives

        if inner.shape is TypeShape.ARRAY:
            alternatives.append(self._create_array(inner))
            return alternatives

        if inner.shape is TypeShape.GENERIC:
            if inner.generic_origin in LIST_LIKE_ORIGINS:
                alternatives.append(ArrayNode(items=self.register(_argument(inner, 0))))
                return alternatives
            if inner.generic_origin in MAP_LIKE_ORIGINS:
                alternatives.append(self._create_map(inner))
                return alternatives

        alternatives.append(self._create_ref(inner))
        return alternatives

    def _create_array(self, description: TypeDescription) -> ArrayNode:
        if description.rank != 1:
            raise UnsupportedShapeError(
                f"Schema generation does not support multidimensional arrays "
                f"(rank {description.rank})."
            )
        if description.element is None:
            raise UnsupportedShapeError("Array type does not report an element type.")
        return ArrayNode(items=self.register(description.element))

    def _create_map(self, description: TypeDescription) -> MapNode:
        key = _argument(description, 0)
        if not self._is_stringish(key):
            raise UnsupportedKeyTypeError(
                f"Schema generation does not support map keys of type "
                f"{key.identity or key.shape.value}; keys must convert to and from strings."
            )
        return MapNode(values=self.register(_argument(description, 1)))

    def _is_stringish(self, description: TypeDescription) -> bool:
        inner = description.non_nullable()
        if inner.shape is TypeShape.PRIMITIVE and inner.primitive is PrimitiveKind.STRING:
            return True
        return self._provider.has_string_conversion(inner)

    def _create_ref(self, description: TypeDescription) -> RefNode:
        if description.shape not in (TypeShape.ENUM, TypeShape.OBJECT):
            raise UnsupportedTypeError(
                "Type not supported for schema generation: "
                f"{description.identity or description.shape.value}"
            )
        definition_name = description.identity
        if not definition_name:
            raise MissingTypeIdentityError(
                f"Type of shape {description.shape.value} has no qualified name "
                "and cannot be used as a definition."
            )
        if definition_name in self._definitions:
            return RefNode(definition_name=definition_name)

        # Reserve the slot first so self-referencing members resolve to a reference.
        self._definitions[definition_name] = ObjectNode()
        self._definitions[definition_name] = self._create_custom_type_schema(description)
        logger.debug("Registered schema definition %s", definition_name)
        return RefNode(definition_name=definition_name)

    def _create_custom_type_schema(self, description: TypeDescription) -> SchemaNode:
        if description.shape is TypeShape.ENUM:
            return EnumNode(variants=description.enum_variants, description=description.description)
        return self._create_object_schema(description)

    def _create_object_schema(self, description: TypeDescription) -> ObjectNode:
        properties: dict[str, SchemaNode] = {}
        required: list[str] = []
        try:
            candidates = self._provider.members(description)
        except MemberResolutionError as exc:
            raise UnsupportedTypeError(str(exc)) from exc
        for candidate in candidates:
            if candidate.ignored or not (candidate.public or candidate.included):
                continue
            name = candidate.exposed_name
            if candidate.required and name not in required:
                required.append(name)
            schema = self.register(candidate.type)
            if candidate.description is not None:
                schema = with_description(schema, candidate.description)
            properties[name] = schema

        return ObjectNode(
            properties=properties,
            required=tuple(required),
            description=description.description,
        )


def _argument(description: TypeDescription, index: int) -> TypeDescription:
    try:
        return description.type_arguments[index]
    except IndexError as exc:
        raise UnsupportedTypeError(
            f"Generic type {description.generic_origin} is missing type argument {index}."
        ) from exc
