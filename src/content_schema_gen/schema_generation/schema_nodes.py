"""Schema node variants and their JSON rendering."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias

DEFINITIONS_POINTER = "#/definitions/"


@dataclass(frozen=True)
class NullNode:
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        return _with_description({"type": "null"}, self.description)


@dataclass(frozen=True)
class PrimitiveNode:
    """Primitive value, optionally a string with a format or a bounded integer."""

    json_type: str
    format: str | None = None
    minimum: int | None = None
    maximum: int | None = None
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        rendered = _with_description({"type": self.json_type}, self.description)
        if self.format is not None:
            rendered["format"] = self.format
        if self.minimum is not None:
            rendered["minimum"] = self.minimum
        if self.maximum is not None:
            rendered["maximum"] = self.maximum
        return rendered


@dataclass(frozen=True)
class ArrayNode:
    items: SchemaNode
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        rendered = _with_description({"type": "array"}, self.description)
        rendered["items"] = self.items.to_json()
        return rendered


@dataclass(frozen=True)
class MapNode:
    """String-keyed map; only the value schema varies."""

    values: SchemaNode
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        rendered = _with_description({"type": "object"}, self.description)
        rendered["additionalProperties"] = self.values.to_json()
        return rendered


@dataclass(frozen=True)
class EnumNode:
    variants: tuple[str, ...]
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        rendered = _with_description({"type": "string"}, self.description)
        rendered["enum"] = list(self.variants)
        return rendered


@dataclass(frozen=True)
class ObjectNode:
    """Record schema with ordered properties."""

    properties: Mapping[str, SchemaNode] = field(default_factory=dict)
    required: tuple[str, ...] = ()
    additional_properties: bool = False
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {
            "type": "object",
            "additionalProperties": self.additional_properties,
        }
        if self.description is not None:
            rendered["description"] = self.description
        rendered["properties"] = {name: node.to_json() for name, node in self.properties.items()}
        if self.required:
            rendered["required"] = list(self.required)
        return rendered


@dataclass(frozen=True)
class RefNode:
    definition_name: str
    description: str | None = None

    @property
    def pointer(self) -> str:
        return f"{DEFINITIONS_POINTER}{self.definition_name}"

    def to_json(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {"$ref": self.pointer}
        if self.description is not None:
            rendered["description"] = self.description
        return rendered


@dataclass(frozen=True)
class OneOfNode:
    alternatives: tuple[SchemaNode, ...]
    description: str | None = None

    def to_json(self) -> dict[str, Any]:
        rendered: dict[str, Any] = {}
        if self.description is not None:
            rendered["description"] = self.description
        rendered["oneOf"] = [alternative.to_json() for alternative in self.alternatives]
        return rendered


SchemaNode: TypeAlias = (
    NullNode | PrimitiveNode | ArrayNode | MapNode | EnumNode | ObjectNode | RefNode | OneOfNode
)


def with_description(node: SchemaNode, description: str) -> SchemaNode:
    """Return a copy of ``node`` carrying ``description``."""
    return replace(node, description=description)


def _with_description(rendered: dict[str, Any], description: str | None) -> dict[str, Any]:
    if description is not None:
        rendered["description"] = description
    return rendered
