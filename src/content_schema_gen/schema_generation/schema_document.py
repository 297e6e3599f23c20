"""Schema document assembly."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import Any

from content_schema_gen.type_description.provider_contracts import TypeDescriptionProvider

from .definition_registry import SchemaRegistry
from .schema_nodes import SchemaNode


@dataclass(frozen=True)
class SchemaDocument:
    """Root schema node plus every definition it can reach."""

    root: SchemaNode
    definitions: Mapping[str, SchemaNode]

    def to_json(self, schema_uri: str | None = None) -> dict[str, Any]:
        """Render the document as JSON-compatible data.

        Args:
          schema_uri: Optional ``$schema`` value placed first in the document.

        Returns:
          The root node's keys followed by a ``definitions`` mapping.
        """
        rendered: dict[str, Any] = {}
        if schema_uri:
            rendered["$schema"] = schema_uri
        rendered.update(self.root.to_json())
        rendered["definitions"] = {
            name: node.to_json() for name, node in self.definitions.items()
        }
        return rendered


def generate_schema_document(type_ref: object, provider: TypeDescriptionProvider) -> SchemaDocument:
    """Run one generation for ``type_ref`` with a fresh registry."""
    registry = SchemaRegistry(provider)
    root = registry.register_type(type_ref)
    return SchemaDocument(root=root, definitions=registry.definitions())
