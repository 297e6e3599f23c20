"""Schema export service."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from content_schema_gen.configuration.runtime_settings import Configuration, SchemaTarget
from content_schema_gen.schema_generation import (
    SchemaDocument,
    SchemaGenerationError,
    generate_schema_document,
)
from content_schema_gen.type_description import AnnotationTypeProvider, TypeDescriptionProvider

from .export_models import ExportedSchema
from .target_resolver import TargetResolutionError, resolve_target_type

logger = logging.getLogger(__name__)

SCHEMA_FILE_SUFFIX = ".schema.json"


class SchemaExportError(Exception):
    """Raised when a target schema cannot be generated or written."""


def render_schema_text(
    type_ref: object,
    *,
    provider: TypeDescriptionProvider | None = None,
    schema_uri: str | None = None,
    indent: int = 2,
) -> str:
    """Generate one schema document and return it as JSON text."""
    document = generate_schema_document(type_ref, provider or AnnotationTypeProvider())
    return _dump_document(document, schema_uri=schema_uri, indent=indent)


def export_schemas(
    configuration: Configuration, *, provider: TypeDescriptionProvider | None = None
) -> tuple[ExportedSchema, ...]:
    """Write one schema file per configured target.

    Every target is generated with its own registry; definitions are never
    shared between output files. All targets are generated before the
    first file is written, so a failing target leaves no schema files behind.

    Raises:
      SchemaExportError: If a target cannot be resolved, generated or written.
    """
    resolved_provider = provider or AnnotationTypeProvider()
    documents = [
        (target, _generate_target(target, resolved_provider)) for target in configuration.targets
    ]

    try:
        configuration.output_dir.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise SchemaExportError(
            f"Cannot create output directory {configuration.output_dir}: {exc}"
        ) from exc

    exported: list[ExportedSchema] = []
    for target, document in documents:
        output_path = output_path_for(configuration.output_dir, target.name)
        text = _dump_document(
            document, schema_uri=configuration.schema_uri, indent=configuration.indent
        )
        try:
            output_path.write_text(text, encoding="utf-8")
        except OSError as exc:
            raise SchemaExportError(f"Cannot write schema file {output_path}: {exc}") from exc
        logger.info(
            "Wrote schema for %s to %s (%d definitions)",
            target.type_path,
            output_path,
            len(document.definitions),
        )
        exported.append(
            ExportedSchema(
                target_name=target.name,
                output_path=output_path.resolve(),
                definition_count=len(document.definitions),
            )
        )
    return tuple(exported)


def _generate_target(target: SchemaTarget, provider: TypeDescriptionProvider) -> SchemaDocument:
    try:
        type_ref = resolve_target_type(target.type_path)
        return generate_schema_document(type_ref, provider)
    except (TargetResolutionError, SchemaGenerationError) as exc:
        raise SchemaExportError(f"Target '{target.name}' ({target.type_path}): {exc}") from exc


def _dump_document(document: SchemaDocument, *, schema_uri: str | None, indent: int) -> str:
    return json.dumps(document.to_json(schema_uri), indent=indent, ensure_ascii=False) + "\n"


def output_path_for(output_dir: Path, target_name: str) -> Path:
    return output_dir / f"{target_name}{SCHEMA_FILE_SUFFIX}"
