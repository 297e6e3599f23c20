"""Schema export exports."""

from .export_models import ExportedSchema
from .schema_file_writer import SchemaExportError, export_schemas, render_schema_text
from .target_resolver import TargetResolutionError, resolve_target_type

__all__ = [
    "ExportedSchema",
    "SchemaExportError",
    "TargetResolutionError",
    "export_schemas",
    "render_schema_text",
    "resolve_target_type",
]
