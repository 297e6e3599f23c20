"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import Configuration, SchemaTarget

DEFAULT_OUTPUT_DIR = "schemas"
DEFAULT_INDENT = 2


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    output_dir_value = _require_non_empty_string(
        parsed.get("output_dir", DEFAULT_OUTPUT_DIR), "output_dir"
    )
    schema_uri = _optional_string(parsed.get("schema_uri"), "schema_uri")
    indent = _require_positive_int(parsed.get("indent", DEFAULT_INDENT), "indent")
    targets = _parse_targets_section(parsed.get("targets"))

    return Configuration(
        path=path,
        output_dir=_resolve_path(path.parent, output_dir_value),
        schema_uri=schema_uri,
        indent=indent,
        targets=targets,
    )


def _parse_targets_section(value: Any) -> tuple[SchemaTarget, ...]:
    section = _require_mapping(value, "targets")
    if not section:
        raise ConfigurationError("targets must contain at least one entry.")
    targets: list[SchemaTarget] = []
    for raw_name, raw_type_path in section.items():
        name = _require_non_empty_string(raw_name, "targets key")
        if "/" in name or "\\" in name:
            raise ConfigurationError(f"targets.{name} must not contain path separators.")
        type_path = _require_non_empty_string(raw_type_path, f"targets.{name}")
        module_name, separator, qualified_name = type_path.partition(":")
        if not separator or not module_name.strip() or not qualified_name.strip():
            raise ConfigurationError(
                f"targets.{name} must use the form 'module:QualifiedName', got '{type_path}'."
            )
        targets.append(SchemaTarget(name=name, type_path=type_path))
    return tuple(targets)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
