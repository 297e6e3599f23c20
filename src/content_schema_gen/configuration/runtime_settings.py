"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class SchemaTarget:
    """One root type exported to ``<name>.schema.json``."""

    name: str
    type_path: str


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    output_dir: Path
    schema_uri: str | None
    indent: int
    targets: tuple[SchemaTarget, ...]
