"""Schema export entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ExportedSchema:
    """One schema document written to disk."""

    target_name: str
    output_path: Path
    definition_count: int
