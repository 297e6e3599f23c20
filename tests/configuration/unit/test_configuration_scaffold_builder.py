"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from content_schema_gen.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_placeholder_configuration_lists_sections_with_guidance() -> None:
    scaffold = build_placeholder_configuration()
    parsed = yaml.safe_load(scaffold)

    assert parsed["output_dir"] == "schemas"
    assert parsed["indent"] == 2
    assert parsed["targets"] == {"<REQUIRED>": "<REQUIRED>"}
    assert "schema_uri" not in parsed
    assert "module:QualifiedName" in scaffold


def test_write_placeholder_configuration_refuses_to_overwrite(tmp_path: Path) -> None:
    destination = tmp_path / "config.yaml"

    written = write_placeholder_configuration(destination)

    assert written == destination.resolve()
    assert destination.read_text(encoding="utf-8") == build_placeholder_configuration()
    with pytest.raises(FileExistsError):
        write_placeholder_configuration(destination)
