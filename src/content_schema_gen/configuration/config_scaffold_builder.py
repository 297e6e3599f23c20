"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "config.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generation configuration template for content-schema-gen.
# Replace every <REQUIRED> placeholder before running generate.
# Uncomment optional entries only when your setup needs them.

# Directory for the generated <target>.schema.json files, relative to this file.
output_dir: "schemas"

# Value written as "$schema" at the top of every generated document.
# schema_uri: "http://json-schema.org/draft-07/schema#"

# Indentation of the generated JSON.
indent: 2

targets:
  # Each target maps an output name to a root type given as module:QualifiedName.
  # The module must be importable from the current environment.
  "<REQUIRED>": "<REQUIRED>"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generation configuration template with placeholders and guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
