"""Schema export service tests."""

from __future__ import annotations

import json
import logging
import sys
from collections.abc import Iterator
from pathlib import Path

import pytest
from content_schema_gen.configuration import Configuration, SchemaTarget
from content_schema_gen.schema_export import (
    SchemaExportError,
    export_schemas,
    render_schema_text,
)
from content_schema_gen.type_description import (
    ManualTypeCatalog,
    PrimitiveKind,
    member,
    object_type,
    primitive_type,
)

_MODULE_NAME = "export_sample_content"
_MODULE_SOURCE = '''
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Annotated

from content_schema_gen.type_description import SchemaField


@dataclass
class TrashEntry:
    item_key: Annotated[str, SchemaField(required=True)]
    weight: float = 1.0


@dataclass
class TrashPack:
    add: list[TrashEntry] = field(default_factory=list)


@dataclass
class Broken:
    cells: dict[TrashEntry, str]


@dataclass
class Orphan:
    parent: MissingParent
'''


@pytest.fixture
def sample_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[str]:
    module_dir = tmp_path / "modules"
    module_dir.mkdir()
    (module_dir / f"{_MODULE_NAME}.py").write_text(_MODULE_SOURCE, encoding="utf-8")
    monkeypatch.syspath_prepend(str(module_dir))
    yield _MODULE_NAME
    sys.modules.pop(_MODULE_NAME, None)


def _configuration(tmp_path: Path, *targets: SchemaTarget, **overrides) -> Configuration:
    settings = {
        "path": tmp_path / "config.yaml",
        "output_dir": tmp_path / "schemas",
        "schema_uri": None,
        "indent": 2,
        "targets": targets,
    }
    settings.update(overrides)
    return Configuration(**settings)


def test_exports_one_file_per_target(tmp_path: Path, sample_module: str) -> None:
    configuration = _configuration(
        tmp_path,
        SchemaTarget(name="trash", type_path=f"{sample_module}:TrashPack"),
        SchemaTarget(name="entry", type_path=f"{sample_module}:TrashEntry"),
        schema_uri="http://json-schema.org/draft-07/schema#",
    )

    exported = export_schemas(configuration)

    assert [item.target_name for item in exported] == ["trash", "entry"]
    assert exported[0].output_path == (tmp_path / "schemas" / "trash.schema.json").resolve()
    assert exported[0].definition_count == 2
    assert exported[1].definition_count == 1

    trash = json.loads(exported[0].output_path.read_text(encoding="utf-8"))
    assert trash["$schema"] == "http://json-schema.org/draft-07/schema#"
    assert trash["oneOf"] == [{"$ref": f"#/definitions/{sample_module}.TrashPack"}]
    assert set(trash["definitions"]) == {
        f"{sample_module}.TrashPack",
        f"{sample_module}.TrashEntry",
    }
    assert trash["definitions"][f"{sample_module}.TrashEntry"]["required"] == ["item_key"]


def test_export_writes_configured_indent_and_trailing_newline(
    tmp_path: Path, sample_module: str
) -> None:
    configuration = _configuration(
        tmp_path, SchemaTarget(name="entry", type_path=f"{sample_module}:TrashEntry"), indent=4
    )

    (exported,) = export_schemas(configuration)
    text = exported.output_path.read_text(encoding="utf-8")

    assert text.endswith("}\n")
    assert '\n    "oneOf"' in text


def test_export_logs_each_written_file(
    tmp_path: Path, sample_module: str, caplog: pytest.LogCaptureFixture
) -> None:
    configuration = _configuration(
        tmp_path, SchemaTarget(name="entry", type_path=f"{sample_module}:TrashEntry")
    )

    with caplog.at_level(logging.INFO, logger="content_schema_gen.schema_export"):
        export_schemas(configuration)

    assert any("entry.schema.json" in record.getMessage() for record in caplog.records)


def test_generation_failure_names_target(tmp_path: Path, sample_module: str) -> None:
    configuration = _configuration(
        tmp_path, SchemaTarget(name="broken", type_path=f"{sample_module}:Broken")
    )

    with pytest.raises(SchemaExportError, match="Target 'broken'"):
        export_schemas(configuration)
    assert not (tmp_path / "schemas" / "broken.schema.json").exists()


def test_failing_target_leaves_no_files_from_earlier_targets(
    tmp_path: Path, sample_module: str
) -> None:
    configuration = _configuration(
        tmp_path,
        SchemaTarget(name="entry", type_path=f"{sample_module}:TrashEntry"),
        SchemaTarget(name="broken", type_path=f"{sample_module}:Broken"),
    )

    with pytest.raises(SchemaExportError, match="Target 'broken'"):
        export_schemas(configuration)
    assert not (tmp_path / "schemas").exists()


def test_unresolvable_member_annotation_names_target(tmp_path: Path, sample_module: str) -> None:
    configuration = _configuration(
        tmp_path, SchemaTarget(name="orphan", type_path=f"{sample_module}:Orphan")
    )

    with pytest.raises(SchemaExportError, match="Target 'orphan'.*MissingParent"):
        export_schemas(configuration)


def test_unresolvable_target_is_reported(tmp_path: Path) -> None:
    configuration = _configuration(
        tmp_path, SchemaTarget(name="missing", type_path="no_such_module_anywhere:Pack")
    )

    with pytest.raises(SchemaExportError, match="Cannot import module"):
        export_schemas(configuration)


def test_render_schema_text_accepts_custom_provider() -> None:
    catalog = ManualTypeCatalog()
    catalog.add_type(object_type("pack.Fish"))
    catalog.define_members("pack.Fish", [member("name", primitive_type(PrimitiveKind.STRING))])

    text = render_schema_text("pack.Fish", provider=catalog, indent=2)

    assert json.loads(text)["definitions"]["pack.Fish"]["properties"] == {
        "name": {"type": "string"}
    }
