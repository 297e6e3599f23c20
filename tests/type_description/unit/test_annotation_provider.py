"""Annotation type provider tests."""

from __future__ import annotations

import uuid
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Annotated, Any, ClassVar, Optional

import pytest
from content_schema_gen.type_description import (
    AnnotationTypeProvider,
    MemberResolutionError,
    PrimitiveKind,
    SchemaField,
    StringConversionRegistry,
    TypeShape,
    UInt8,
    schema_description,
)


@schema_description("Kinds of water.")
class WaterType(Enum):
    LAKE = 1
    RIVER = 2
    BOTH = 3
    POND = 1


@dataclass
class Base:
    id: str
    note: str = ""


@schema_description("A derived record.")
@dataclass
class Derived(Base):
    count: Annotated[int, SchemaField(required=True, description="How many.")] = 0
    note: str = "redeclared"
    label: Annotated[str, SchemaField(name="displayLabel")] = ""
    skipped: Annotated[str, SchemaField(ignore=True)] = ""
    _private: str = ""
    _opted: Annotated[str, SchemaField(include=True)] = ""
    tags: list[str] = field(default_factory=list)


class Plain:
    kind: ClassVar[str] = "plain"
    level: UInt8
    parent: Optional[Plain]


@dataclass
class Unresolved:
    target: MissingTarget  # noqa: F821


def _make_local_class() -> type:
    @dataclass
    class Local:
        value: int

    return Local


def test_describes_builtin_primitives() -> None:
    provider = AnnotationTypeProvider()

    assert provider.describe(str).primitive is PrimitiveKind.STRING
    assert provider.describe(bool).primitive is PrimitiveKind.BOOLEAN
    assert provider.describe(int).primitive is PrimitiveKind.INTEGER
    assert provider.describe(float).primitive is PrimitiveKind.DOUBLE
    assert provider.describe(datetime).primitive is PrimitiveKind.DATE_TIME
    assert provider.describe(uuid.UUID).primitive is PrimitiveKind.UUID
    assert provider.describe(bytes).primitive is PrimitiveKind.BYTES
    assert provider.describe(type[Base]).primitive is PrimitiveKind.TYPE_REFERENCE


def test_annotated_primitive_kind_overrides_builtin_kind() -> None:
    description = AnnotationTypeProvider().describe(UInt8)

    assert description.shape is TypeShape.PRIMITIVE
    assert description.primitive is PrimitiveKind.UINT8
    assert description.nullable is False


def test_optional_and_pipe_union_are_nullable() -> None:
    provider = AnnotationTypeProvider()

    optional = provider.describe(Optional[UInt8])
    piped = provider.describe(str | None)

    assert optional.nullable is True
    assert optional.primitive is PrimitiveKind.UINT8
    assert piped.nullable is True
    assert piped.primitive is PrimitiveKind.STRING
    assert piped.non_nullable().nullable is False


def test_union_of_several_types_is_unsupported() -> None:
    description = AnnotationTypeProvider().describe(int | str | None)

    assert description.shape is TypeShape.UNSUPPORTED
    assert description.nullable is True


def test_enum_variants_follow_declaration_order_including_aliases() -> None:
    description = AnnotationTypeProvider().describe(WaterType)

    assert description.shape is TypeShape.ENUM
    assert description.enum_variants == ("LAKE", "RIVER", "BOTH", "POND")
    assert description.description == "Kinds of water."
    assert description.identity == f"{__name__}.WaterType"


def test_generic_containers_report_origin_and_arguments() -> None:
    provider = AnnotationTypeProvider()

    sequence = provider.describe(Sequence[int])
    mapping = provider.describe(Mapping[str, list[Base]])
    variadic = provider.describe(tuple[str, ...])

    assert sequence.shape is TypeShape.GENERIC
    assert sequence.generic_origin == "collections.abc.Sequence"
    assert sequence.type_arguments[0].primitive is PrimitiveKind.INTEGER
    assert mapping.generic_origin == "collections.abc.Mapping"
    assert mapping.type_arguments[1].generic_origin == "builtins.list"
    assert mapping.type_arguments[1].type_arguments[0].shape is TypeShape.OBJECT
    assert variadic.generic_origin == "builtins.tuple"
    assert len(variadic.type_arguments) == 1


def test_fixed_tuples_bare_containers_and_any_are_unsupported() -> None:
    provider = AnnotationTypeProvider()

    assert provider.describe(tuple[int, str]).shape is TypeShape.UNSUPPORTED
    assert provider.describe(list).shape is TypeShape.UNSUPPORTED
    assert provider.describe(Any).shape is TypeShape.UNSUPPORTED
    assert provider.describe(None).shape is TypeShape.UNSUPPORTED


def test_classes_are_objects_with_qualified_identity() -> None:
    description = AnnotationTypeProvider().describe(Derived)

    assert description.shape is TypeShape.OBJECT
    assert description.identity == f"{__name__}.Derived"
    assert description.description == "A derived record."


def test_type_description_is_not_inherited() -> None:
    @dataclass
    class Grandchild(Derived):
        extra: int = 0

    assert AnnotationTypeProvider().describe(Grandchild).description is None


def test_function_local_classes_have_no_identity() -> None:
    description = AnnotationTypeProvider().describe(_make_local_class())

    assert description.shape is TypeShape.OBJECT
    assert description.identity is None


def test_dataclass_members_are_base_first_with_markers() -> None:
    provider = AnnotationTypeProvider()

    members = provider.members(provider.describe(Derived))
    by_name = {item.name: item for item in members}

    assert [item.name for item in members] == [
        "id",
        "note",
        "count",
        "label",
        "skipped",
        "_private",
        "_opted",
        "tags",
    ]
    assert by_name["count"].required is True
    assert by_name["count"].description == "How many."
    assert by_name["count"].type.primitive is PrimitiveKind.INTEGER
    assert by_name["label"].exposed_name == "displayLabel"
    assert by_name["skipped"].ignored is True
    assert by_name["_private"].public is False
    assert by_name["_private"].included is False
    assert by_name["_opted"].public is False
    assert by_name["_opted"].included is True
    assert by_name["id"].required is False


def test_annotated_class_members_skip_class_variables() -> None:
    provider = AnnotationTypeProvider()

    members = provider.members(provider.describe(Plain))

    assert [item.name for item in members] == ["level", "parent"]
    assert members[0].type.primitive is PrimitiveKind.UINT8
    assert members[1].type.nullable is True
    assert members[1].type.identity == f"{__name__}.Plain"


def test_string_conversion_follows_registry() -> None:
    conversions = StringConversionRegistry(include_defaults=False)
    conversions.register(Base, lambda value: value.id, lambda text: Base(id=text))
    provider = AnnotationTypeProvider(conversions)

    assert provider.has_string_conversion(provider.describe(Base)) is True
    assert provider.has_string_conversion(provider.describe(WaterType)) is True
    assert provider.has_string_conversion(provider.describe(int)) is False
    assert provider.has_string_conversion(provider.describe(Derived)) is False


def test_unresolvable_member_annotation_raises_member_resolution_error() -> None:
    provider = AnnotationTypeProvider()
    description = provider.describe(Unresolved)

    with pytest.raises(MemberResolutionError, match="MissingTarget"):
        provider.members(description)
