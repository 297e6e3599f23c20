"""Type description provider driven by Python type annotations."""

from __future__ import annotations

import dataclasses
import types
import uuid
from collections.abc import Sequence
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Annotated, Any, ClassVar, Union, get_args, get_origin, get_type_hints

from .description_models import MemberDescriptor, PrimitiveKind, TypeDescription, TypeShape
from .member_markers import SCHEMA_DESCRIPTION_ATTRIBUTE, SchemaField
from .provider_contracts import MemberResolutionError
from .string_conversions import StringConversionRegistry

_PRIMITIVE_TYPES: dict[type, PrimitiveKind] = {
    str: PrimitiveKind.STRING,
    bool: PrimitiveKind.BOOLEAN,
    int: PrimitiveKind.INTEGER,
    float: PrimitiveKind.DOUBLE,
    Decimal: PrimitiveKind.DECIMAL,
    datetime: PrimitiveKind.DATE_TIME,
    bytes: PrimitiveKind.BYTES,
    bytearray: PrimitiveKind.BYTES,
    type: PrimitiveKind.TYPE_REFERENCE,
    uuid.UUID: PrimitiveKind.UUID,
}

# Classes from these modules are only meaningful when parameterized or listed above.
_OPAQUE_MODULES = frozenset(
    {
        "builtins",
        "collections",
        "collections.abc",
        "datetime",
        "decimal",
        "pathlib",
        "types",
        "typing",
        "uuid",
    }
)

_DEFAULT_FIELD = SchemaField()


class AnnotationTypeProvider:
    """Describe dataclasses, annotated classes, enums and typing constructs."""

    def __init__(self, string_conversions: StringConversionRegistry | None = None) -> None:
        self._string_conversions = string_conversions or StringConversionRegistry()

    def describe(self, type_ref: object) -> TypeDescription:
        annotation, kind = _strip_annotated(type_ref)
        inner, is_nullable = _split_nullable(annotation)
        if inner is None:
            return TypeDescription(
                shape=TypeShape.UNSUPPORTED, nullable=is_nullable, source=annotation
            )
        inner, inner_kind = _strip_annotated(inner)
        description = self._describe_non_nullable(inner, inner_kind or kind)
        if is_nullable:
            return dataclasses.replace(description, nullable=True)
        return description

    def members(self, description: TypeDescription) -> Sequence[MemberDescriptor]:
        cls = description.source
        if not isinstance(cls, type):
            return ()
        try:
            hints = get_type_hints(cls, include_extras=True)
        except NameError as exc:
            raise MemberResolutionError(
                f"Cannot resolve member annotations of {cls.__qualname__}: {exc}"
            ) from exc
        if dataclasses.is_dataclass(cls):
            names = [item.name for item in dataclasses.fields(cls)]
        else:
            names = [name for name, hint in hints.items() if get_origin(hint) is not ClassVar]
        return tuple(self._describe_member(name, hints[name]) for name in names)

    def has_string_conversion(self, description: TypeDescription) -> bool:
        return self._string_conversions.supports(description.source)

    def _describe_member(self, name: str, hint: Any) -> MemberDescriptor:
        marker = _schema_field_of(hint)
        return MemberDescriptor(
            name=name,
            type=self.describe(hint),
            required=marker.required,
            ignored=marker.ignore,
            override_name=marker.name,
            description=marker.description,
            public=not name.startswith("_"),
            included=marker.include,
        )

    def _describe_non_nullable(
        self, annotation: Any, kind: PrimitiveKind | None
    ) -> TypeDescription:
        if kind is not None:
            return TypeDescription(
                shape=TypeShape.PRIMITIVE,
                identity=_qualified_name(annotation),
                primitive=kind,
                source=annotation,
            )

        origin = get_origin(annotation)
        if origin is not None:
            return self._describe_parameterized(annotation, origin)

        if not isinstance(annotation, type):
            return TypeDescription(shape=TypeShape.UNSUPPORTED, source=annotation)

        primitive = _PRIMITIVE_TYPES.get(annotation)
        if primitive is not None:
            return TypeDescription(
                shape=TypeShape.PRIMITIVE,
                identity=_qualified_name(annotation),
                primitive=primitive,
                source=annotation,
            )
        if issubclass(annotation, Enum):
            return TypeDescription(
                shape=TypeShape.ENUM,
                identity=_type_identity(annotation),
                enum_variants=tuple(annotation.__members__),
                description=_own_description(annotation),
                source=annotation,
            )
        if annotation.__module__ in _OPAQUE_MODULES:
            return TypeDescription(
                shape=TypeShape.UNSUPPORTED,
                identity=_qualified_name(annotation),
                source=annotation,
            )
        return TypeDescription(
            shape=TypeShape.OBJECT,
            identity=_type_identity(annotation),
            description=_own_description(annotation),
            source=annotation,
        )

    def _describe_parameterized(self, annotation: Any, origin: Any) -> TypeDescription:
        if origin is type:
            return TypeDescription(
                shape=TypeShape.PRIMITIVE,
                identity=_qualified_name(type),
                primitive=PrimitiveKind.TYPE_REFERENCE,
                source=annotation,
            )

        arguments = get_args(annotation)
        if origin is tuple:
            if len(arguments) != 2 or arguments[1] is not Ellipsis:
                return TypeDescription(
                    shape=TypeShape.UNSUPPORTED, identity="builtins.tuple", source=annotation
                )
            arguments = arguments[:1]

        origin_name = _qualified_name(origin)
        if origin_name is None:
            return TypeDescription(shape=TypeShape.UNSUPPORTED, source=annotation)
        return TypeDescription(
            shape=TypeShape.GENERIC,
            identity=origin_name,
            generic_origin=origin_name,
            type_arguments=tuple(self.describe(argument) for argument in arguments),
            source=annotation,
        )


def _strip_annotated(annotation: Any) -> tuple[Any, PrimitiveKind | None]:
    if get_origin(annotation) is not Annotated:
        return annotation, None
    kinds = [item for item in annotation.__metadata__ if isinstance(item, PrimitiveKind)]
    return annotation.__origin__, (kinds[-1] if kinds else None)


def _split_nullable(annotation: Any) -> tuple[Any, bool]:
    """Return the non-None part of ``annotation`` and whether None was allowed.

    The first element is None when no single non-None alternative remains.
    """
    if annotation is None or annotation is types.NoneType:
        return None, True
    if get_origin(annotation) not in (Union, types.UnionType):
        return annotation, False
    arguments = get_args(annotation)
    remaining = [item for item in arguments if item is not types.NoneType]
    is_nullable = len(remaining) < len(arguments)
    if len(remaining) != 1:
        return None, is_nullable
    return remaining[0], is_nullable


def _schema_field_of(hint: Any) -> SchemaField:
    if get_origin(hint) is not Annotated:
        return _DEFAULT_FIELD
    markers = [item for item in hint.__metadata__ if isinstance(item, SchemaField)]
    return markers[-1] if markers else _DEFAULT_FIELD


def _own_description(cls: type) -> str | None:
    value = cls.__dict__.get(SCHEMA_DESCRIPTION_ATTRIBUTE)
    return value if isinstance(value, str) else None


def _type_identity(cls: type) -> str | None:
    """Return the definition-worthy qualified name, None for function-local classes."""
    if "<locals>" in cls.__qualname__:
        return None
    return _qualified_name(cls)


def _qualified_name(target: Any) -> str | None:
    module = getattr(target, "__module__", None)
    qualname = getattr(target, "__qualname__", None)
    if not isinstance(module, str) or not isinstance(qualname, str):
        return None
    return f"{module}.{qualname}"
