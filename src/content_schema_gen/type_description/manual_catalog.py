"""Explicit type descriptor catalog.

The catalog describes types without any runtime introspection: composites are
registered by identity together with their member lists, and descriptions are
assembled with the builder functions below.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from .description_models import MemberDescriptor, PrimitiveKind, TypeDescription, TypeShape


class CatalogLookupError(KeyError):
    """Raised when the catalog has no entry for a requested identity."""


def primitive_type(kind: PrimitiveKind) -> TypeDescription:
    return TypeDescription(
        shape=TypeShape.PRIMITIVE, identity=f"primitive.{kind.value}", primitive=kind
    )


def array_type(element: TypeDescription, *, rank: int = 1) -> TypeDescription:
    return TypeDescription(shape=TypeShape.ARRAY, element=element, rank=rank)


def generic_type(origin: str, *arguments: TypeDescription) -> TypeDescription:
    return TypeDescription(
        shape=TypeShape.GENERIC,
        identity=origin,
        generic_origin=origin,
        type_arguments=tuple(arguments),
    )


def enum_type(
    identity: str | None, variants: Iterable[str], *, description: str | None = None
) -> TypeDescription:
    return TypeDescription(
        shape=TypeShape.ENUM,
        identity=identity,
        enum_variants=tuple(variants),
        description=description,
    )


def object_type(identity: str | None, *, description: str | None = None) -> TypeDescription:
    return TypeDescription(shape=TypeShape.OBJECT, identity=identity, description=description)


def unsupported_type(identity: str | None = None) -> TypeDescription:
    return TypeDescription(shape=TypeShape.UNSUPPORTED, identity=identity)


def nullable(description: TypeDescription) -> TypeDescription:
    return replace(description, nullable=True)


def member(  # pylint: disable=too-many-arguments
    name: str,
    type_description: TypeDescription,
    *,
    required: bool = False,
    ignored: bool = False,
    override_name: str | None = None,
    description: str | None = None,
    public: bool = True,
    included: bool = False,
) -> MemberDescriptor:
    return MemberDescriptor(
        name=name,
        type=type_description,
        required=required,
        ignored=ignored,
        override_name=override_name,
        description=description,
        public=public,
        included=included,
    )


class ManualTypeCatalog:
    """Type description provider backed by explicitly registered descriptors."""

    def __init__(self) -> None:
        self._types: dict[str, TypeDescription] = {}
        self._members: dict[str, tuple[MemberDescriptor, ...]] = {}
        self._string_conversions: set[str] = set()

    def add_type(self, description: TypeDescription) -> TypeDescription:
        """Register a description under its identity and return it."""
        if description.identity is None:
            raise ValueError("Only types with an identity can be added to the catalog.")
        self._types[description.identity] = description
        return description

    def define_members(self, identity: str, members: Sequence[MemberDescriptor]) -> None:
        self._members[identity] = tuple(members)

    def add_string_conversion(self, identity: str) -> None:
        self._string_conversions.add(identity)

    def describe(self, type_ref: object) -> TypeDescription:
        if isinstance(type_ref, TypeDescription):
            return type_ref
        try:
            return self._types[str(type_ref)]
        except KeyError as exc:
            raise CatalogLookupError(f"Unknown type identity: {type_ref}") from exc

    def members(self, description: TypeDescription) -> Sequence[MemberDescriptor]:
        if description.identity is None:
            return ()
        try:
            return self._members[description.identity]
        except KeyError as exc:
            raise CatalogLookupError(
                f"No members defined for type identity: {description.identity}"
            ) from exc

    def has_string_conversion(self, description: TypeDescription) -> bool:
        return description.identity in self._string_conversions
