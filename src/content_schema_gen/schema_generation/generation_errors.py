"""Schema generation failures.

Every error aborts the whole generation run; none of them is recovered
inside the registry.
"""


class SchemaGenerationError(Exception):
    """Base class for generation-time failures."""


class UnsupportedShapeError(SchemaGenerationError):
    """Raised for array shapes other than single-dimension arrays."""


class UnsupportedKeyTypeError(SchemaGenerationError):
    """Raised for map-like containers whose key type cannot convert to and from strings."""


class UnsupportedTypeError(SchemaGenerationError):
    """Raised for types that are not primitive, array-like, map-like, enum or object."""


class MissingTypeIdentityError(SchemaGenerationError):
    """Raised when no definition name can be derived for a composite type."""
