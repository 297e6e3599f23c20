"""Resolution of ``module:QualifiedName`` type paths."""

from __future__ import annotations

import importlib


class TargetResolutionError(Exception):
    """Raised when a type path cannot be imported."""


def resolve_target_type(type_path: str) -> object:
    """Import the module part of ``type_path`` and walk the qualified name."""
    module_name, separator, qualified_name = type_path.partition(":")
    if not separator or not module_name or not qualified_name:
        raise TargetResolutionError(
            f"Type path must use the form 'module:QualifiedName', got '{type_path}'."
        )
    try:
        resolved: object = importlib.import_module(module_name)
    except ImportError as exc:
        raise TargetResolutionError(f"Cannot import module '{module_name}': {exc}") from exc

    for attribute in qualified_name.split("."):
        try:
            resolved = getattr(resolved, attribute)
        except AttributeError as exc:
            raise TargetResolutionError(
                f"Module '{module_name}' has no attribute path '{qualified_name}'."
            ) from exc
    return resolved
