"""Reference resolution exports."""

from .reference_resolver import (
    ReferenceNotFoundError,
    ReferenceResolver,
    StructureNotFoundError,
    UnresolvedReferenceError,
    build_definition_index,
)

__all__ = [
    "ReferenceNotFoundError",
    "ReferenceResolver",
    "StructureNotFoundError",
    "UnresolvedReferenceError",
    "build_definition_index",
]
