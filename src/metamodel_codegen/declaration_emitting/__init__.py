"""Declaration emitting exports."""

from .go_declaration_emitter import BASE_TYPE_TABLE, GoDeclarationEmitter, UnsupportedTypeError
from .identifier_casing import GO_INITIALISMS, to_exported_identifier

__all__ = [
    "BASE_TYPE_TABLE",
    "GO_INITIALISMS",
    "GoDeclarationEmitter",
    "UnsupportedTypeError",
    "to_exported_identifier",
]
