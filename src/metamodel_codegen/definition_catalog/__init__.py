"""Definition catalog exports."""

from .catalog_decoder import decode_meta_model, load_meta_model
from .catalog_models import (
    Definition,
    Enumeration,
    EnumerationEntry,
    MessageDirection,
    MetaData,
    MetaModel,
    Notification,
    Property,
    Request,
    Structure,
    TypeAlias,
)

__all__ = [
    "Definition",
    "Enumeration",
    "EnumerationEntry",
    "MessageDirection",
    "MetaData",
    "MetaModel",
    "Notification",
    "Property",
    "Request",
    "Structure",
    "TypeAlias",
    "decode_meta_model",
    "load_meta_model",
]
