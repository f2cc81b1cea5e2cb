"""Schema node exports."""

from .node_decoder import SCHEMA_KINDS, decode_metadata, decode_schema_node
from .node_models import (
    AndNode,
    ArrayNode,
    BaseNode,
    ElementMetadata,
    LiteralNode,
    MapNode,
    OrNode,
    ReferenceNode,
    SchemaNode,
    StringLiteralNode,
    TupleNode,
)
from .strict_fields import DecodeError

__all__ = [
    "AndNode",
    "ArrayNode",
    "BaseNode",
    "DecodeError",
    "ElementMetadata",
    "LiteralNode",
    "MapNode",
    "OrNode",
    "ReferenceNode",
    "SCHEMA_KINDS",
    "SchemaNode",
    "StringLiteralNode",
    "TupleNode",
    "decode_metadata",
    "decode_schema_node",
]
