"""Strict decoding of schema nodes from generic JSON fragments."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

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
from .strict_fields import (
    METADATA_FIELDS,
    DecodeError,
    optional_bool,
    optional_string,
    optional_string_list,
    reject_unknown_fields,
    require_field,
    require_list,
    require_mapping,
    require_string,
)

_NodeDecoder = Callable[[Mapping[str, Any], ElementMetadata, str], SchemaNode]


def decode_schema_node(fragment: Any, *, context: str = "type") -> SchemaNode:
    """Decode one schema node, rejecting unknown kinds and unknown fields.

    Args:
      fragment: JSON object carrying a `kind` discriminator.
      context: Location of the fragment in the document, used in error messages.

    Returns:
      The decoded node. Nested nodes are decoded recursively.

    Raises:
      DecodeError: If the kind is unknown or the fields do not match the variant's shape.
    """
    mapping = require_mapping(fragment, context)
    kind = mapping.get("kind")
    entry = _VARIANTS.get(kind) if isinstance(kind, str) else None
    if entry is None:
        raise DecodeError(f"{context}: unknown schema kind: {kind}")

    fields, decoder = entry
    variant_context = _describe(context, kind)
    reject_unknown_fields(mapping, fields | METADATA_FIELDS | {"kind"}, variant_context)
    metadata = decode_metadata(mapping, variant_context)
    return decoder(mapping, metadata, context)


def decode_metadata(fragment: Mapping[str, Any], context: str) -> ElementMetadata:
    """Decode the optional metadata fields shared by every meta-model element."""
    return ElementMetadata(
        since=optional_string(fragment, "since", context),
        since_tags=optional_string_list(fragment, "sinceTags", context),
        deprecated=optional_string(fragment, "deprecated", context),
        proposed=optional_bool(fragment, "proposed", context),
        documentation=optional_string(fragment, "documentation", context),
    )


def _describe(context: str, kind: str) -> str:
    return f"{context}: schema kind '{kind}'"


def _decode_base(fragment: Mapping[str, Any], metadata: ElementMetadata, context: str) -> BaseNode:
    name = require_string(fragment, "name", _describe(context, "base"))
    return BaseNode(name=name, metadata=metadata)


def _decode_reference(
    fragment: Mapping[str, Any], metadata: ElementMetadata, context: str
) -> ReferenceNode:
    name = require_string(fragment, "name", _describe(context, "reference"))
    return ReferenceNode(name=name, metadata=metadata)


def _decode_array(
    fragment: Mapping[str, Any], metadata: ElementMetadata, context: str
) -> ArrayNode:
    element = require_field(fragment, "element", _describe(context, "array"))
    return ArrayNode(
        element=decode_schema_node(element, context=f"{context}.element"),
        metadata=metadata,
    )


def _decode_map(fragment: Mapping[str, Any], metadata: ElementMetadata, context: str) -> MapNode:
    key = require_field(fragment, "key", _describe(context, "map"))
    value = require_field(fragment, "value", _describe(context, "map"))
    return MapNode(
        key=decode_schema_node(key, context=f"{context}.key"),
        value=decode_schema_node(value, context=f"{context}.value"),
        metadata=metadata,
    )


def _decode_items(fragment: Mapping[str, Any], context: str, kind: str) -> tuple[SchemaNode, ...]:
    items = require_list(fragment, "items", _describe(context, kind))
    return tuple(
        decode_schema_node(item, context=f"{context}.items[{index}]")
        for index, item in enumerate(items)
    )


def _decode_or(fragment: Mapping[str, Any], metadata: ElementMetadata, context: str) -> OrNode:
    return OrNode(items=_decode_items(fragment, context, "or"), metadata=metadata)


def _decode_and(fragment: Mapping[str, Any], metadata: ElementMetadata, context: str) -> AndNode:
    return AndNode(items=_decode_items(fragment, context, "and"), metadata=metadata)


def _decode_tuple(
    fragment: Mapping[str, Any], metadata: ElementMetadata, context: str
) -> TupleNode:
    return TupleNode(items=_decode_items(fragment, context, "tuple"), metadata=metadata)


def _decode_string_literal(
    fragment: Mapping[str, Any], metadata: ElementMetadata, context: str
) -> StringLiteralNode:
    value = require_string(fragment, "value", _describe(context, "stringLiteral"))
    return StringLiteralNode(value=value, metadata=metadata)


def _decode_literal(
    fragment: Mapping[str, Any], metadata: ElementMetadata, context: str
) -> LiteralNode:
    value = require_field(fragment, "value", _describe(context, "literal"))
    return LiteralNode(value=value, metadata=metadata)


_VARIANTS: dict[str, tuple[frozenset[str], _NodeDecoder]] = {
    "base": (frozenset({"name"}), _decode_base),
    "reference": (frozenset({"name"}), _decode_reference),
    "array": (frozenset({"element"}), _decode_array),
    "map": (frozenset({"key", "value"}), _decode_map),
    "or": (frozenset({"items"}), _decode_or),
    "and": (frozenset({"items"}), _decode_and),
    "tuple": (frozenset({"items"}), _decode_tuple),
    "stringLiteral": (frozenset({"value"}), _decode_string_literal),
    "literal": (frozenset({"value"}), _decode_literal),
}

SCHEMA_KINDS = tuple(_VARIANTS)
