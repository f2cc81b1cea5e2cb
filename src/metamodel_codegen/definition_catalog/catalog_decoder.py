"""Meta-model document decoding service."""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping
from typing import Any, TypeVar

from metamodel_codegen.schema_nodes.node_decoder import decode_metadata, decode_schema_node
from metamodel_codegen.schema_nodes.node_models import SchemaNode
from metamodel_codegen.schema_nodes.strict_fields import (
    METADATA_FIELDS,
    DecodeError,
    optional_bool,
    optional_list,
    optional_string,
    reject_unknown_fields,
    require_field,
    require_list,
    require_mapping,
    require_string,
)

from .catalog_models import (
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

_T = TypeVar("_T")

_DOCUMENT_FIELDS = frozenset(
    {"metaData", "requests", "notifications", "structures", "enumerations", "typeAliases"}
)
_STRUCTURE_FIELDS = METADATA_FIELDS | {"name", "properties", "extends", "mixins"}
_PROPERTY_FIELDS = METADATA_FIELDS | {"name", "type", "optional"}
_ENUMERATION_FIELDS = METADATA_FIELDS | {"name", "type", "values", "supportsCustomValues"}
_ENUMERATION_ENTRY_FIELDS = METADATA_FIELDS | {"name", "value"}
_TYPE_ALIAS_FIELDS = METADATA_FIELDS | {"name", "type"}
_MESSAGE_FIELDS = METADATA_FIELDS | {
    "method",
    "typeName",
    "messageDirection",
    "params",
    "registrationOptions",
    "registrationMethod",
    "clientCapability",
    "serverCapability",
}
_REQUEST_FIELDS = _MESSAGE_FIELDS | {"result", "partialResult", "errorData"}
_NOTIFICATION_FIELDS = _MESSAGE_FIELDS


def load_meta_model(raw: bytes | str) -> MetaModel:
    """Parse meta-model JSON text and decode it into a catalog."""
    try:
        text = raw.decode("utf-8") if isinstance(raw, bytes) else raw
        document = json.loads(text)
    except UnicodeDecodeError as exc:
        raise DecodeError(f"Meta-model is not valid UTF-8: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise DecodeError(f"Invalid meta-model JSON: {exc}") from exc
    return decode_meta_model(document)


def decode_meta_model(document: Any) -> MetaModel:
    """Strictly decode a parsed meta-model document.

    Only field shapes are checked here. References between definitions are
    left unresolved.
    """
    root = require_mapping(document, "meta-model")
    reject_unknown_fields(root, _DOCUMENT_FIELDS, "meta-model")
    return MetaModel(
        meta_data=_decode_meta_data(require_field(root, "metaData", "meta-model")),
        structures=_decode_list(root, "structures", _decode_structure),
        enumerations=_decode_list(root, "enumerations", _decode_enumeration),
        type_aliases=_decode_list(root, "typeAliases", _decode_type_alias),
        requests=_decode_list(root, "requests", _decode_request),
        notifications=_decode_list(root, "notifications", _decode_notification),
    )


def _decode_list(
    root: Mapping[str, Any], key: str, decoder: Callable[[Any, str], _T]
) -> tuple[_T, ...]:
    return tuple(
        decoder(item, f"{key}[{index}]")
        for index, item in enumerate(optional_list(root, key, "meta-model"))
    )


def _decode_meta_data(value: Any) -> MetaData:
    section = require_mapping(value, "metaData")
    reject_unknown_fields(section, frozenset({"version"}), "metaData")
    return MetaData(version=require_string(section, "version", "metaData"))


def _decode_structure(value: Any, context: str) -> Structure:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _STRUCTURE_FIELDS, context)
    name = require_string(section, "name", context)
    context = f"structure '{name}'"
    properties = tuple(
        _decode_property(item, f"{context}.properties[{index}]")
        for index, item in enumerate(require_list(section, "properties", context))
    )
    return Structure(
        name=name,
        properties=properties,
        extends=_decode_node_list(section, "extends", context),
        mixins=_decode_node_list(section, "mixins", context),
        metadata=decode_metadata(section, context),
    )


def _decode_node_list(section: Mapping[str, Any], key: str, context: str) -> tuple[SchemaNode, ...]:
    return tuple(
        decode_schema_node(item, context=f"{context}.{key}[{index}]")
        for index, item in enumerate(optional_list(section, key, context))
    )


def _decode_property(value: Any, context: str) -> Property:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _PROPERTY_FIELDS, context)
    name = require_string(section, "name", context)
    context = f"{context} '{name}'"
    return Property(
        name=name,
        type=decode_schema_node(require_field(section, "type", context), context=f"{context}.type"),
        optional=optional_bool(section, "optional", context),
        metadata=decode_metadata(section, context),
    )


def _decode_enumeration(value: Any, context: str) -> Enumeration:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _ENUMERATION_FIELDS, context)
    name = require_string(section, "name", context)
    context = f"enumeration '{name}'"
    entries = tuple(
        _decode_enumeration_entry(item, f"{context}.values[{index}]")
        for index, item in enumerate(require_list(section, "values", context))
    )
    return Enumeration(
        name=name,
        type=decode_schema_node(require_field(section, "type", context), context=f"{context}.type"),
        values=entries,
        supports_custom_values=optional_bool(section, "supportsCustomValues", context),
        metadata=decode_metadata(section, context),
    )


def _decode_enumeration_entry(value: Any, context: str) -> EnumerationEntry:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _ENUMERATION_ENTRY_FIELDS, context)
    literal = require_field(section, "value", context)
    if isinstance(literal, bool) or not isinstance(literal, (str, int)):
        raise DecodeError(f"{context}: field 'value' must be a string or an integer")
    return EnumerationEntry(
        name=require_string(section, "name", context),
        value=literal,
        metadata=decode_metadata(section, context),
    )


def _decode_type_alias(value: Any, context: str) -> TypeAlias:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _TYPE_ALIAS_FIELDS, context)
    name = require_string(section, "name", context)
    context = f"type alias '{name}'"
    return TypeAlias(
        name=name,
        type=decode_schema_node(require_field(section, "type", context), context=f"{context}.type"),
        metadata=decode_metadata(section, context),
    )


def _decode_request(value: Any, context: str) -> Request:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _REQUEST_FIELDS, context)
    method = require_string(section, "method", context)
    context = f"request '{method}'"
    return Request(
        method=method,
        type_name=optional_string(section, "typeName", context),
        message_direction=_decode_direction(section, context),
        params=_optional_node(section, "params", context),
        result=_optional_node(section, "result", context),
        partial_result=_optional_node(section, "partialResult", context),
        registration_options=_optional_node(section, "registrationOptions", context),
        registration_method=optional_string(section, "registrationMethod", context),
        error_data=_optional_node(section, "errorData", context),
        client_capability=optional_string(section, "clientCapability", context),
        server_capability=optional_string(section, "serverCapability", context),
        metadata=decode_metadata(section, context),
    )


def _decode_notification(value: Any, context: str) -> Notification:
    section = require_mapping(value, context)
    reject_unknown_fields(section, _NOTIFICATION_FIELDS, context)
    method = require_string(section, "method", context)
    context = f"notification '{method}'"
    return Notification(
        method=method,
        type_name=optional_string(section, "typeName", context),
        message_direction=_decode_direction(section, context),
        params=_optional_node(section, "params", context),
        registration_options=_optional_node(section, "registrationOptions", context),
        registration_method=optional_string(section, "registrationMethod", context),
        client_capability=optional_string(section, "clientCapability", context),
        server_capability=optional_string(section, "serverCapability", context),
        metadata=decode_metadata(section, context),
    )


def _decode_direction(section: Mapping[str, Any], context: str) -> MessageDirection:
    raw = require_string(section, "messageDirection", context)
    try:
        return MessageDirection(raw)
    except ValueError as exc:
        raise DecodeError(f"{context}: unknown message direction '{raw}'") from exc


def _optional_node(section: Mapping[str, Any], key: str, context: str) -> SchemaNode | None:
    value = section.get(key)
    if value is None:
        return None
    return decode_schema_node(value, context=f"{context}.{key}")
