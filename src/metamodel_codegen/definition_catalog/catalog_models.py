"""Definition catalog entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from metamodel_codegen.schema_nodes.node_models import ElementMetadata, SchemaNode


class MessageDirection(str, Enum):
    """Direction in which a request or notification travels."""

    CLIENT_TO_SERVER = "clientToServer"
    SERVER_TO_CLIENT = "serverToClient"
    BOTH = "both"


@dataclass(frozen=True)
class MetaData:
    """Meta-model document metadata."""

    version: str


@dataclass(frozen=True)
class Property:
    """Structure property; `name` is the wire identifier."""

    name: str
    type: SchemaNode
    optional: bool = False
    metadata: ElementMetadata = ElementMetadata()


@dataclass(frozen=True)
class Structure:
    """Named record type."""

    name: str
    properties: tuple[Property, ...]
    extends: tuple[SchemaNode, ...] = ()
    mixins: tuple[SchemaNode, ...] = ()
    metadata: ElementMetadata = ElementMetadata()


@dataclass(frozen=True)
class EnumerationEntry:
    """One enumerated literal value."""

    name: str
    value: str | int
    metadata: ElementMetadata = ElementMetadata()


@dataclass(frozen=True)
class Enumeration:
    """Named set of literal values over an underlying base type."""

    name: str
    type: SchemaNode
    values: tuple[EnumerationEntry, ...]
    supports_custom_values: bool = False
    metadata: ElementMetadata = ElementMetadata()


@dataclass(frozen=True)
class TypeAlias:
    """Named alias for another schema node."""

    name: str
    type: SchemaNode
    metadata: ElementMetadata = ElementMetadata()


@dataclass(frozen=True)
class Request:  # pylint: disable=too-many-instance-attributes
    """Request message definition."""

    method: str
    type_name: str | None
    message_direction: MessageDirection
    params: SchemaNode | None = None
    result: SchemaNode | None = None
    partial_result: SchemaNode | None = None
    registration_options: SchemaNode | None = None
    registration_method: str | None = None
    error_data: SchemaNode | None = None
    client_capability: str | None = None
    server_capability: str | None = None
    metadata: ElementMetadata = ElementMetadata()


@dataclass(frozen=True)
class Notification:
    """Notification message definition."""

    method: str
    type_name: str | None
    message_direction: MessageDirection
    params: SchemaNode | None = None
    registration_options: SchemaNode | None = None
    registration_method: str | None = None
    client_capability: str | None = None
    server_capability: str | None = None
    metadata: ElementMetadata = ElementMetadata()


Definition = Structure | Enumeration | TypeAlias


@dataclass(frozen=True)
class MetaModel:
    """Top-level catalog aggregate, read-only once decoded."""

    meta_data: MetaData
    structures: tuple[Structure, ...] = ()
    enumerations: tuple[Enumeration, ...] = ()
    type_aliases: tuple[TypeAlias, ...] = ()
    requests: tuple[Request, ...] = ()
    notifications: tuple[Notification, ...] = ()
