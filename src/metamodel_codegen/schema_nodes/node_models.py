"""Schema node entities."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from metamodel_codegen.definition_catalog.catalog_models import (
        Enumeration,
        Structure,
        TypeAlias,
    )


@dataclass(frozen=True)
class ElementMetadata:
    """Metadata shared by schema nodes and named definitions."""

    since: str | None = None
    since_tags: tuple[str, ...] = ()
    deprecated: str | None = None
    proposed: bool = False
    documentation: str | None = None


@dataclass(frozen=True)
class BaseNode:
    """Primitive type such as `string` or `integer`."""

    name: str
    metadata: ElementMetadata = ElementMetadata()
    kind = "base"


@dataclass(eq=False)
class ReferenceNode:
    """Symbolic reference to a structure, enumeration or type alias.

    `target` is attached once by the reference resolver and never replaced.
    """

    name: str
    metadata: ElementMetadata = ElementMetadata()
    target: Structure | Enumeration | TypeAlias | None = field(
        default=None, repr=False, compare=False
    )
    kind = "reference"


@dataclass(frozen=True)
class ArrayNode:
    """Homogeneous array of one element type."""

    element: SchemaNode
    metadata: ElementMetadata = ElementMetadata()
    kind = "array"


@dataclass(frozen=True)
class MapNode:
    """Map from a key type to a value type."""

    key: SchemaNode
    value: SchemaNode
    metadata: ElementMetadata = ElementMetadata()
    kind = "map"


@dataclass(frozen=True)
class OrNode:
    """Union of alternative types."""

    items: tuple[SchemaNode, ...]
    metadata: ElementMetadata = ElementMetadata()
    kind = "or"


@dataclass(frozen=True)
class AndNode:
    """Intersection of combined types."""

    items: tuple[SchemaNode, ...]
    metadata: ElementMetadata = ElementMetadata()
    kind = "and"


@dataclass(frozen=True)
class TupleNode:
    """Fixed-length ordered sequence of types."""

    items: tuple[SchemaNode, ...]
    metadata: ElementMetadata = ElementMetadata()
    kind = "tuple"


@dataclass(frozen=True)
class StringLiteralNode:
    """Single constant string value."""

    value: str
    metadata: ElementMetadata = ElementMetadata()
    kind = "stringLiteral"


@dataclass(frozen=True)
class LiteralNode:
    """Constant of unconstrained shape, observed as an empty property list."""

    value: Any
    metadata: ElementMetadata = ElementMetadata()
    kind = "literal"


SchemaNode = (
    BaseNode
    | ReferenceNode
    | ArrayNode
    | MapNode
    | OrNode
    | AndNode
    | TupleNode
    | StringLiteralNode
    | LiteralNode
)
