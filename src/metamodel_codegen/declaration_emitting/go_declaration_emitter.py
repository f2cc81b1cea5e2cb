"""Go record declaration emitter."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from types import MappingProxyType
from typing import TextIO

from metamodel_codegen.definition_catalog.catalog_models import (
    Enumeration,
    Property,
    Structure,
    TypeAlias,
)
from metamodel_codegen.reference_resolution.reference_resolver import UnresolvedReferenceError
from metamodel_codegen.schema_nodes.node_models import BaseNode, ReferenceNode, SchemaNode

from .identifier_casing import to_exported_identifier

LOGGER = logging.getLogger(__name__)

# One entry per known primitive; None marks a primitive without a Go mapping yet.
BASE_TYPE_TABLE: Mapping[str, str | None] = MappingProxyType(
    {
        "string": "string",
        "boolean": None,
        "integer": None,
        "uinteger": None,
        "decimal": None,
        "URI": None,
        "DocumentUri": None,
        "RegExp": None,
        "null": None,
    }
)


class UnsupportedTypeError(Exception):
    """Raised when a schema kind or base type has no emission rule."""

    def __init__(self, kind: str, name: str | None = None, message: str | None = None) -> None:
        if message is None:
            if name is None:
                message = f"No Go type mapping for schema kind '{kind}'"
            else:
                message = f"No Go type mapping for {kind} type '{name}'"
        super().__init__(message)
        self.kind = kind
        self.name = name


class GoDeclarationEmitter:
    """Write Go struct declarations for resolved structures.

    Referenced structures are written before the structure that uses them.
    Each structure is written at most once per emitter; a structure met again,
    including through a reference cycle, is only referenced by name.
    """

    def __init__(
        self,
        output: TextIO,
        *,
        flatten_inheritance: bool = True,
        base_types: Mapping[str, str | None] = BASE_TYPE_TABLE,
    ) -> None:
        self._output = output
        self._flatten_inheritance = flatten_inheritance
        self._base_types = base_types
        self._emitted: list[str] = []
        self._in_progress: set[str] = set()

    @property
    def emitted_names(self) -> tuple[str, ...]:
        """Names of the structures written so far, in emission order."""
        return tuple(self._emitted)

    def emit(self, structure: Structure) -> None:
        if structure.name in self._emitted or structure.name in self._in_progress:
            return
        self._in_progress.add(structure.name)
        try:
            fields = [self._render_field(prop) for prop in self._collect_properties(structure)]
        finally:
            self._in_progress.discard(structure.name)

        self._write(f"type {structure.name} struct {{\n")
        for field_line in fields:
            self._write(f"\t{field_line}\n")
        self._write("}\n")
        self._emitted.append(structure.name)
        LOGGER.debug("Emitted %s with %d fields", structure.name, len(fields))

    def _render_field(self, prop: Property) -> str:
        identifier = to_exported_identifier(prop.name)
        type_name = self._field_type(prop.type)
        options = ",omitempty" if prop.optional else ""
        return f'{identifier} {type_name} `json:"{prop.name}{options}"`'

    def _field_type(self, node: SchemaNode) -> str:
        if isinstance(node, ReferenceNode):
            target = node.target
            if target is None:
                raise UnresolvedReferenceError(node.name)
            if isinstance(target, Structure):
                self.emit(target)
                return f"*{target.name}"
            if isinstance(target, (Enumeration, TypeAlias)):
                return target.name
            raise UnsupportedTypeError(node.kind, node.name)
        if isinstance(node, BaseNode):
            mapped = self._base_types.get(node.name)
            if mapped is None:
                raise UnsupportedTypeError(node.kind, node.name)
            return mapped
        raise UnsupportedTypeError(node.kind)

    def _collect_properties(
        self, structure: Structure, lineage: frozenset[str] = frozenset()
    ) -> list[Property]:
        if not self._flatten_inheritance:
            return list(structure.properties)

        # Inherited properties first, minus those the structure redeclares.
        own_names = {prop.name for prop in structure.properties}
        collected: dict[str, Property] = {}
        lineage = lineage | {structure.name}
        for parent_node in (*structure.extends, *structure.mixins):
            parent = _parent_structure(structure, parent_node)
            if parent.name in lineage:
                continue
            for prop in self._collect_properties(parent, lineage):
                if prop.name not in own_names:
                    collected[prop.name] = prop
        return [*collected.values(), *structure.properties]

    def _write(self, text: str) -> None:
        self._output.write(text)


def _parent_structure(structure: Structure, node: SchemaNode) -> Structure:
    if not isinstance(node, ReferenceNode):
        raise UnsupportedTypeError(
            node.kind,
            message=f"{structure.name} cannot inherit from schema kind '{node.kind}'",
        )
    if node.target is None:
        raise UnresolvedReferenceError(node.name)
    if not isinstance(node.target, Structure):
        raise UnsupportedTypeError(
            node.kind,
            node.name,
            message=f"{structure.name} cannot inherit from non-structure '{node.name}'",
        )
    return node.target
