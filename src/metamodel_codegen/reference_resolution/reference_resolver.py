"""Reference resolution service."""

from __future__ import annotations

import logging

from metamodel_codegen.definition_catalog.catalog_models import (
    Definition,
    MetaModel,
    Structure,
)
from metamodel_codegen.schema_nodes.node_models import (
    AndNode,
    ArrayNode,
    MapNode,
    OrNode,
    ReferenceNode,
    SchemaNode,
    TupleNode,
)

LOGGER = logging.getLogger(__name__)


class ReferenceNotFoundError(Exception):
    """Raised when a name matches no structure, enumeration or type alias."""

    def __init__(self, name: str, message: str | None = None) -> None:
        super().__init__(message or f"Reference not found: {name}")
        self.name = name


class StructureNotFoundError(ReferenceNotFoundError):
    """Raised when a requested structure does not exist."""

    def __init__(self, name: str) -> None:
        super().__init__(name, f"Structure not found: {name}")


class UnresolvedReferenceError(RuntimeError):
    """Raised when a reference node is used before it has been resolved."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Reference has not been resolved: {name}")
        self.name = name


def build_definition_index(model: MetaModel) -> dict[str, Definition]:
    """Map every definition name to its definition.

    Structures win over enumerations, and enumerations over type aliases,
    when a name appears in more than one category.
    """
    index: dict[str, Definition] = {}
    for category in (model.structures, model.enumerations, model.type_aliases):
        for definition in category:
            existing = index.get(definition.name)
            if existing is not None:
                if existing is not definition:
                    LOGGER.debug(
                        "Name %s defined more than once, keeping %s",
                        definition.name,
                        type(existing).__name__,
                    )
                continue
            index[definition.name] = definition
    return index


class ReferenceResolver:
    """Attach definitions to the reference nodes of a meta-model.

    Resolution is lazy: a structure's members are resolved the first time the
    structure is requested or referenced, and never again afterwards. With
    `resolve_inheritance` off, `extends` and `mixins` are left unresolved.
    """

    def __init__(self, model: MetaModel, *, resolve_inheritance: bool = True) -> None:
        self._index = build_definition_index(model)
        self._resolve_inheritance = resolve_inheritance
        self._resolved: set[str] = set()
        self._resolving: set[str] = set()
        # Finished within the current outermost call, not yet final.
        self._pending: set[str] = set()

    def lookup(self, name: str) -> Definition:
        definition = self._index.get(name)
        if definition is None:
            raise ReferenceNotFoundError(name)
        return definition

    def resolve(self, node: SchemaNode) -> None:
        """Resolve every reference reachable from `node`.

        Base, string-literal and literal nodes are leaves. A reference to a
        structure also resolves that structure's members.
        """
        if isinstance(node, ReferenceNode):
            target = self.lookup(node.name)
            if node.target is None:
                node.target = target
            if isinstance(target, Structure):
                self._resolve_members(target)
        elif isinstance(node, ArrayNode):
            self.resolve(node.element)
        elif isinstance(node, MapNode):
            self.resolve(node.key)
            self.resolve(node.value)
        elif isinstance(node, (OrNode, AndNode, TupleNode)):
            for item in node.items:
                self.resolve(item)

    def resolve_structure(self, name: str) -> Structure:
        """Look up a structure and resolve all of its references.

        Raises:
          StructureNotFoundError: If no structure carries `name`.
          ReferenceNotFoundError: For the first reference that cannot be resolved.
        """
        definition = self._index.get(name)
        if not isinstance(definition, Structure):
            raise StructureNotFoundError(name)
        self._resolve_members(definition)
        return definition

    def _resolve_members(self, structure: Structure) -> None:
        name = structure.name
        # A structure already in progress is part of a reference cycle.
        if name in self._resolved or name in self._resolving or name in self._pending:
            return
        LOGGER.debug("Resolving structure %s", name)
        outermost = not self._resolving
        self._resolving.add(name)
        try:
            if self._resolve_inheritance:
                for parent in (*structure.extends, *structure.mixins):
                    self.resolve(parent)
            for prop in structure.properties:
                self.resolve(prop.type)
            self._pending.add(name)
            if outermost:
                self._resolved |= self._pending
        finally:
            self._resolving.discard(name)
            if outermost:
                self._pending.clear()
