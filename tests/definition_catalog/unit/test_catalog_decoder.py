"""Definition catalog decoder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
from metamodel_codegen.definition_catalog import (
    MessageDirection,
    Structure,
    decode_meta_model,
    load_meta_model,
)
from metamodel_codegen.schema_nodes import BaseNode, DecodeError, OrNode, ReferenceNode


def _sample_path() -> Path:
    return Path(__file__).resolve().parents[3] / "samples" / "sample-meta-model.json"


def _document(**overrides: object) -> dict[str, object]:
    document: dict[str, object] = {
        "metaData": {"version": "3.17.0"},
        "requests": [],
        "notifications": [],
        "structures": [],
        "enumerations": [],
        "typeAliases": [],
    }
    document.update(overrides)
    return document


def test_loads_sample_meta_model() -> None:
    model = load_meta_model(_sample_path().read_bytes())

    assert model.meta_data.version == "3.17.0"
    assert [structure.name for structure in model.structures][:4] == [
        "Position",
        "Range",
        "CodeDescription",
        "Diagnostic",
    ]
    assert {enumeration.name for enumeration in model.enumerations} == {
        "DiagnosticSeverity",
        "MarkupKind",
    }
    assert "LSPAny" in {alias.name for alias in model.type_aliases}
    assert model.requests[0].method == "textDocument/hover"
    assert model.notifications[0].message_direction is MessageDirection.SERVER_TO_CLIENT


def test_structure_properties_keep_document_order() -> None:
    model = load_meta_model(_sample_path().read_text(encoding="utf-8"))
    diagnostic = next(item for item in model.structures if item.name == "Diagnostic")

    assert [prop.name for prop in diagnostic.properties] == [
        "range",
        "severity",
        "source",
        "message",
        "codeDescription",
    ]
    assert [prop.optional for prop in diagnostic.properties] == [False, True, True, False, True]
    assert diagnostic.metadata.documentation is not None
    assert diagnostic.properties[4].metadata.since == "3.16.0"


def test_structure_extends_and_mixins_are_decoded_as_nodes() -> None:
    model = load_meta_model(_sample_path().read_bytes())
    hover_params = next(item for item in model.structures if item.name == "HoverParams")

    assert hover_params.properties == ()
    assert [node.name for node in hover_params.extends] == ["TextDocumentPositionParams"]
    assert [node.name for node in hover_params.mixins] == ["WorkDoneProgressParams"]
    assert all(isinstance(node, ReferenceNode) for node in hover_params.mixins)


def test_enumeration_entries_and_request_fields_are_decoded() -> None:
    model = load_meta_model(_sample_path().read_bytes())
    severity = model.enumerations[0]
    hover = model.requests[0]

    assert severity.type == BaseNode(name="uinteger")
    assert [(entry.name, entry.value) for entry in severity.values][:2] == [
        ("Error", 1),
        ("Warning", 2),
    ]
    assert severity.values[0].metadata.documentation == "Reports an error."
    assert severity.supports_custom_values is False
    assert hover.type_name == "HoverRequest"
    assert hover.message_direction is MessageDirection.CLIENT_TO_SERVER
    assert isinstance(hover.result, OrNode)
    assert hover.partial_result is None
    assert hover.client_capability == "textDocument.hover"


def test_missing_collections_default_to_empty() -> None:
    model = decode_meta_model({"metaData": {"version": "1.0"}})

    assert model.structures == ()
    assert model.requests == ()


def test_unknown_top_level_field_is_rejected() -> None:
    with pytest.raises(DecodeError, match="meta-model: unknown field 'classes'"):
        decode_meta_model(_document(classes=[]))


def test_unknown_structure_field_is_rejected() -> None:
    document = _document(
        structures=[{"name": "Position", "properties": [], "fields": []}],
    )

    with pytest.raises(DecodeError, match="unknown field 'fields'"):
        decode_meta_model(document)


def test_unknown_kind_inside_property_fails_before_resolution() -> None:
    document = _document(
        structures=[
            {
                "name": "Position",
                "properties": [{"name": "line", "type": {"kind": "integer32"}}],
            }
        ],
    )

    with pytest.raises(DecodeError) as excinfo:
        decode_meta_model(document)

    assert "structure 'Position'" in str(excinfo.value)
    assert "unknown schema kind: integer32" in str(excinfo.value)


def test_missing_metadata_section_is_rejected() -> None:
    with pytest.raises(DecodeError, match="missing required field 'metaData'"):
        decode_meta_model({"structures": []})


def test_unknown_message_direction_is_rejected() -> None:
    document = _document(
        notifications=[{"method": "exit", "messageDirection": "sideways"}],
    )

    with pytest.raises(DecodeError, match="unknown message direction 'sideways'"):
        decode_meta_model(document)


def test_invalid_json_is_reported_as_decode_error() -> None:
    with pytest.raises(DecodeError, match="Invalid meta-model JSON"):
        load_meta_model(b"{not json")


def test_enumeration_value_must_be_string_or_integer() -> None:
    document = _document(
        enumerations=[
            {
                "name": "Flag",
                "type": {"kind": "base", "name": "boolean"},
                "values": [{"name": "On", "value": True}],
            }
        ]
    )

    with pytest.raises(DecodeError, match="must be a string or an integer"):
        decode_meta_model(document)


def test_decoded_catalog_is_read_only() -> None:
    model = decode_meta_model(_document(structures=[{"name": "Empty", "properties": []}]))
    structure = model.structures[0]

    assert isinstance(structure, Structure)
    with pytest.raises(AttributeError):
        structure.name = "Other"  # type: ignore[misc]
