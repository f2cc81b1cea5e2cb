"""Strict field-shape checks shared by the meta-model decoders."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any


class DecodeError(Exception):
    """Raised when a meta-model fragment does not match its expected shape."""


METADATA_FIELDS = frozenset({"since", "sinceTags", "deprecated", "proposed", "documentation"})


def require_mapping(value: Any, context: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise DecodeError(f"{context}: expected an object, got {_json_type(value)}")
    return value


def reject_unknown_fields(
    fragment: Mapping[str, Any], allowed: frozenset[str], context: str
) -> None:
    """Fail on the first field the shape does not declare, in document order."""
    for key in fragment:
        if key not in allowed:
            raise DecodeError(f"{context}: unknown field '{key}'")


def require_field(fragment: Mapping[str, Any], key: str, context: str) -> Any:
    if key not in fragment:
        raise DecodeError(f"{context}: missing required field '{key}'")
    return fragment[key]


def require_string(fragment: Mapping[str, Any], key: str, context: str) -> str:
    value = require_field(fragment, key, context)
    if not isinstance(value, str):
        raise DecodeError(f"{context}: field '{key}' must be a string")
    return value


def optional_string(fragment: Mapping[str, Any], key: str, context: str) -> str | None:
    value = fragment.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise DecodeError(f"{context}: field '{key}' must be a string")
    return value


def optional_bool(fragment: Mapping[str, Any], key: str, context: str) -> bool:
    value = fragment.get(key, False)
    if not isinstance(value, bool):
        raise DecodeError(f"{context}: field '{key}' must be a boolean")
    return value


def require_list(fragment: Mapping[str, Any], key: str, context: str) -> Sequence[Any]:
    value = require_field(fragment, key, context)
    if not isinstance(value, list):
        raise DecodeError(f"{context}: field '{key}' must be an array")
    return value


def optional_list(fragment: Mapping[str, Any], key: str, context: str) -> Sequence[Any]:
    value = fragment.get(key)
    if value is None:
        return ()
    if not isinstance(value, list):
        raise DecodeError(f"{context}: field '{key}' must be an array")
    return value


def optional_string_list(fragment: Mapping[str, Any], key: str, context: str) -> tuple[str, ...]:
    values = optional_list(fragment, key, context)
    if not all(isinstance(item, str) for item in values):
        raise DecodeError(f"{context}: field '{key}' entries must be strings")
    return tuple(values)


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return type(value).__name__
