"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_META_MODEL_URL,
    DEFAULT_TYPE_NAME,
    Configuration,
    GenerationSettings,
    LoggingSettings,
    SourceSettings,
)

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_SECTIONS = frozenset({"source", "generation", "logging"})


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def default_configuration() -> Configuration:
    """Configuration used when no file is given."""
    return Configuration(path=None)


def load_configuration(config_path: Path | str | None) -> Configuration:
    """Load and validate the configuration file, or return defaults for `None`."""
    if config_path is None:
        return default_configuration()

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in _SECTIONS)
    if unknown:
        raise ConfigurationError(f"Unknown configuration section(s): {', '.join(unknown)}")

    return Configuration(
        path=path,
        source=_parse_source_section(parsed.get("source"), path.parent),
        generation=_parse_generation_section(parsed.get("generation")),
        logging=_parse_logging_section(parsed.get("logging")),
    )


def _parse_source_section(value: Any, base_path: Path) -> SourceSettings:
    section = _optional_mapping(value, "source")
    url = _require_non_empty_string(section.get("url", DEFAULT_META_MODEL_URL), "source.url")
    path_value = section.get("path")
    source_path = None
    if path_value is not None:
        source_path = _resolve_path(base_path, _require_non_empty_string(path_value, "source.path"))
    timeout_seconds = _require_positive_int(
        section.get("timeout_seconds", 30), "source.timeout_seconds"
    )
    return SourceSettings(url=url, path=source_path, timeout_seconds=timeout_seconds)


def _parse_generation_section(value: Any) -> GenerationSettings:
    section = _optional_mapping(value, "generation")
    type_name = _require_non_empty_string(
        section.get("type_name", DEFAULT_TYPE_NAME), "generation.type_name"
    )
    flatten_inheritance = _require_bool(
        section.get("flatten_inheritance", True), "generation.flatten_inheritance"
    )
    return GenerationSettings(type_name=type_name, flatten_inheritance=flatten_inheritance)


def _parse_logging_section(value: Any) -> LoggingSettings:
    section = _optional_mapping(value, "logging")
    level = _require_non_empty_string(section.get("level", "WARNING"), "logging.level").upper()
    if level not in LOG_LEVELS:
        raise ConfigurationError(
            f"logging.level must be one of {', '.join(LOG_LEVELS)}, got '{level}'."
        )
    return LoggingSettings(level=level)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be true or false.")
    return value


def _require_positive_int(value: Any, field_name: str) -> int:
    if isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if not isinstance(value, int):
        raise ConfigurationError(f"{field_name} must be an integer.")
    if value <= 0:
        raise ConfigurationError(f"{field_name} must be greater than zero.")
    return value
