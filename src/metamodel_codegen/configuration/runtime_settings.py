"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_META_MODEL_URL = (
    "https://raw.githubusercontent.com/microsoft/vscode-languageserver-node/"
    "refs/heads/main/protocol/metaModel.json"
)
DEFAULT_TYPE_NAME = "Diagnostic"


@dataclass(frozen=True)
class SourceSettings:
    """Where the meta-model document is read from."""

    url: str = DEFAULT_META_MODEL_URL
    path: Path | None = None
    timeout_seconds: int = 30


@dataclass(frozen=True)
class GenerationSettings:
    """Declaration generation options."""

    type_name: str = DEFAULT_TYPE_NAME
    flatten_inheritance: bool = True


@dataclass(frozen=True)
class LoggingSettings:
    """Log output options."""

    level: str = "WARNING"


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    source: SourceSettings = SourceSettings()
    generation: GenerationSettings = GenerationSettings()
    logging: LoggingSettings = LoggingSettings()
