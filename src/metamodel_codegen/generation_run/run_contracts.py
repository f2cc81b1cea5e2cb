"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run; `None` fields fall back to configuration."""

    config_path: str | None = None
    type_name: str | None = None
    source_url: str | None = None
    source_path: str | None = None
    flatten_inheritance: bool | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    type_name: str
    meta_model_version: str
    emitted_structures: tuple[str, ...]
