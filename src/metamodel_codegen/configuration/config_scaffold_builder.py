"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

from .runtime_settings import DEFAULT_META_MODEL_URL, DEFAULT_TYPE_NAME

DEFAULT_CONFIG_FILENAME = "metamodel-codegen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = f"""# Configuration template for metamodel-codegen.
# Every section is optional; command line options override these values.

source:
  # Meta-model document fetched over HTTP.
  url: "{DEFAULT_META_MODEL_URL}"
  # Local meta-model file, used instead of url when set.
  # path: "./metaModel.json"
  timeout_seconds: 30

generation:
  # Structure whose declaration is emitted, with everything it references.
  type_name: "{DEFAULT_TYPE_NAME}"
  # Copy properties of extended and mixed-in structures into the declaration.
  flatten_inheritance: true

logging:
  # One of DEBUG, INFO, WARNING, ERROR, CRITICAL.
  level: "WARNING"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML configuration template with defaults and inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
