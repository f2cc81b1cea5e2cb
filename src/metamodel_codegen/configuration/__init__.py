"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import LOG_LEVELS, ConfigurationError, default_configuration, load_configuration
from .runtime_settings import (
    DEFAULT_META_MODEL_URL,
    DEFAULT_TYPE_NAME,
    Configuration,
    GenerationSettings,
    LoggingSettings,
    SourceSettings,
)

__all__ = [
    "Configuration",
    "GenerationSettings",
    "LoggingSettings",
    "SourceSettings",
    "ConfigurationError",
    "default_configuration",
    "load_configuration",
    "LOG_LEVELS",
    "DEFAULT_CONFIG_FILENAME",
    "DEFAULT_META_MODEL_URL",
    "DEFAULT_TYPE_NAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
