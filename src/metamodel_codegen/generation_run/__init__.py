"""Generation run exports."""

from .generation_use_case import execute_declaration_generation, resolve_run_configuration
from .run_contracts import GenerationOutcome, GenerationRequest

__all__ = [
    "GenerationOutcome",
    "GenerationRequest",
    "execute_declaration_generation",
    "resolve_run_configuration",
]
