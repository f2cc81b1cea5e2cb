"""Declaration generation use-case service."""

from __future__ import annotations

import logging
import sys
from contextlib import ExitStack
from dataclasses import replace
from pathlib import Path
from typing import TextIO

from metamodel_codegen.configuration import Configuration, load_configuration
from metamodel_codegen.declaration_emitting import GoDeclarationEmitter
from metamodel_codegen.definition_catalog import load_meta_model
from metamodel_codegen.meta_model_fetching import MetaModelFetcher, read_meta_model_bytes
from metamodel_codegen.reference_resolution import ReferenceResolver

from .run_contracts import GenerationOutcome, GenerationRequest

LOGGER = logging.getLogger(__name__)


def resolve_run_configuration(request: GenerationRequest) -> Configuration:
    """Load the configuration file and apply the request's overrides."""
    configuration = load_configuration(request.config_path)
    source = configuration.source
    if request.source_url is not None:
        source = replace(source, url=request.source_url, path=None)
    if request.source_path is not None:
        source = replace(source, path=Path(request.source_path).resolve())

    generation = configuration.generation
    if request.type_name is not None:
        generation = replace(generation, type_name=request.type_name)
    if request.flatten_inheritance is not None:
        generation = replace(generation, flatten_inheritance=request.flatten_inheritance)
    return replace(configuration, source=source, generation=generation)


def execute_declaration_generation(
    request: GenerationRequest,
    *,
    output: TextIO | None = None,
    output_path: str | Path | None = None,
    fetcher: MetaModelFetcher | None = None,
    configuration: Configuration | None = None,
) -> GenerationOutcome:
    """Fetch, decode and resolve the meta-model, then write the requested declarations.

    Declarations go to `output_path` when given, otherwise to `output`, or to
    standard output. The file is only opened once resolution has succeeded, so
    an earlier failure leaves an existing file untouched.

    Errors from every stage propagate unchanged.
    """
    resolved_configuration = configuration or resolve_run_configuration(request)
    generation = resolved_configuration.generation

    raw = read_meta_model_bytes(resolved_configuration.source, fetcher)
    model = load_meta_model(raw)
    LOGGER.info(
        "Decoded meta-model %s: %d structures, %d enumerations, %d type aliases",
        model.meta_data.version,
        len(model.structures),
        len(model.enumerations),
        len(model.type_aliases),
    )

    resolver = ReferenceResolver(model, resolve_inheritance=generation.flatten_inheritance)
    structure = resolver.resolve_structure(generation.type_name)
    with ExitStack() as stack:
        sink = (
            stack.enter_context(open(output_path, "w", encoding="utf-8"))
            if output_path is not None
            else output or sys.stdout
        )
        emitter = GoDeclarationEmitter(sink, flatten_inheritance=generation.flatten_inheritance)
        emitter.emit(structure)
    return GenerationOutcome(
        type_name=structure.name,
        meta_model_version=model.meta_data.version,
        emitted_structures=emitter.emitted_names,
    )
