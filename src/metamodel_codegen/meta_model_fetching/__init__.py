"""Meta-model retrieval exports."""

from .meta_model_source import (
    HttpMetaModelFetcher,
    MetaModelFetcher,
    TransportError,
    read_meta_model_bytes,
)

__all__ = [
    "HttpMetaModelFetcher",
    "MetaModelFetcher",
    "TransportError",
    "read_meta_model_bytes",
]
