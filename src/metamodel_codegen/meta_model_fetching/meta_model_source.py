"""Meta-model document retrieval."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from metamodel_codegen.configuration.runtime_settings import SourceSettings

LOGGER = logging.getLogger(__name__)


class TransportError(Exception):
    """Raised when the meta-model document cannot be retrieved."""


class MetaModelFetcher(Protocol):  # pylint: disable=too-few-public-methods
    """Protocol for clients that download the meta-model document."""

    def fetch(self, url: str, timeout_seconds: float) -> bytes: ...


class HttpMetaModelFetcher:  # pylint: disable=too-few-public-methods
    """Single blocking GET using httpx; no retries."""

    def __init__(self, transport: httpx.BaseTransport | None = None) -> None:
        self._transport = transport

    def fetch(self, url: str, timeout_seconds: float) -> bytes:
        LOGGER.info("Fetching meta-model from %s", url)
        try:
            with httpx.Client(
                transport=self._transport, timeout=timeout_seconds, follow_redirects=True
            ) as client:
                response = client.get(url)
                response.raise_for_status()
        except httpx.TimeoutException as exc:
            raise TransportError(f"Timed out fetching meta-model from {url}: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise TransportError(
                f"Meta-model request to {url} failed with status {exc.response.status_code}"
            ) from exc
        except httpx.HTTPError as exc:
            raise TransportError(f"Failed to fetch meta-model from {url}: {exc}") from exc
        LOGGER.debug("Fetched %d bytes", len(response.content))
        return response.content


def read_meta_model_bytes(source: SourceSettings, fetcher: MetaModelFetcher | None = None) -> bytes:
    """Return the raw meta-model document from the configured local path or URL."""
    if source.path is not None:
        LOGGER.info("Reading meta-model from %s", source.path)
        try:
            return source.path.read_bytes()
        except OSError as exc:
            raise TransportError(f"Failed to read meta-model file {source.path}: {exc}") from exc
    resolved_fetcher = fetcher or HttpMetaModelFetcher()
    return resolved_fetcher.fetch(source.url, source.timeout_seconds)
