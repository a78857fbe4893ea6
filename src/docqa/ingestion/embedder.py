"""Embedding clients.

Every call to :meth:`EmbedderBase.embed` is one request to the provider;
nothing is cached between calls or between runs.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from numbers import Real
from typing import Any

import openai
from openai import OpenAI

from docqa.config import Settings
from docqa.errors import ProviderError

logger = logging.getLogger(__name__)


class EmbedderBase(ABC):
    """Converts a text into a fixed-length vector.

    The same embedder must be used for the ingested chunks and for the
    questions asked against them.
    """

    @abstractmethod
    def embed(self, text: str) -> list[float]:
        """Return exactly one embedding vector for *text*."""
        ...


class OpenAIEmbedder(EmbedderBase):
    """Embedder backed by the OpenAI embeddings endpoint.

    Parameters
    ----------
    model:
        Embedding model identifier.
    api_key:
        Provider credential.
    encoding_format:
        Wire encoding requested for the vector (``"float"``).
    expected_dimension:
        When set, every returned vector must have this length.
    max_retries:
        Retries performed by the SDK itself on rate limits and transient
        failures; the pipeline adds none of its own.
    client:
        Pre-built ``openai.OpenAI`` client, mainly for tests.
    """

    provider = "openai"

    def __init__(
        self,
        model: str = "text-embedding-3-small",
        *,
        api_key: str | None = None,
        encoding_format: str = "float",
        expected_dimension: int | None = None,
        max_retries: int = 2,
        client: Any | None = None,
    ) -> None:
        self.model = model
        self.encoding_format = encoding_format
        self.expected_dimension = expected_dimension
        self._client = client or OpenAI(api_key=api_key, max_retries=max_retries)

    @classmethod
    def from_settings(cls, settings: Settings) -> OpenAIEmbedder:
        return cls(
            settings.embedding_model,
            api_key=settings.openai_api_key,
            encoding_format=settings.embedding_encoding_format,
            expected_dimension=settings.embedding_dimension,
            max_retries=settings.provider_max_retries,
        )

    def embed(self, text: str) -> list[float]:
        try:
            response = self._client.embeddings.create(
                model=self.model,
                input=text,
                encoding_format=self.encoding_format,
            )
        except openai.OpenAIError as exc:
            raise ProviderError(f"Embedding request failed: {exc}", provider=self.provider) from exc

        vector = self._extract_vector(response)
        logger.debug("Embedded %d chars → dim=%d", len(text), len(vector))
        return vector

    def _extract_vector(self, response: Any) -> list[float]:
        data = getattr(response, "data", None)
        if not data or len(data) != 1:
            count = len(data) if data else 0
            raise ProviderError(
                f"Malformed embedding response: expected 1 embedding, got {count}",
                provider=self.provider,
            )

        vector = getattr(data[0], "embedding", None)
        if not isinstance(vector, list) or not vector:
            raise ProviderError("Malformed embedding response: missing vector", provider=self.provider)
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in vector):
            raise ProviderError(
                "Malformed embedding response: vector is not numeric "
                f"(encoding_format={self.encoding_format!r})",
                provider=self.provider,
            )
        if self.expected_dimension is not None and len(vector) != self.expected_dimension:
            raise ProviderError(
                f"Embedding dimension mismatch: got {len(vector)}, "
                f"expected {self.expected_dimension}",
                provider=self.provider,
            )

        return [float(v) for v in vector]
