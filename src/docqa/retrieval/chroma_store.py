"""Chroma implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

import chromadb

from docqa.errors import ProviderError
from docqa.retrieval.base import VectorStoreBase
from docqa.retrieval.models import QueryMatch, Record

logger = logging.getLogger(__name__)


def _to_matches(results: dict[str, Any]) -> list[QueryMatch]:
    """Flatten a single-query Chroma result into :class:`QueryMatch` objects."""
    ids = (results.get("ids") or [[]])[0]
    metas = (results.get("metadatas") or [[]])[0] or [None] * len(ids)
    distances = (results.get("distances") or [[]])[0] or [None] * len(ids)

    matches: list[QueryMatch] = []
    for doc_id, meta, dist in zip(ids, metas, distances):
        # Chroma returns distances; convert to a 0-1 similarity score.
        score = 1.0 / (1.0 + dist) if dist is not None else None
        matches.append(QueryMatch(id=doc_id, score=score, metadata=dict(meta or {})))
    return matches


class ChromaVectorStore(VectorStoreBase):
    """Chroma-backed vector store.

    Parameters
    ----------
    collection_name:
        Name of an existing Chroma collection.
    host:
        Chroma server hostname.
    port:
        Chroma server port.
    client:
        Pre-built Chroma client, mainly for tests.
    """

    provider = "chroma"

    def __init__(
        self,
        collection_name: str,
        *,
        host: str = "localhost",
        port: int = 8000,
        client: Any | None = None,
    ) -> None:
        super().__init__(collection_name)
        try:
            self._client = client or chromadb.HttpClient(host=host, port=port)
            self._collection = self._client.get_collection(collection_name)
        except Exception as exc:
            raise ProviderError(
                f"Could not open collection {collection_name!r}: {exc}", provider=self.provider
            ) from exc

    # -- VectorStoreBase overrides --------------------------------------------

    def upsert(self, records: list[Record]) -> None:
        try:
            self._collection.upsert(
                ids=[rec.id for rec in records],
                embeddings=[rec.values for rec in records],
                metadatas=[rec.metadata for rec in records],
            )
        except Exception as exc:
            raise ProviderError(
                f"Upsert into {self.collection_name!r} failed: {exc}", provider=self.provider
            ) from exc

    def query(
        self,
        vector: list[float],
        *,
        top_k: int = 5,
        include_metadata: bool = True,
    ) -> list[QueryMatch]:
        include = ["metadatas", "distances"] if include_metadata else ["distances"]
        try:
            results = self._collection.query(
                query_embeddings=[vector],
                n_results=top_k,
                include=include,
            )
        except Exception as exc:
            raise ProviderError(
                f"Query against {self.collection_name!r} failed: {exc}", provider=self.provider
            ) from exc

        if not isinstance(results, dict) or "ids" not in results:
            raise ProviderError("Malformed query response: no 'ids'", provider=self.provider)
        matches = _to_matches(results)
        logger.debug("Chroma returned %d matches for top_k=%d", len(matches), top_k)
        return matches
