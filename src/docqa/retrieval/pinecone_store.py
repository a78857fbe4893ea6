"""Pinecone implementation of the vector-store abstraction."""

from __future__ import annotations

import logging
from typing import Any

from pinecone import Pinecone

from docqa.errors import ProviderError
from docqa.retrieval.base import VectorStoreBase
from docqa.retrieval.models import QueryMatch, Record

logger = logging.getLogger(__name__)


def _field(obj: Any, name: str) -> Any:
    """Read *name* from an SDK response object or a plain dict."""
    if isinstance(obj, dict):
        return obj.get(name)
    return getattr(obj, name, None)


class PineconeVectorStore(VectorStoreBase):
    """Pinecone-backed vector store.

    Parameters
    ----------
    collection_name:
        Name of an existing Pinecone index.
    api_key:
        Pinecone credential; ignored when *index* is given.
    index:
        Pre-built index handle, mainly for tests.
    """

    provider = "pinecone"

    def __init__(
        self,
        collection_name: str,
        *,
        api_key: str | None = None,
        index: Any | None = None,
    ) -> None:
        super().__init__(collection_name)
        if index is None:
            try:
                self._client = Pinecone(api_key=api_key)
                index = self._client.Index(collection_name)
            except Exception as exc:  # the SDK raises several unrelated types
                raise ProviderError(
                    f"Could not open index {collection_name!r}: {exc}", provider=self.provider
                ) from exc
        self._index = index

    # -- VectorStoreBase overrides --------------------------------------------

    def upsert(self, records: list[Record]) -> None:
        logger.debug(
            "Upserting %d records into Pinecone index %r", len(records), self.collection_name
        )
        vectors = [
            {"id": rec.id, "values": rec.values, "metadata": rec.metadata} for rec in records
        ]
        try:
            self._index.upsert(vectors=vectors)
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
        try:
            response = self._index.query(
                vector=vector,
                top_k=top_k,
                include_metadata=include_metadata,
            )
        except Exception as exc:
            raise ProviderError(
                f"Query against {self.collection_name!r} failed: {exc}", provider=self.provider
            ) from exc

        raw_matches = _field(response, "matches")
        if raw_matches is None:
            raise ProviderError("Malformed query response: no 'matches'", provider=self.provider)

        matches: list[QueryMatch] = []
        for raw in raw_matches:
            match_id = _field(raw, "id")
            if match_id is None:
                raise ProviderError("Malformed query response: match without id", provider=self.provider)
            matches.append(
                QueryMatch(
                    id=str(match_id),
                    score=_field(raw, "score"),
                    metadata=_field(raw, "metadata") or {},
                )
            )
        logger.debug("Pinecone returned %d matches for top_k=%d", len(matches), top_k)
        return matches
