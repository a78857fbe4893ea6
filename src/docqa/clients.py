"""Client set construction — the one place that talks to settings.

A run builds its clients once and hands them to the pipeline functions,
which makes it easy to swap in fakes under test.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from docqa.answering.llm import CompletionClient
from docqa.ingestion.embedder import EmbedderBase, OpenAIEmbedder

if TYPE_CHECKING:
    from docqa.config import Settings
    from docqa.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


@dataclass
class ClientSet:
    """Remote-service clients used by one run.

    ``llm`` is ``None`` for ingestion runs, which never call the
    completion provider.
    """

    embedder: EmbedderBase
    store: VectorStoreBase
    llm: CompletionClient | None = None


def build_store(settings: Settings) -> VectorStoreBase:
    """Return the vector-store backend selected by ``settings.vector_backend``."""
    if settings.vector_backend == "chroma":
        from docqa.retrieval.chroma_store import ChromaVectorStore

        logger.info("Using Chroma at %s:%d", settings.chroma_host, settings.chroma_port)
        return ChromaVectorStore(
            settings.index_name, host=settings.chroma_host, port=settings.chroma_port
        )

    from docqa.retrieval.pinecone_store import PineconeVectorStore

    return PineconeVectorStore(settings.index_name, api_key=settings.pinecone_api_key)


def build_clients(settings: Settings, *, with_llm: bool = False) -> ClientSet:
    """Construct the clients for a run from *settings*."""
    return ClientSet(
        embedder=OpenAIEmbedder.from_settings(settings),
        store=build_store(settings),
        llm=CompletionClient.from_settings(settings) if with_llm else None,
    )
