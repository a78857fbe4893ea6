"""Ingestion pipeline: read → chunk → for each chunk: embed → upsert.

Chunks are processed strictly one after another, each embedded and
upserted before the next one starts, which keeps request pacing to the
SDK's own rate-limit handling. There is no checkpointing: re-running from
the start is safe because chunk indices are deterministic and upserts
replace records with the same id.
"""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from docqa.ingestion.chunker import chunk_document
from docqa.ingestion.loader import load_text_document
from docqa.retrieval.models import Record

if TYPE_CHECKING:
    from langchain_core.documents import Document

    from docqa.clients import ClientSet
    from docqa.ingestion.embedder import EmbedderBase
    from docqa.retrieval.base import VectorStoreBase

logger = logging.getLogger(__name__)


@dataclass
class IngestionReport:
    """Summary of a completed ingestion run."""

    source: str
    collection: str
    chunks_upserted: int
    elapsed_seconds: float


def ingest_document(
    document: Document,
    embedder: EmbedderBase,
    store: VectorStoreBase,
) -> IngestionReport:
    """Embed and upsert every paragraph chunk of *document*.

    The first failure from the embedder or the store propagates
    unchanged; chunks before it stay stored, chunks after it are never
    attempted.
    """
    source = document.metadata.get("source", "unknown")
    chunks = chunk_document(document)
    logger.info("Ingesting %d chunks from %s into %r", len(chunks), source, store.collection_name)

    t0 = time.monotonic()
    for chunk in chunks:
        values = embedder.embed(chunk.text)
        store.upsert([Record.from_chunk(chunk, values)])
        logger.debug("  upserted chunk %d / %d", chunk.index + 1, len(chunks))
    elapsed = time.monotonic() - t0

    report = IngestionReport(
        source=source,
        collection=store.collection_name,
        chunks_upserted=len(chunks),
        elapsed_seconds=round(elapsed, 2),
    )
    logger.info(
        "Upserted %d chunks → collection %r in %.1fs",
        report.chunks_upserted,
        report.collection,
        elapsed,
    )
    return report



def ingest_file(path: str | Path, clients: ClientSet) -> IngestionReport:
    """Load the text file at *path* and ingest it with *clients*."""
    document = load_text_document(path)
    return ingest_document(document, clients.embedder, clients.store)
