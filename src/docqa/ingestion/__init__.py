"""
Ingestion — document loading, paragraph chunking, and embedding into the
vector store.

A run reads one document, splits it on blank lines, and for each chunk in
order embeds the text and upserts one record whose id is the chunk index.
"""

from docqa.ingestion.chunker import Chunk, chunk_document, split_paragraphs
from docqa.ingestion.embedder import EmbedderBase, OpenAIEmbedder
from docqa.ingestion.loader import load_text_document
from docqa.ingestion.pipeline import IngestionReport, ingest_document, ingest_file

__all__ = [
    "Chunk",
    "EmbedderBase",
    "IngestionReport",
    "OpenAIEmbedder",
    "chunk_document",
    "ingest_document",
    "ingest_file",
    "load_text_document",
    "split_paragraphs",
]
