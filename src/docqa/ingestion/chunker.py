"""Paragraph chunking.

The strategy is deliberately naive: the text is cut at every blank line
(two consecutive newlines) and nothing else. Empty segments are kept so
that the chunk indices, and therefore the record ids, only depend on the
raw text.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

if TYPE_CHECKING:
    from langchain_core.documents import Document

PARAGRAPH_DELIMITER = "\n\n"


class Chunk(BaseModel):
    """One contiguous, index-identified segment of a source document."""

    index: int
    text: str

    model_config = {"frozen": True}

    @property
    def record_id(self) -> str:
        """Identifier of the vector-store record holding this chunk."""
        return str(self.index)


def split_paragraphs(text: str) -> list[Chunk]:
    """Split *text* on blank lines into ordered chunks.

    The delimiter is removed from the chunk content, so
    ``PARAGRAPH_DELIMITER.join(c.text for c in chunks) == text`` always
    holds. An empty string yields a single empty chunk.

    Parameters
    ----------
    text:
        Full text of the document.

    Returns
    -------
    list[Chunk]
        Chunks in document order, indexed from zero.
    """
    return [Chunk(index=i, text=part) for i, part in enumerate(text.split(PARAGRAPH_DELIMITER))]


def chunk_document(document: Document) -> list[Chunk]:
    """Split a loaded ``Document`` into paragraph chunks."""
    return split_paragraphs(document.page_content)
