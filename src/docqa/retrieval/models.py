"""Domain models for stored records and query matches."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from docqa.ingestion.chunker import Chunk


class Record(BaseModel):
    """The persisted unit in the vector store.

    Attributes
    ----------
    id:
        Chunk index rendered as a string.
    values:
        Embedding vector of the chunk text.
    metadata:
        ``{"text": <chunk text>}``; the only way to get the text back
        after storage.
    """

    id: str
    values: list[float]
    metadata: dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_chunk(cls, chunk: Chunk, values: list[float]) -> Record:
        return cls(id=chunk.record_id, values=values, metadata={"text": chunk.text})


class QueryMatch(BaseModel):
    """A single nearest-neighbour hit returned by a vector-store query."""

    id: str
    score: float | None = None
    metadata: dict[str, Any] = Field(default_factory=dict)

    @property
    def text(self) -> str:
        """Stored chunk text, or ``""`` when metadata was not requested."""
        return str(self.metadata.get("text", ""))

    def __str__(self) -> str:  # noqa: D105
        return f"[{self.id}] {self.text[:120]}…"
