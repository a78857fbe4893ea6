"""
Retrieval — vector-store backends behind one interface.

Public surface
--------------
- :class:`VectorStoreBase` — abstract backend.
- :class:`PineconeVectorStore` — default Pinecone backend.
- :class:`ChromaVectorStore` — Chroma backend.
- :class:`Record`, :class:`QueryMatch` — data models.
"""

from docqa.retrieval.base import VectorStoreBase
from docqa.retrieval.models import QueryMatch, Record

__all__ = [
    "ChromaVectorStore",
    "PineconeVectorStore",
    "QueryMatch",
    "Record",
    "VectorStoreBase",
]


def __getattr__(name: str):  # noqa: ANN001
    """Lazy-import backends so their SDKs load only when selected."""
    if name == "PineconeVectorStore":
        from docqa.retrieval.pinecone_store import PineconeVectorStore

        return PineconeVectorStore
    if name == "ChromaVectorStore":
        from docqa.retrieval.chroma_store import ChromaVectorStore

        return ChromaVectorStore
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
