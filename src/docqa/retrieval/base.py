"""Abstract base class for vector-store backends.

Adding a new backend (Weaviate, Qdrant …) only requires subclassing
:class:`VectorStoreBase` and implementing the two abstract methods.
The pipelines are backend-agnostic.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from docqa.retrieval.models import QueryMatch, Record


class VectorStoreBase(ABC):
    """Backend-agnostic vector-store interface.

    Parameters
    ----------
    collection_name:
        Name of the collection / index. It must already exist with the
        dimensionality of the embedding model; creating it is not part of
        this interface.
    """

    provider = "unknown"

    def __init__(self, collection_name: str) -> None:
        self.collection_name = collection_name

    # -- required overrides ---------------------------------------------------

    @abstractmethod
    def upsert(self, records: list[Record]) -> None:
        """Insert *records*, replacing any existing record with the same id.

        One call is one request to the backend.
        """
        ...

    @abstractmethod
    def query(
        self,
        vector: list[float],
        *,
        top_k: int = 5,
        include_metadata: bool = True,
    ) -> list[QueryMatch]:
        """Return up to *top_k* matches ordered by descending similarity.

        The similarity metric is a property of the collection. Ties are
        ordered however the backend orders them.
        """
        ...
