"""Shared pytest configuration and fixtures.

The fakes below stand in for the three remote services so that no test
touches the network.
"""

from __future__ import annotations

import pytest

from docqa.clients import ClientSet
from docqa.errors import ProviderError
from docqa.ingestion.embedder import EmbedderBase
from docqa.retrieval.base import VectorStoreBase
from docqa.retrieval.models import QueryMatch, Record

_ENV_VARS = (
    "OPENAI_API_KEY",
    "OPEN_AI_KEY",
    "PINECONE_API_KEY",
    "PINECONE_KEY",
    "INDEX_NAME",
    "FILE_PATH",
    "QUESTION",
    "VECTOR_BACKEND",
    "RETRIEVAL_TOP_K",
    "EMBEDDING_DIMENSION",
    "LLM_MODEL_NAME",
    "LOG_LEVEL",
)


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers."""
    config.addinivalue_line("markers", "integration: marks tests requiring external services")


@pytest.fixture(autouse=True)
def _isolated_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> None:
    """Run every test without the developer's env vars or ``.env`` file."""
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)


# ── Fakes ───────────────────────────────────────────────────────────────


class FakeEmbedder(EmbedderBase):
    """Deterministic embedder; can be told to fail on the n-th call."""

    def __init__(self, fail_on_call: int | None = None) -> None:
        self.calls: list[str] = []
        self.fail_on_call = fail_on_call

    def embed(self, text: str) -> list[float]:
        if self.fail_on_call is not None and len(self.calls) == self.fail_on_call:
            self.calls.append(text)
            raise ProviderError("simulated network error", provider="fake")
        self.calls.append(text)
        return [float(len(text)), float(sum(map(ord, text)) % 97), 1.0]


class InMemoryVectorStore(VectorStoreBase):
    """Dict-backed store with upsert-by-id semantics.

    ``query`` returns *canned* matches when given, otherwise every stored
    record ordered by id.
    """

    def __init__(self, canned: list[QueryMatch] | None = None) -> None:
        super().__init__("test-collection")
        self.records: dict[str, Record] = {}
        self.upsert_calls: list[list[Record]] = []
        self.query_calls: list[dict] = []
        self._canned = canned

    def upsert(self, records: list[Record]) -> None:
        self.upsert_calls.append(list(records))
        for rec in records:
            self.records[rec.id] = rec

    def query(
        self,
        vector: list[float],
        *,
        top_k: int = 5,
        include_metadata: bool = True,
    ) -> list[QueryMatch]:
        self.query_calls.append(
            {"vector": vector, "top_k": top_k, "include_metadata": include_metadata}
        )
        if self._canned is not None:
            return self._canned[:top_k]
        hits = [
            QueryMatch(id=rec.id, score=1.0, metadata=rec.metadata if include_metadata else {})
            for rec in sorted(self.records.values(), key=lambda r: int(r.id))
        ]
        return hits[:top_k]

    def texts_by_id(self) -> dict[str, str]:
        return {rid: rec.metadata["text"] for rid, rec in self.records.items()}


class FakeCompletionClient:
    """Records every ``complete`` call and returns a fixed answer."""

    def __init__(self, answer: str = "A wolf.") -> None:
        self.answer = answer
        self.calls: list[dict] = []

    def complete(self, system_prompt: str, user_message: str, model: str | None = None) -> str:
        self.calls.append(
            {"system_prompt": system_prompt, "user_message": user_message, "model": model}
        )
        return self.answer


# ── Fixtures ────────────────────────────────────────────────────────────


@pytest.fixture()
def embedder() -> FakeEmbedder:
    return FakeEmbedder()


@pytest.fixture()
def store() -> InMemoryVectorStore:
    return InMemoryVectorStore()


@pytest.fixture()
def llm() -> FakeCompletionClient:
    return FakeCompletionClient()


@pytest.fixture()
def clients(
    embedder: FakeEmbedder, store: InMemoryVectorStore, llm: FakeCompletionClient
) -> ClientSet:
    return ClientSet(embedder=embedder, store=store, llm=llm)


@pytest.fixture()
def embedder_factory() -> type[FakeEmbedder]:
    return FakeEmbedder


@pytest.fixture()
def store_factory() -> type[InMemoryVectorStore]:
    return InMemoryVectorStore
