"""Unit tests for the ingestion pipeline (read → chunk → embed → upsert)."""

from __future__ import annotations

from pathlib import Path

import pytest
from langchain_core.documents import Document

from docqa.errors import ConfigurationError, ProviderError
from docqa.ingestion.pipeline import ingest_document, ingest_file

STORY = "Once upon a time.\n\na wolf appeared."
FIVE_PARAGRAPHS = "p0\n\np1\n\np2\n\np3\n\np4"


def _doc(text: str, source: str = "story.txt") -> Document:
    return Document(page_content=text, metadata={"source": source})


def test_story_records(embedder, store) -> None:
    ingest_document(_doc(STORY), embedder, store)
    assert store.texts_by_id() == {"0": "Once upon a time.", "1": "a wolf appeared."}


def test_record_carries_chunk_embedding(embedder, store) -> None:
    ingest_document(_doc(STORY), embedder, store)
    assert store.records["1"].values == embedder.embed("a wolf appeared.")


def test_metadata_text_is_verbatim(embedder, store) -> None:
    text = "  padded paragraph \n\n\ttabbed\n\n"
    ingest_document(_doc(text), embedder, store)
    assert store.texts_by_id() == {"0": "  padded paragraph ", "1": "\ttabbed", "2": ""}


def test_one_upsert_call_per_chunk(embedder, store) -> None:
    ingest_document(_doc(FIVE_PARAGRAPHS), embedder, store)
    assert [len(batch) for batch in store.upsert_calls] == [1, 1, 1, 1, 1]
    assert [batch[0].id for batch in store.upsert_calls] == ["0", "1", "2", "3", "4"]


def test_chunks_are_processed_serially(embedder_factory, store_factory) -> None:
    events: list[str] = []

    class RecordingEmbedder(embedder_factory):
        def embed(self, text: str) -> list[float]:
            events.append(f"embed:{text}")
            return super().embed(text)

    class RecordingStore(store_factory):
        def upsert(self, records) -> None:
            events.append(f"upsert:{records[0].id}")
            super().upsert(records)

    ingest_document(_doc("a\n\nb\n\nc"), RecordingEmbedder(), RecordingStore())

    assert events == ["embed:a", "upsert:0", "embed:b", "upsert:1", "embed:c", "upsert:2"]


def test_report(embedder, store) -> None:
    report = ingest_document(_doc(FIVE_PARAGRAPHS, source="five.txt"), embedder, store)
    assert report.source == "five.txt"
    assert report.collection == "test-collection"
    assert report.chunks_upserted == 5
    assert report.elapsed_seconds >= 0


def test_empty_document_upserts_one_empty_record(embedder, store) -> None:
    ingest_document(_doc(""), embedder, store)
    assert store.texts_by_id() == {"0": ""}


def test_ingestion_is_idempotent(embedder, store) -> None:
    ingest_document(_doc(FIVE_PARAGRAPHS), embedder, store)
    first = store.texts_by_id()

    ingest_document(_doc(FIVE_PARAGRAPHS), embedder, store)

    assert store.texts_by_id() == first
    assert len(store.records) == 5


def test_provider_failure_mid_run(embedder_factory, store) -> None:
    """Embedding chunk 2 of 5 fails: 0 and 1 stay stored, 2-4 are never upserted."""
    embedder = embedder_factory(fail_on_call=2)

    with pytest.raises(ProviderError, match="simulated network error"):
        ingest_document(_doc(FIVE_PARAGRAPHS), embedder, store)

    assert store.texts_by_id() == {"0": "p0", "1": "p1"}
    assert len(store.upsert_calls) == 2
    assert embedder.calls == ["p0", "p1", "p2"]


def test_store_failure_propagates(embedder, store_factory) -> None:
    class BrokenStore(store_factory):
        def upsert(self, records) -> None:
            raise ProviderError("collection not found", provider="fake")

    with pytest.raises(ProviderError, match="collection not found"):
        ingest_document(_doc(STORY), embedder, BrokenStore())
    assert embedder.calls == ["Once upon a time."]


def test_rerun_after_failure_completes(embedder_factory, store) -> None:
    with pytest.raises(ProviderError):
        ingest_document(_doc(FIVE_PARAGRAPHS), embedder_factory(fail_on_call=3), store)

    ingest_document(_doc(FIVE_PARAGRAPHS), embedder_factory(), store)

    assert store.texts_by_id() == {str(i): f"p{i}" for i in range(5)}


class TestIngestFile:
    def test_loads_and_ingests(self, clients, store, tmp_path: Path) -> None:
        path = tmp_path / "story.txt"
        path.write_text(STORY, encoding="utf-8")

        report = ingest_file(path, clients)

        assert store.texts_by_id() == {"0": "Once upon a time.", "1": "a wolf appeared."}
        assert report.source == str(path)
        assert report.chunks_upserted == 2

    def test_missing_file_touches_no_client(self, clients, embedder, store, tmp_path) -> None:
        with pytest.raises(ConfigurationError):
            ingest_file(tmp_path / "nope.txt", clients)
        assert embedder.calls == []
        assert store.upsert_calls == []
