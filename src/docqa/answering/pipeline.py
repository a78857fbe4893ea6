"""Answering pipeline.

Stages, each a plain function composed by :func:`answer_question`::

    embed_question → retrieve → extract_context → build_answer_prompt → generate_answer

The answer is returned as produced by the model; it is not checked
against the retrieved chunks.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from docqa.answering.prompts import build_answer_prompt

if TYPE_CHECKING:
    from docqa.answering.llm import CompletionClient
    from docqa.clients import ClientSet
    from docqa.ingestion.embedder import EmbedderBase
    from docqa.retrieval.base import VectorStoreBase
    from docqa.retrieval.models import QueryMatch

logger = logging.getLogger(__name__)

DEFAULT_TOP_K = 5


def embed_question(question: str, embedder: EmbedderBase) -> list[float]:
    return embedder.embed(question)


def retrieve(
    vector: list[float],
    store: VectorStoreBase,
    top_k: int = DEFAULT_TOP_K,
) -> list[QueryMatch]:
    """Fetch the *top_k* nearest chunks, metadata included."""
    matches = store.query(vector, top_k=top_k, include_metadata=True)
    logger.info("Retrieved %d/%d matches from %r", len(matches), top_k, store.collection_name)
    return matches


def extract_context(matches: list[QueryMatch]) -> list[str]:
    """Chunk texts in the order the store returned them (similarity order)."""
    return [match.text for match in matches]


def generate_answer(
    system_prompt: str,
    question: str,
    llm: CompletionClient,
    model: str | None = None,
) -> str:
    return llm.complete(system_prompt, question, model)


def answer_question(
    question: str,
    clients: ClientSet,
    *,
    top_k: int = DEFAULT_TOP_K,
    model: str | None = None,
) -> str:
    """Answer *question* from the chunks stored in ``clients.store``.

    An empty collection is not an error: the model is still asked, with an
    empty context block.
    """
    if clients.llm is None:
        raise ValueError("answer_question needs a ClientSet built with an llm")

    vector = embed_question(question, clients.embedder)
    matches = retrieve(vector, clients.store, top_k)
    texts = extract_context(matches)
    if not texts:
        logger.warning("No matches found; answering with an empty context")
    system_prompt = build_answer_prompt(texts)
    return generate_answer(system_prompt, question, clients.llm, model)
