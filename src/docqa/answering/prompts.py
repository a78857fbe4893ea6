"""Prompt templates for the answering pipeline."""

from __future__ import annotations

ANSWER_SYSTEM = """\
Answer the user's question using only the following chunks. \
If they do not contain the answer, say that you don't know.
{context}
"""


def format_context(texts: list[str]) -> str:
    """Join chunk texts with newlines, keeping the order given."""
    return "\n".join(texts)


def build_answer_prompt(texts: list[str]) -> str:
    """Build the system prompt embedding every retrieved chunk verbatim."""
    return ANSWER_SYSTEM.format(context=format_context(texts))
