"""
Answering — question-time retrieval and completion.

Public API
----------
- :func:`answer_question` — embed, retrieve, prompt and complete.
- :class:`CompletionClient` — chat-model wrapper returning plain text.
- :func:`build_answer_prompt` — system prompt embedding retrieved chunks.
"""

from docqa.answering.llm import CompletionClient, get_llm
from docqa.answering.pipeline import (
    answer_question,
    embed_question,
    extract_context,
    generate_answer,
    retrieve,
)
from docqa.answering.prompts import build_answer_prompt

__all__ = [
    "CompletionClient",
    "answer_question",
    "build_answer_prompt",
    "embed_question",
    "extract_context",
    "generate_answer",
    "get_llm",
    "retrieve",
]
