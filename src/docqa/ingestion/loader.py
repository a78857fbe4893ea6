"""Document loading — a thin wrapper around LangChain's ``TextLoader``."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

from langchain_community.document_loaders import TextLoader

from docqa.errors import ConfigurationError

if TYPE_CHECKING:
    from langchain_core.documents import Document


def load_text_document(path: str | Path, encoding: str = "utf-8") -> Document:
    """Load a single plain-text file as one ``Document``.

    The file content is kept verbatim (no whitespace normalisation) so that
    chunk boundaries stay exactly where the blank lines are.

    Raises
    ------
    ConfigurationError
        If *path* does not point to a readable file.
    """
    path = Path(path)
    if not path.is_file():
        raise ConfigurationError(f"Document not found: {path}")

    try:
        documents = TextLoader(str(path), encoding=encoding).load()
    except RuntimeError as exc:
        raise ConfigurationError(f"Could not read document {path}: {exc}") from exc
    return documents[0]
