"""Shared configuration loaded from environment / ``.env``."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

from pydantic import AliasChoices, Field, field_validator
from pydantic_settings import BaseSettings

from docqa.errors import ConfigurationError


class Settings(BaseSettings):
    """Run settings, populated from env vars or .env file.

    Both commands read the same settings; each one checks only the fields
    it needs through :meth:`require`.
    """

    # Credentials
    openai_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("OPENAI_API_KEY", "OPEN_AI_KEY"),
        description="API key for the embedding / completion provider",
    )
    pinecone_api_key: str = Field(
        default="",
        validation_alias=AliasChoices("PINECONE_API_KEY", "PINECONE_KEY"),
        description="API key for the Pinecone vector store",
    )

    # Run inputs
    index_name: str = ""
    file_path: str = ""
    question: str = ""

    # Embedding
    embedding_model: str = "text-embedding-3-small"
    embedding_encoding_format: str = "float"
    embedding_dimension: int | None = Field(
        default=None,
        description="Expected vector length; checked on every embedding when set",
    )

    # LLM
    llm_model_name: str = "gpt-3.5-turbo"
    llm_base_url: str = Field(
        default="",
        description="Base URL of an OpenAI-compatible API. Leave empty to use OpenAI cloud.",
    )
    llm_temperature: float | None = None

    # Retrieval
    retrieval_top_k: int = Field(default=5, ge=1)

    # Vector store
    vector_backend: Literal["pinecone", "chroma"] = "pinecone"
    chroma_host: str = "localhost"
    chroma_port: int = 8000

    # Client behaviour
    provider_max_retries: int = Field(default=2, ge=0)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
        "populate_by_name": True,
    }

    @field_validator("log_level", mode="before")
    @classmethod
    def _upper_log_level(cls, value: Any) -> Any:
        return value.upper() if isinstance(value, str) else value

    def require(self, *fields: str) -> None:
        """Raise :class:`ConfigurationError` unless every field is non-empty.

        The error message lists the environment variables to set for all
        missing fields at once.
        """
        missing = [name for name in fields if not getattr(self, name)]
        if missing:
            names = ", ".join(_env_names(name) for name in missing)
            raise ConfigurationError(f"Missing required configuration: {names}")

    def require_for_ingest(self) -> None:
        """Check the inputs of the ingestion command, including that the document exists."""
        self.require("openai_api_key", *self._store_credentials(), "index_name", "file_path")
        if not Path(self.file_path).is_file():
            raise ConfigurationError(f"Document not found: {self.file_path}")

    def require_for_ask(self) -> None:
        """Check the inputs of the answering command."""
        self.require("openai_api_key", *self._store_credentials(), "index_name", "question")

    def _store_credentials(self) -> tuple[str, ...]:
        return ("pinecone_api_key",) if self.vector_backend == "pinecone" else ()


def _env_names(field_name: str) -> str:
    field = Settings.model_fields[field_name]
    alias = field.validation_alias
    if isinstance(alias, AliasChoices):
        return " / ".join(str(choice) for choice in alias.choices if str(choice).isupper())
    return field_name.upper()
