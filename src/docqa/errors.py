"""Exception hierarchy shared by the ingestion and answering commands."""

from __future__ import annotations


class DocQAError(Exception):
    """Base class for every error raised deliberately by ``docqa``."""


class ConfigurationError(DocQAError):
    """A required input is missing or invalid.

    Always raised before any network call is made.
    """


class ProviderError(DocQAError):
    """A remote service call failed or returned something unusable.

    Covers the embedding provider, the completion provider and the vector
    store alike: network failures, rejected credentials, rate limits,
    missing collections and malformed responses.

    Attributes
    ----------
    provider:
        Short name of the failing service (``"openai"``, ``"pinecone"`` …).
    """

    def __init__(self, message: str, *, provider: str = "unknown") -> None:
        super().__init__(message)
        self.provider = provider

    def __str__(self) -> str:  # noqa: D105
        return f"[{self.provider}] {super().__str__()}"
