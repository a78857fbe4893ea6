"""Completion client — single place to swap chat-model providers.

Supports two modes:

1. **OpenAI cloud** (default) — set ``OPENAI_API_KEY``.
2. **OpenAI-compatible endpoint** — set ``LLM_BASE_URL`` to any server that
   exposes ``/v1/chat/completions`` (vLLM, a proxy …); ``ChatOpenAI``
   works unchanged.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import openai
from langchain_core.messages import HumanMessage, SystemMessage
from langchain_openai import ChatOpenAI

from docqa.errors import ProviderError

if TYPE_CHECKING:
    from langchain_core.language_models import BaseChatModel

    from docqa.config import Settings

logger = logging.getLogger(__name__)


def get_llm(
    model: str,
    *,
    api_key: str,
    base_url: str = "",
    temperature: float | None = None,
    max_retries: int = 2,
) -> ChatOpenAI:
    """Return a configured chat model.

    When *base_url* is set the client is pointed at that endpoint instead of
    the OpenAI cloud API. *temperature* is only sent when given, otherwise
    the provider default applies.
    """
    kwargs: dict[str, Any] = {"model": model, "max_retries": max_retries}
    if temperature is not None:
        kwargs["temperature"] = temperature

    if base_url:
        logger.info("Using OpenAI-compatible endpoint: %s", base_url)
        kwargs["base_url"] = base_url
        # Self-hosted endpoints often need no key; ChatOpenAI requires a non-empty value.
        kwargs["api_key"] = api_key or "EMPTY"
    else:
        kwargs["api_key"] = api_key

    return ChatOpenAI(**kwargs)


class CompletionClient:
    """Sends one system prompt plus one user message, returns the reply text.

    Parameters
    ----------
    chat_model:
        Chat model used when :meth:`complete` gets no *model* override.
    model_factory:
        Builds a chat model for an override model name; defaults to
        :func:`get_llm` with the same credentials.
    """

    provider = "openai"

    def __init__(
        self,
        chat_model: BaseChatModel,
        *,
        model_factory: Any | None = None,
    ) -> None:
        self._chat_model = chat_model
        self._model_factory = model_factory

    @classmethod
    def from_settings(cls, settings: Settings) -> CompletionClient:
        def factory(model: str) -> ChatOpenAI:
            return get_llm(
                model,
                api_key=settings.openai_api_key,
                base_url=settings.llm_base_url,
                temperature=settings.llm_temperature,
                max_retries=settings.provider_max_retries,
            )

        return cls(factory(settings.llm_model_name), model_factory=factory)

    def complete(self, system_prompt: str, user_message: str, model: str | None = None) -> str:
        """Return the generated answer for *user_message* under *system_prompt*."""
        chat_model = self._chat_model
        if model is not None:
            if self._model_factory is None:
                raise ValueError("This client cannot switch models; no model_factory given")
            chat_model = self._model_factory(model)

        messages = [SystemMessage(content=system_prompt), HumanMessage(content=user_message)]
        try:
            response = chat_model.invoke(messages)
        except openai.OpenAIError as exc:
            raise ProviderError(f"Completion request failed: {exc}", provider=self.provider) from exc

        content = getattr(response, "content", None)
        if not isinstance(content, str):
            raise ProviderError(
                f"Malformed completion response: expected text, got {type(content).__name__}",
                provider=self.provider,
            )
        return content
