"""
LLM Client - Streaming interface over OpenAI-compatible chat APIs.
Supports Groq, OpenAI, OpenRouter, Ollama and an offline mock.
"""
from openai import AsyncOpenAI
from typing import Any, AsyncIterator, Optional
import logging

from ..config import Settings, get_llm_config

logger = logging.getLogger(__name__)

KEYLESS_PROVIDERS = {"mock", "ollama"}


class LLMClient:
    """Async LLM client with OpenAI-compatible API."""

    def __init__(self, config: dict):
        self.provider = config["provider"]
        self.model = config["model"]
        self.temperature = config["temperature"]
        self.max_tokens = config["max_tokens"]

        # Use mock client if provider is 'mock'
        if self.provider == "mock":
            from .mock_llm import MockLLMClient
            self._mock = MockLLMClient()
            self.model = self._mock.model
            self.client = None
        else:
            self._mock = None
            self.client = AsyncOpenAI(
                api_key=config["api_key"],
                base_url=config["base_url"]
            )

    async def stream_chat(
        self,
        messages: list[dict],
        model: Optional[str] = None,
        temperature: Optional[float] = None,
        max_tokens: Optional[int] = None,
    ) -> AsyncIterator[Any]:
        """
        Open a streaming chat completion request.

        Args:
            messages: List of message dicts with 'role' and 'content'
            model: Override default model
            temperature: Override default temperature
            max_tokens: Override default max tokens

        Returns:
            The upstream chunk stream; iterate it for ChatCompletionChunk
            objects and close it when done.
        """
        if self._mock is not None:
            return await self._mock.stream_chat(
                messages, model=model, temperature=temperature, max_tokens=max_tokens
            )

        kwargs = {
            "model": model or self.model,
            "messages": messages,
            "temperature": self.temperature if temperature is None else temperature,
            "max_tokens": max_tokens or self.max_tokens,
            "stream": True,
        }
        logger.info(f"Opening {self.provider} completion stream with model={kwargs['model']}")
        return await self.client.chat.completions.create(**kwargs)

    async def close(self):
        """Release the underlying HTTP connection pool."""
        if self.client is not None:
            await self.client.close()


def build_llm_client(config: Settings) -> Optional[LLMClient]:
    """
    Build the LLM client for the configured provider.

    Returns None when a hosted provider has no API key, so callers can
    refuse requests up front instead of failing mid-request.
    """
    llm_config = get_llm_config(config)
    if llm_config["provider"] not in KEYLESS_PROVIDERS and not llm_config["api_key"]:
        logger.warning(f"No API key configured for LLM provider '{llm_config['provider']}'")
        return None
    return LLMClient(llm_config)
