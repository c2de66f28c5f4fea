"""LLM provider implementations.

Providers are plain configuration values. Build one and pass it to the
function that constructs a node, rather than sharing a module-level client.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


async def _openai_chat(
    client: Any, model: str, messages: list[dict[str, Any]], **kwargs: Any
) -> dict[str, Any]:
    request_params = {
        "model": model,
        "messages": messages,
        "temperature": kwargs.pop("temperature", 0.7),
        "max_tokens": kwargs.pop("max_tokens", 2048),
        **kwargs,
    }
    response = await client.chat.completions.create(**request_params)
    message = response.choices[0].message
    return {"role": "assistant", "content": message.content or ""}


@dataclass
class OpenAI:
    """OpenAI model provider.

    ``api_key`` and ``base_url`` default to the SDK's own environment
    handling (``OPENAI_API_KEY``, ``OPENAI_BASE_URL``).
    """

    model: str = "gpt-4.1-mini"
    api_key: str | None = None
    base_url: str | None = None

    async def complete(
        self,
        messages: list[dict[str, Any]],
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Generate completion using OpenAI API."""
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError(
                "openai package required. Install with: pip install nodeflow[openai]"
            )

        client = AsyncOpenAI(api_key=self.api_key, base_url=self.base_url)
        return await _openai_chat(client, self.model, messages, **kwargs)


@dataclass
class VLLM:
    """vLLM local model provider (OpenAI-compatible server)."""

    base_url: str = "http://localhost:8000/v1"
    model: str = "meta-llama/Llama-3.1-8B-Instruct"
    api_key: str = "EMPTY"

    async def complete(
        self,
        messages: list[dict[str, Any]],
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Generate completion using vLLM OpenAI-compatible API."""
        try:
            from openai import AsyncOpenAI
        except ImportError:
            raise ImportError(
                "openai package required. Install with: pip install nodeflow[openai]"
            )

        client = AsyncOpenAI(base_url=self.base_url, api_key=self.api_key)
        return await _openai_chat(client, self.model, messages, **kwargs)


@dataclass
class Anthropic:
    """Anthropic Claude model provider."""

    model: str = "claude-sonnet-4-0"
    api_key: str | None = None

    async def complete(
        self,
        messages: list[dict[str, Any]],
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Generate completion using Anthropic API."""
        try:
            from anthropic import AsyncAnthropic
        except ImportError:
            raise ImportError(
                "anthropic package required. Install with: pip install nodeflow[anthropic]"
            )

        client = AsyncAnthropic(api_key=self.api_key)

        # Anthropic takes the system prompt outside the message list
        system_messages = [m for m in messages if m.get("role") == "system"]
        non_system_messages = [m for m in messages if m.get("role") != "system"]

        request_params = {
            "model": self.model,
            "messages": non_system_messages,
            "max_tokens": kwargs.pop("max_tokens", 2048),
            "temperature": kwargs.pop("temperature", 0.7),
            **kwargs,
        }

        if system_messages:
            request_params["system"] = system_messages[0]["content"]

        response = await client.messages.create(**request_params)

        content = "".join(
            block.text for block in response.content if block.type == "text"
        )
        return {"role": "assistant", "content": content}
