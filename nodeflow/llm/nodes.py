"""Node factories backed by chat-model providers."""

from __future__ import annotations

from typing import Any, Callable, Union

from ..core.node import FunctionNode
from ..core.store import Store
from .protocols import LLM

Prompt = Union[str, Callable[[Store], str]]


def render_prompt(prompt: Prompt, store: Store) -> str:
    """Render ``prompt`` against ``store``.

    A string is treated as a ``str.format`` template filled from store keys;
    a callable receives the store and returns the prompt text.
    """
    if callable(prompt):
        return prompt(store)
    return prompt.format_map(store)


def llm_node(
    provider: LLM,
    prompt: Prompt,
    output_key: str = "response",
    *,
    system: str | None = None,
    name: str | None = None,
    **llm_kwargs: Any,
) -> FunctionNode:
    """Build a node that asks ``provider`` for a completion.

    The completion text is written to ``store[output_key]``.

    Args:
        provider: LLM provider instance, e.g. ``OpenAI(model="gpt-4.1-mini")``.
        prompt: ``str.format`` template over store keys, or a callable
            ``store -> str``.
        output_key: Store key receiving the completion text.
        system: Optional system prompt prepended to the conversation.
        name: Node name (defaults to ``llm_<output_key>``).
        **llm_kwargs: Extra arguments forwarded to ``provider.complete``.

    Example:
        summarize = llm_node(OpenAI(), "Summarize: {doc}", output_key="summary")
        store = await summarize({"doc": "Rust is a systems language."})
    """

    async def call_llm(store: Store) -> Store:
        messages = []
        if system:
            messages.append({"role": "system", "content": system})
        messages.append({"role": "user", "content": render_prompt(prompt, store)})

        response = await provider.complete(messages, **llm_kwargs)
        store[output_key] = response["content"]
        return store

    return FunctionNode(call_llm, name=name or f"llm_{output_key}")
