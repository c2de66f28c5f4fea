"""LLM provider interface types."""

from __future__ import annotations

from typing import Any, Protocol


class LLM(Protocol):
    """Interface for chat-style models."""

    async def complete(
        self,
        messages: list[dict[str, Any]],
        **kwargs: Any,
    ) -> dict[str, Any]:
        """Return an assistant message dict with a ``content`` string."""
        ...
