"""Small helpers shared by nodes and patterns."""

from __future__ import annotations

import inspect
import re
from typing import Any, Callable


async def maybe_await(fn: Callable, *args, **kwargs) -> Any:
    """Call a function and await if it returns an awaitable."""
    result = fn(*args, **kwargs)
    if inspect.isawaitable(result):
        return await result
    return result


def snake_case(name: str) -> str:
    """Convert a CamelCase class name to snake_case.

    Examples:
        TitleSearch -> title_search
        RAGRetriever -> rag_retriever
    """
    name = re.sub("(.)([A-Z][a-z]+)", r"\1_\2", name)
    return re.sub("([a-z0-9])([A-Z])", r"\1_\2", name).lower()


def callable_name(fn: Callable) -> str:
    """Best-effort display name for a callable."""
    if hasattr(fn, "name") and isinstance(fn.name, str):
        return fn.name
    if hasattr(fn, "__name__"):
        return fn.__name__
    return snake_case(type(fn).__name__)
