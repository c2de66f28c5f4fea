"""Node: the single extension point of nodeflow.

A node is an asynchronous ``Store -> Store`` transform. Awaiting
``node(store)`` runs the node body and normalizes failures into
``NodeExecutionError`` so every construct above sees one error type.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Callable

from .errors import NodeExecutionError, NodeflowError
from .store import Store
from .utils import callable_name, maybe_await, snake_case


class NodeBase(ABC):
    """Abstract base for all node types.

    Subclass and implement ``run``. The returned Store may be the same
    mutated instance or a new mapping.

    Example:
        class Summarize(NodeBase):
            async def run(self, store):
                store["summary"] = store["doc"][:80]
                return store

        store = await Summarize()({"doc": "..."})
    """

    _name: str | None = None

    @property
    def name(self) -> str:
        """Return the node name (snake_case class name unless overridden)."""
        return self._name or snake_case(self.__class__.__name__)

    @abstractmethod
    async def run(self, store: Store) -> Store:
        """Execute the node body. Override this in subclasses."""
        ...

    async def __call__(self, store: Store) -> Store:
        """Run the node, wrapping body failures as NodeExecutionError."""
        try:
            result = await self.run(store)
        except NodeflowError:
            raise
        except Exception as e:
            raise NodeExecutionError(self.name, e) from e

        if not isinstance(result, Mapping):
            raise NodeExecutionError(
                self.name,
                TypeError(
                    f"node must return a mapping, got {type(result).__name__}"
                ),
            )
        return result

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(name='{self.name}')"


class FunctionNode(NodeBase):
    """Wraps a function as a node.

    Coroutine functions are awaited. Plain functions are called directly
    and block the event loop while they run.

    Example:
        @node
        async def retrieve(store):
            store["context"] = await search(store["query"])
            return store
    """

    __slots__ = ("fn", "_name")

    def __init__(self, fn: Callable[[Store], Any], name: str | None = None):
        if not callable(fn):
            raise TypeError(f"Expected a callable, got {type(fn).__name__}")
        self.fn = fn
        self._name = name or callable_name(fn)

    async def run(self, store: Store) -> Store:
        return await maybe_await(self.fn, store)


def node(_fn: Callable | None = None, *, name: str | None = None):
    """Decorator that wraps a function in a FunctionNode.

    Example:
        @node
        async def generate(store):
            ...

        @node(name="legal_review")
        async def review(store):
            ...
    """

    if _fn is None:
        # Used as @node(name="custom")
        def wrapper(fn: Callable) -> FunctionNode:
            return FunctionNode(fn, name=name)

        return wrapper

    return FunctionNode(_fn, name=name)


def create_node(fn: Callable[[Store], Any], name: str | None = None) -> FunctionNode:
    """Wrap any function matching the node contract, returning a node."""
    return FunctionNode(fn, name=name)


def as_node(value: Any) -> NodeBase:
    """Return ``value`` as a node, wrapping plain callables."""
    if isinstance(value, NodeBase):
        return value
    if callable(value):
        return FunctionNode(value)
    raise TypeError(f"Expected a node or callable, got {type(value).__name__}")
