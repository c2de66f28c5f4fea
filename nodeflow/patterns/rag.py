"""Rag: retriever then generator, strictly in sequence."""

from __future__ import annotations

from typing import Callable

from ..core.node import NodeBase, as_node
from ..core.store import Store


class Rag(NodeBase):
    """Two-stage retrieval-augmented generation pipeline.

    The generator starts only after the retriever has returned its store.

    Example:
        rag = Rag(retrieve, generate)
        store = await rag.call({"query": "What is Rust good for?"})
        print(store["context"], store["response"])
    """

    def __init__(
        self,
        retriever: NodeBase | Callable,
        generator: NodeBase | Callable,
        name: str | None = None,
    ):
        self.retriever = as_node(retriever)
        self.generator = as_node(generator)
        self._name = name

    async def call(self, store: Store) -> Store:
        """Run the retriever, then the generator on its output."""
        intermediate = await self.retriever(store)
        return await self.generator(intermediate)

    async def run(self, store: Store) -> Store:
        return await self.call(store)

    def __repr__(self) -> str:
        return f"Rag(retriever='{self.retriever.name}', generator='{self.generator.name}')"
