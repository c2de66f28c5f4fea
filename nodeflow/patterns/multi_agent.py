"""MultiAgent: run independent nodes concurrently over one shared store."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, Iterable, Iterator

from ..core.node import NodeBase, as_node
from ..core.store import Store

logger = logging.getLogger(__name__)


class MultiAgent(NodeBase):
    """Concurrent fan-out of nodes that all read and write the same store.

    There is no merge step and no conflict detection. Members should write
    disjoint keys: when two members write the same key, the value that
    lands last wins and that order is not stable across runs.

    Example:
        team = MultiAgent()
        team.add_agent(write_logic).add_agent(write_markup)
        store = await team.run({})
    """

    def __init__(
        self,
        nodes: Iterable[NodeBase | Callable] | None = None,
        name: str | None = None,
    ):
        self._nodes: list[NodeBase] = [as_node(n) for n in nodes or ()]
        self._name = name

    def add_agent(self, node: NodeBase | Callable) -> "MultiAgent":
        """Append a member node."""
        self._nodes.append(as_node(node))
        return self

    async def run(self, store: Store) -> Store:
        """Run every member concurrently on ``store`` and return it.

        The first member failure propagates; members still in flight are
        not awaited further.
        """
        logger.debug(
            "MultiAgent %s running %d member(s)", self.name, len(self._nodes)
        )
        await asyncio.gather(*(node(store) for node in self._nodes))
        return store

    @property
    def node_names(self) -> list[str]:
        """Names of member nodes in registration order."""
        return [node.name for node in self._nodes]

    def __len__(self) -> int:
        return len(self._nodes)

    def __iter__(self) -> Iterator[NodeBase]:
        return iter(self._nodes)

    def __repr__(self) -> str:
        names = self.node_names
        if len(names) <= 3:
            return f"MultiAgent({', '.join(names)})"
        return f"MultiAgent({names[0]}, ..., {names[-1]}) [{len(names)} agents]"
