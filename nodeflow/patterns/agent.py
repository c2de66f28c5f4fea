"""Agent: bounded retry with delay around a single node."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

from ..core.errors import NodeflowError, RetryExhaustedError
from ..core.node import NodeBase, as_node
from ..core.store import Store, copy_store

logger = logging.getLogger(__name__)


class Agent(NodeBase):
    """Run a node, retrying failed attempts.

    Every attempt receives a fresh shallow copy of the store passed to
    ``decide``, so a failed attempt that mutated its copy never leaks
    half-applied state into the next one.

    Args:
        node: Node (or plain callable) to run.
        max_attempts: Total attempts, at least 1.
        retry_delay: Seconds to wait between attempts, at least 0.

    Example:
        agent = Agent(ask_model, max_attempts=3, retry_delay=1.0)
        store = await agent.decide({"prompt": "Write an ode to AI"})
    """

    def __init__(
        self,
        node: NodeBase | Callable,
        max_attempts: int = 1,
        retry_delay: float = 0.0,
        name: str | None = None,
    ):
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {max_attempts}")
        if retry_delay < 0:
            raise ValueError(f"retry_delay must be >= 0, got {retry_delay}")
        self.node = as_node(node)
        self.max_attempts = max_attempts
        self.retry_delay = retry_delay
        self._name = name or f"agent({self.node.name})"

    async def decide(self, store: Store) -> Store:
        """Run the wrapped node until it succeeds or attempts run out.

        Raises:
            RetryExhaustedError: Every attempt failed. ``cause`` holds the
                last failure.
        """
        last_error: NodeflowError | None = None

        for attempt in range(1, self.max_attempts + 1):
            logger.debug(
                "Agent %s attempt %d/%d", self.name, attempt, self.max_attempts
            )
            try:
                return await self.node(copy_store(store))
            except NodeflowError as e:
                last_error = e

            if attempt < self.max_attempts:
                logger.warning(
                    "Agent %s attempt %d/%d failed, retrying in %.3gs: %s",
                    self.name,
                    attempt,
                    self.max_attempts,
                    self.retry_delay,
                    last_error,
                )
                await asyncio.sleep(self.retry_delay)

        raise RetryExhaustedError(
            self.node.name, self.max_attempts, last_error
        ) from last_error

    async def run(self, store: Store) -> Store:
        return await self.decide(store)

    def __repr__(self) -> str:
        return (
            f"Agent(node='{self.node.name}', max_attempts={self.max_attempts}, "
            f"retry_delay={self.retry_delay})"
        )
