"""MapReduce: fan a node out over ordered inputs, then reduce in input order."""

from __future__ import annotations

import asyncio
import logging
from typing import Awaitable, Callable, Iterable, Union

from ..core.node import NodeBase, as_node
from ..core.store import Store
from ..core.utils import maybe_await

logger = logging.getLogger(__name__)

ReduceFn = Callable[[list[Store]], Union[Store, Awaitable[Store]]]


class MapReduce:
    """Apply a mapper node to every input store concurrently, then reduce.

    Results reach ``reduce_fn`` in input order regardless of which mapper
    finishes first. The first mapper failure aborts the batch and
    ``reduce_fn`` is not called.

    Args:
        mapper: Node (or plain callable) applied to each input store.
        reduce_fn: ``list[Store] -> Store``, sync or async.
        max_concurrency: Optional cap on simultaneous mapper invocations.

    Example:
        def join(stores):
            return {"all_summaries": "\\n".join(s["summary"] for s in stores)}

        mr = MapReduce(summarize, join)
        result = await mr.run([{"doc": d} for d in docs])
    """

    def __init__(
        self,
        mapper: NodeBase | Callable,
        reduce_fn: ReduceFn,
        max_concurrency: int | None = None,
    ):
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError(
                f"max_concurrency must be >= 1 or None, got {max_concurrency}"
            )
        self.mapper = as_node(mapper)
        self.reduce_fn = reduce_fn
        self.max_concurrency = max_concurrency

    async def run(self, input_stores: Iterable[Store]) -> Store:
        """Map every input store, then reduce the ordered results."""
        input_stores = list(input_stores)
        logger.debug(
            "MapReduce %s fanning out over %d input(s)",
            self.mapper.name,
            len(input_stores),
        )

        if self.max_concurrency is None:
            results = await asyncio.gather(
                *(self.mapper(store) for store in input_stores)
            )
        else:
            semaphore = asyncio.Semaphore(self.max_concurrency)

            async def bounded(store: Store) -> Store:
                async with semaphore:
                    return await self.mapper(store)

            results = await asyncio.gather(*(bounded(store) for store in input_stores))

        return await maybe_await(self.reduce_fn, list(results))

    def __repr__(self) -> str:
        return f"MapReduce(mapper='{self.mapper.name}')"
