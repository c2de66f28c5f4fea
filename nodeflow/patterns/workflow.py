"""Workflow: named steps, labeled transitions and a traversal engine.

Steps are nodes registered under a name. Edges map ``(step, action)`` to a
destination step. ``run`` executes a step, asks the caller which action to
take, and follows the matching edge:

    wf = Workflow()
    wf.add_step("title_search", title_search)
    wf.add_step("title_issuance", title_issuance)
    wf.connect("title_search", "title_issuance")
    wf.connect("title_issuance", "title_issuance", action="revise")

    store = await wf.run("title_search", {}, choose_action)

The "cancel" action stops the run. An action with no outgoing edge ends
the run normally, so graphs can be left open-ended.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Any, Awaitable, Callable, Mapping, Union

from ..core.errors import GraphConfigurationError
from ..core.node import NodeBase, as_node
from ..core.store import Store
from ..core.utils import maybe_await

logger = logging.getLogger(__name__)

DEFAULT = "default"
CANCEL = "cancel"

ActionChooser = Callable[[str, Store], Union[str, Awaitable[str]]]


class Workflow:
    """Directed graph of named steps with caller-driven transitions."""

    def __init__(self, name: str = "workflow"):
        self.name = name
        self._steps: dict[str, NodeBase] = {}
        self._edges: dict[str, dict[str, str]] = {}

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_step(self, name: str, node: NodeBase | Callable) -> "Workflow":
        """Register a step. Re-adding a name replaces its node."""
        self._steps[name] = as_node(node)
        return self

    def connect(
        self, from_step: str, to_step: str, action: str = DEFAULT
    ) -> "Workflow":
        """Register the transition taken from ``from_step`` on ``action``.

        Connecting the same ``(from_step, action)`` pair again replaces the
        earlier destination. ``to_step`` may equal ``from_step`` to re-run a
        step (revise/restart).

        Raises:
            GraphConfigurationError: Either step has not been added.
        """
        for step in (from_step, to_step):
            if step not in self._steps:
                raise GraphConfigurationError(
                    f"Workflow '{self.name}' has no step '{step}'"
                )
        self._edges.setdefault(from_step, {})[action] = to_step
        return self

    # ------------------------------------------------------------------
    # Inspection
    # ------------------------------------------------------------------

    @property
    def steps(self) -> Mapping[str, NodeBase]:
        """Read-only view of registered steps."""
        return MappingProxyType(self._steps)

    @property
    def edges(self) -> Mapping[str, Mapping[str, str]]:
        """Read-only view of ``{step: {action: destination}}``."""
        return MappingProxyType(
            {step: MappingProxyType(actions) for step, actions in self._edges.items()}
        )

    def next_step(self, step: str, action: str = DEFAULT) -> str | None:
        """Return the destination of ``(step, action)`` or None."""
        return self._edges.get(step, {}).get(action)

    # ------------------------------------------------------------------
    # Execution
    # ------------------------------------------------------------------

    async def run(
        self,
        start_step: str,
        store: Store,
        choose_action: ActionChooser,
    ) -> Store:
        """Traverse the graph from ``start_step``.

        Args:
            start_step: Name of the first step to execute.
            store: Initial store.
            choose_action: ``(step_name, store) -> action`` called after each
                step completes. May be sync or async.

        Returns:
            The store produced by the last executed step.

        Raises:
            GraphConfigurationError: ``start_step`` has not been added.
        """
        if start_step not in self._steps:
            raise GraphConfigurationError(
                f"Workflow '{self.name}' has no step '{start_step}'"
            )

        current = start_step
        while True:
            logger.debug("Workflow %s executing step %s", self.name, current)
            store = await self._steps[current](store)

            action = await maybe_await(choose_action, current, store)
            if action == CANCEL:
                logger.debug("Workflow %s cancelled at %s", self.name, current)
                return store

            destination = self.next_step(current, action)
            if destination is None:
                logger.debug(
                    "Workflow %s completed at %s (action %r has no edge)",
                    self.name,
                    current,
                    action,
                )
                return store

            logger.debug(
                "Workflow %s: %s --%s--> %s", self.name, current, action, destination
            )
            current = destination

    def visualize(self) -> str:
        """Return a Mermaid diagram of the workflow.

        Example output:
            graph TD
                title_search[title_search]
                title_issuance[title_issuance]
                title_search -->|default| title_issuance
        """
        lines = ["graph TD"]
        for step in self._steps:
            lines.append(f"    {step}[{step}]")
        for from_step, actions in self._edges.items():
            for action, to_step in actions.items():
                lines.append(f"    {from_step} -->|{action}| {to_step}")
        return "\n".join(lines)

    def to_dict(self) -> dict[str, Any]:
        """Export workflow structure as a dictionary."""
        return {
            "type": "Workflow",
            "name": self.name,
            "steps": {name: node.name for name, node in self._steps.items()},
            "edges": {step: dict(actions) for step, actions in self._edges.items()},
        }

    def __repr__(self) -> str:
        return f"Workflow(name='{self.name}', steps={len(self._steps)})"
