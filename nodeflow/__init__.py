"""nodeflow - Minimal async orchestration of nodes over a shared store."""

from .core.errors import (
    GraphConfigurationError,
    NodeExecutionError,
    NodeflowError,
    RetryExhaustedError,
)
from .core.node import FunctionNode, NodeBase, as_node, create_node, node
from .core.store import Store, copy_store
from .patterns import CANCEL, DEFAULT, Agent, MapReduce, MultiAgent, Rag, Workflow

__version__ = "0.1.0"

__all__ = [
    # Core
    "FunctionNode",
    "NodeBase",
    "Store",
    "as_node",
    "copy_store",
    "create_node",
    "node",
    # Patterns
    "Agent",
    "MapReduce",
    "MultiAgent",
    "Rag",
    "Workflow",
    "CANCEL",
    "DEFAULT",
    # Errors
    "GraphConfigurationError",
    "NodeExecutionError",
    "NodeflowError",
    "RetryExhaustedError",
]
