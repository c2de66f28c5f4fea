"""Core components."""

from .errors import (
    GraphConfigurationError,
    NodeExecutionError,
    NodeflowError,
    RetryExhaustedError,
)
from .node import FunctionNode, NodeBase, as_node, create_node, node
from .store import Store, copy_store

__all__ = [
    "FunctionNode",
    "GraphConfigurationError",
    "NodeBase",
    "NodeExecutionError",
    "NodeflowError",
    "RetryExhaustedError",
    "Store",
    "as_node",
    "copy_store",
    "create_node",
    "node",
]
