"""Core error types for nodeflow."""

from __future__ import annotations


class NodeflowError(Exception):
    """Base exception for all nodeflow errors."""

    pass


class NodeExecutionError(NodeflowError):
    """Raised when a node body fails.

    Attributes:
        node_name: Name of the node where the error occurred.
        cause: The original exception raised by the node body.
    """

    def __init__(self, node_name: str, cause: BaseException):
        self.node_name = node_name
        self.cause = cause
        super().__init__(
            f"Node '{node_name}' failed.\n"
            f"Cause: {cause.__class__.__name__}: {cause}"
        )


class RetryExhaustedError(NodeflowError):
    """Raised by an Agent once every attempt has failed.

    Attributes:
        node_name: Name of the wrapped node.
        attempts: Number of attempts that were made.
        cause: The failure of the last attempt.
    """

    def __init__(self, node_name: str, attempts: int, cause: BaseException):
        self.node_name = node_name
        self.attempts = attempts
        self.cause = cause
        super().__init__(
            f"Node '{node_name}' failed after {attempts} attempt(s).\n"
            f"Last cause: {cause.__class__.__name__}: {cause}"
        )


class GraphConfigurationError(NodeflowError, ValueError):
    """Raised when a workflow references a step that was never added."""

    pass
