"""
Gateway exception types.

Store failures never surface as exceptions (they become soft envelopes);
these are the hard failures that abort an invocation.
"""


class GatewayError(Exception):
    """Base class for hard gateway failures."""


class UnknownOperationError(GatewayError, ValueError):
    """The invocation did not resolve to a supported operation."""

    def __init__(self, operation_name):
        self.operation_name = operation_name
        super().__init__(f"Unknown operation: {operation_name}")


class InvalidArgumentsError(GatewayError, ValueError):
    """The invocation's arguments are not a mapping."""


class ModelInvocationError(GatewayError, RuntimeError):
    """The model service did not yield usable content."""
