"""
Lift Gateway Low-Level SDK.

Thin typed wrappers over the legacy DynamoDB tables and the Bedrock runtime.
Each function maps 1:1 to a remote call.
"""

from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk.types import (
    OperationName,
    PromptType,
    ANTHROPIC_VERSION,
)

__all__ = [
    "GatewayContext",
    "OperationName",
    "PromptType",
    "ANTHROPIC_VERSION",
]
