"""
Lambda entry point for the GraphQL resolver.

The upstream API layer invokes ``handler`` with one record per operation and
itself wraps the returned string as a JSON scalar.
"""

import logging

from lift_gateway.client_factory import get_context
from lift_gateway.envelope import encode_transport
from lift_gateway.router import route, resolve_operation_name
from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk.types import OperationName

logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)


def handler(event, context=None) -> str:
    """Resolve and run one operation; hard failures propagate to the caller."""
    logger.info("Invocation received for operation %s", resolve_operation_name(event))
    return route(event, get_context())


def invoke_operation(operation: OperationName, arguments: dict, ctx: GatewayContext) -> str:
    """
    Run one operation outside Lambda and encode it the way the GraphQL layer does.

    Used by the MCP tools and the command-line runner so their output is
    byte-compatible with what the front end receives.

    Returns:
        Transport scalar (JSON string of the operation's result string)
    """
    event = {"fieldName": operation.value, "arguments": arguments}
    return encode_transport(route(event, ctx))
