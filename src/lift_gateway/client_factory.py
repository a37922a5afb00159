"""
Context factory for the lift gateway.

The gateway context (DynamoDB tables, Bedrock client) is created once per
process and reused by every invocation handled by that process. Warm Lambda
containers and the long-running MCP server both hit the cached instance.
"""

import logging
from functools import lru_cache

from lift_gateway.config import Settings
from lift_gateway.sdk.client import GatewayContext

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_context() -> GatewayContext:
    """
    Get the process-wide gateway context, creating it on first use.

    Usage in tools:
        @app.tool()
        async def get_legacy_workouts(user_id: str) -> str:
            return route(event, get_context())

    Returns:
        GatewayContext built from environment settings
    """
    settings = Settings.from_env()
    logger.info("Initializing gateway context")
    return GatewayContext.from_settings(settings)


def reset_context() -> None:
    """Drop the cached context so the next call rebuilds it from the environment."""
    get_context.cache_clear()
