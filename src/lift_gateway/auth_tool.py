"""
Authentication tools for the lift gateway MCP server.

Provides the legacy credential check and the feature overview.
"""

import json
import logging

logger = logging.getLogger(__name__)
logging.basicConfig(level=logging.INFO)

from lift_gateway.client_factory import get_context
from lift_gateway.handler import invoke_operation
from lift_gateway.sdk.types import OperationName


def register_tools(app):
    """Register authentication and identity tools with the MCP app."""

    @app.tool()
    async def authenticate_user(username: str, password: str) -> str:
        """
        Verify a lifting tracker username and password.

        Checks the credentials against the legacy users table.

        Args:
            username: Lifting tracker username
            password: Plain-text password

        Returns:
            JSON scalar wrapping {success, user: {username, created_at}} or {success: false, error}
        """
        return invoke_operation(
            OperationName.AUTHENTICATE_USER,
            {"username": username, "password": password},
            get_context(),
        )

    @app.tool()
    async def get_available_features() -> str:
        """
        Get list of available lift gateway features.

        Returns:
            JSON with available feature categories
        """
        features = {
            "platform": "Lifting Tracker",
            "auth": [
                "authenticate_user - Verify legacy username and password",
            ],
            "workouts": [
                "get_legacy_workouts - List a user's workouts (optional exercise/date filters)",
                "save_legacy_workout - Record one exercise with its sets",
            ],
            "assistant": [
                "get_ai_recommendations - Exercise tips, workout planning or nutrition advice",
                "get_workout_recommendations - Structured weight/rep/sets coaching",
                "chat - Multi-turn conversation with the assistant",
            ],
            "notes": [
                "Results are JSON string scalars: parse once for the operation result, "
                "then again for JSON results",
                "get_ai_recommendations returns plain text inside the scalar",
            ],
        }
        return json.dumps(features, indent=2)

    return app
