"""
Workout record tools for the lift gateway MCP server.

List and append entries in the legacy workout history.
"""

from typing import Optional

from lift_gateway.client_factory import get_context
from lift_gateway.handler import invoke_operation
from lift_gateway.sdk.types import OperationName


def register_tools(app):
    """Register workout tools with the MCP app."""

    @app.tool()
    async def get_legacy_workouts(
        user_id: str,
        exercise: Optional[str] = None,
        date: Optional[str] = None,
    ) -> str:
        """
        Get a user's recorded workouts.

        Each workout is one exercise on one date with its list of sets.

        Args:
            user_id: Lifting tracker username
            exercise: Only return this exercise, e.g. "squat" (optional)
            date: Only return this date in YYYY-MM-DD format (optional)

        Returns:
            JSON scalar wrapping {success, workouts: [{exercise, date, sets: [{weight, reps}]}]}
        """
        arguments = {"userId": user_id}
        if exercise:
            arguments["exercise"] = exercise
        if date:
            arguments["date"] = date
        return invoke_operation(OperationName.GET_LEGACY_WORKOUTS, arguments, get_context())

    @app.tool()
    async def save_legacy_workout(user_id: str, workout: dict | str) -> str:
        """
        Record one exercise session.

        Args:
            user_id: Lifting tracker username
            workout: Exercise entry, as an object or its JSON text:
                {"exercise": "squat", "date": "2024-01-01",
                 "sets": [{"weight": 100, "reps": 5}]}

        Returns:
            JSON scalar wrapping {success, workoutId}
        """
        return invoke_operation(
            OperationName.SAVE_LEGACY_WORKOUT,
            {"userId": user_id, "workout": workout},
            get_context(),
        )

    return app
