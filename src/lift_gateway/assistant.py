"""
Assistant tools for the lift gateway MCP server.

Model-backed recommendations and chat. Failures raise instead of returning
an error envelope.
"""

from typing import Any

from lift_gateway.client_factory import get_context
from lift_gateway.handler import invoke_operation
from lift_gateway.sdk.types import OperationName, PromptType


def register_tools(app):
    """Register assistant tools with the MCP app."""

    @app.tool()
    async def get_ai_recommendations(context_data: Any, prompt_type: str = PromptType.EXERCISE_TIPS.value) -> str:
        """
        Get free-form training advice.

        Args:
            context_data: Workout context (text or structured data) sent as the user message
            prompt_type: exerciseTips (default), workoutPlanning or nutritionTips

        Returns:
            JSON scalar wrapping the model's plain-text answer
        """
        return invoke_operation(
            OperationName.GET_AI_RECOMMENDATIONS,
            {"promptType": prompt_type, "contextData": context_data},
            get_context(),
        )

    @app.tool()
    async def get_workout_recommendations(exercise_data: Any, workout_history: Any) -> str:
        """
        Get structured weight, rep and set recommendations for an exercise.

        Args:
            exercise_data: Current exercise (name, recent weights, ...)
            workout_history: Previous sessions for the exercise

        Returns:
            JSON scalar wrapping the model's message {role, content: [{text}]}
        """
        return invoke_operation(
            OperationName.GET_WORKOUT_RECOMMENDATIONS,
            {"exerciseData": exercise_data, "workoutHistory": workout_history},
            get_context(),
        )

    @app.tool()
    async def chat(conversation: list[dict] | str) -> str:
        """
        Continue a conversation with the assistant.

        Args:
            conversation: Message history, e.g.
                [{"role": "user", "content": [{"text": "Hi"}]}]

        Returns:
            JSON scalar wrapping the model's reply message {role, content: [{text}]}
        """
        return invoke_operation(
            OperationName.CHAT,
            {"conversation": conversation},
            get_context(),
        )

    return app
