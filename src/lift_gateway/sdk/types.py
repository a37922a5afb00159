"""
Gateway types, enums, and constants.

Operation names, prompt types, and the stored attribute names of the legacy
lifting tracker tables all live here.
"""

from enum import Enum


class OperationName(str, Enum):
    """Operations the gateway dispatches.

    Values are the GraphQL field names the upstream API layer sends.
    """
    AUTHENTICATE_USER = "authenticateUser"
    GET_LEGACY_WORKOUTS = "getLegacyWorkouts"
    SAVE_LEGACY_WORKOUT = "saveLegacyWorkout"
    GET_WORKOUT_RECOMMENDATIONS = "getWorkoutRecommendations"
    GET_AI_RECOMMENDATIONS = "getAIRecommendations"
    CHAT = "chat"

    @property
    def returns_json(self) -> bool:
        """Whether the operation's result string is itself JSON text."""
        return self is not OperationName.GET_AI_RECOMMENDATIONS


class PromptType(str, Enum):
    """System prompt templates for free-form recommendations."""
    EXERCISE_TIPS = "exerciseTips"
    WORKOUT_PLANNING = "workoutPlanning"
    NUTRITION_TIPS = "nutritionTips"

    @classmethod
    def parse(cls, value) -> "PromptType":
        """Map a caller-supplied value to a prompt type, defaulting to exercise tips."""
        try:
            return cls(value)
        except ValueError:
            return cls.EXERCISE_TIPS


# Bedrock InvokeModel body version for Anthropic models
ANTHROPIC_VERSION = "bedrock-2023-05-31"

# Credential table attributes
ATTR_USERNAME = "username"
ATTR_PASSWORD = "password"
ATTR_CREATED_AT = "created_at"

# Workout table attributes
ATTR_USER_ID = "user_id"
ATTR_WORKOUT_ID = "workout_id"
ATTR_EXERCISE = "exercise"
ATTR_DATE = "date"
ATTR_SETS = "sets"

WORKOUT_ID_SEPARATOR = "#"
