"""
High-Level API — the gateway's domain operations.

Every function takes the GatewayContext first and returns the operation's
result string. Composes with the SDK layer internally.

Modules:
    auth       — Who are you?        (legacy credential check)
    workouts   — What have you done? (list and append workout records)
    assistant  — What should I do?   (model-backed recommendations and chat)
"""

# Model
from lift_gateway.api.model import ModelRequest

# Auth
from lift_gateway.api.auth import authenticate_user, hash_password

# Workouts
from lift_gateway.api.workouts import get_legacy_workouts, save_legacy_workout

# Assistant
from lift_gateway.api.assistant import (
    get_ai_recommendations,
    get_workout_recommendations,
    chat,
    run_strategies,
    InvokeStrategy,
    ConverseStrategy,
)

__all__ = [
    # Model
    "ModelRequest",
    # Auth
    "authenticate_user", "hash_password",
    # Workouts
    "get_legacy_workouts", "save_legacy_workout",
    # Assistant
    "get_ai_recommendations", "get_workout_recommendations", "chat",
    "run_strategies", "InvokeStrategy", "ConverseStrategy",
]
