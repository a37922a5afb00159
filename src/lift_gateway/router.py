"""
Operation router.

Resolves the operation named by an invocation record and dispatches its
``arguments`` to exactly one domain handler. Names outside OperationName are
rejected before anything runs.
"""

import logging
from typing import Any, Callable, Dict, Mapping, Optional, Tuple

from lift_gateway import api
from lift_gateway.errors import InvalidArgumentsError, UnknownOperationError
from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk.types import OperationName

logger = logging.getLogger(__name__)


def resolve_operation_name(event: Mapping[str, Any]) -> Optional[str]:
    """Operation name from ``fieldName``, then ``info.fieldName``, then ``operationName``."""
    if not isinstance(event, Mapping):
        return None
    info = event.get("info")
    nested = info.get("fieldName") if isinstance(info, Mapping) else None
    return event.get("fieldName") or nested or event.get("operationName")


def resolve_operation(event: Mapping[str, Any]) -> Tuple[OperationName, Dict[str, Any]]:
    """
    Turn an invocation record into an operation and its arguments.

    Raises:
        UnknownOperationError: If no supported operation name resolves
        InvalidArgumentsError: If ``arguments`` is present but not a mapping
    """
    name = resolve_operation_name(event)
    try:
        operation = OperationName(name)
    except ValueError:
        raise UnknownOperationError(name) from None

    arguments = event.get("arguments")
    if arguments is None:
        arguments = {}
    if not isinstance(arguments, Mapping):
        raise InvalidArgumentsError(
            f"arguments for {operation.value} must be an object, got {type(arguments).__name__}"
        )
    return operation, dict(arguments)


# ── Handlers: each receives only the arguments mapping ──────────────────

def _authenticate_user(ctx: GatewayContext, args: Dict[str, Any]) -> str:
    return api.authenticate_user(ctx, args.get("username"), args.get("password"))


def _get_legacy_workouts(ctx: GatewayContext, args: Dict[str, Any]) -> str:
    return api.get_legacy_workouts(
        ctx, args.get("userId"), exercise=args.get("exercise"), date=args.get("date"),
    )


def _save_legacy_workout(ctx: GatewayContext, args: Dict[str, Any]) -> str:
    return api.save_legacy_workout(ctx, args.get("userId"), args.get("workout"))


def _get_workout_recommendations(ctx: GatewayContext, args: Dict[str, Any]) -> str:
    return api.get_workout_recommendations(
        ctx, args.get("exerciseData"), args.get("workoutHistory"),
    )


def _get_ai_recommendations(ctx: GatewayContext, args: Dict[str, Any]) -> str:
    return api.get_ai_recommendations(ctx, args.get("promptType"), args.get("contextData"))


def _chat(ctx: GatewayContext, args: Dict[str, Any]) -> str:
    return api.chat(ctx, args.get("conversation"))


HANDLERS: Dict[OperationName, Callable[[GatewayContext, Dict[str, Any]], str]] = {
    OperationName.AUTHENTICATE_USER: _authenticate_user,
    OperationName.GET_LEGACY_WORKOUTS: _get_legacy_workouts,
    OperationName.SAVE_LEGACY_WORKOUT: _save_legacy_workout,
    OperationName.GET_WORKOUT_RECOMMENDATIONS: _get_workout_recommendations,
    OperationName.GET_AI_RECOMMENDATIONS: _get_ai_recommendations,
    OperationName.CHAT: _chat,
}

_missing = set(OperationName) - set(HANDLERS)
if _missing:
    raise RuntimeError(f"No handler for operations: {sorted(op.value for op in _missing)}")


def route(event: Mapping[str, Any], ctx: GatewayContext) -> str:
    """
    Dispatch one invocation.

    Args:
        event: Invocation record (fieldName / info.fieldName / operationName + arguments)
        ctx: Shared gateway context

    Returns:
        The operation's result string

    Raises:
        GatewayError: On hard failures (unknown operation, model failure, ...)
    """
    operation = None
    try:
        operation, arguments = resolve_operation(event)
        logger.info("Dispatching %s", operation.value)
        return HANDLERS[operation](ctx, arguments)
    except Exception:
        name = operation.value if operation else resolve_operation_name(event)
        logger.exception(f"Error in {name} handler")
        raise
