"""
Model invocation strategy for the assistant operations.

Free-form recommendations try an ordered list of Bedrock call shapes:
InvokeModel first, then Converse. Each shape is attempted at most once and
the first one to yield text wins. The coaching and chat operations only ever
use Converse.

Unlike the store operations, failures here are hard: they raise
ModelInvocationError instead of returning a ``{"success": false}`` envelope.
"""

import json
import logging
from typing import Any, Dict, List, Protocol, Sequence

from lift_gateway import envelope
from lift_gateway.api.model import ModelRequest
from lift_gateway.api.prompts import (
    CHAT_SYSTEM_PROMPT,
    COACHING_REQUEST_TEMPLATE,
    COACHING_SYSTEM_PROMPT,
    system_prompt_for,
)
from lift_gateway.errors import InvalidArgumentsError, ModelInvocationError
from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk import bedrock as sdk_bedrock
from lift_gateway.utils import to_text

logger = logging.getLogger(__name__)


class InvocationStrategy(Protocol):
    """One way of reaching the model. Returns text or raises."""

    name: str

    def __call__(self, ctx: GatewayContext, request: ModelRequest) -> str:
        ...


class InvokeStrategy:
    """Single-shot InvokeModel with an Anthropic messages body."""

    name = "invoke"

    def __call__(self, ctx: GatewayContext, request: ModelRequest) -> str:
        body = sdk_bedrock.invoke_model(ctx, request.to_invoke_body())
        return body["content"][0]["text"]


class ConverseStrategy:
    """Multi-turn Converse; text comes from the first content block."""

    name = "converse"

    def __call__(self, ctx: GatewayContext, request: ModelRequest) -> str:
        response = sdk_bedrock.converse(
            ctx,
            request.system_prompt,
            request.to_converse_messages(),
            inference_config=request.inference_config,
        )
        text = _first_text(_output_message(response))
        if not text:
            raise ModelInvocationError("No text content in the response")
        return text


DEFAULT_STRATEGIES = (InvokeStrategy(), ConverseStrategy())


def run_strategies(
    ctx: GatewayContext,
    request: ModelRequest,
    strategies: Sequence[InvocationStrategy] = DEFAULT_STRATEGIES,
) -> str:
    """
    Try each strategy in order, returning the first text produced.

    Raises:
        ModelInvocationError: If every strategy failed (chained to the last error)
    """
    last_error = None
    for strategy in strategies:
        try:
            text = strategy(ctx, request)
        except Exception as e:
            logger.warning(f"Model strategy '{strategy.name}' failed: {e}")
            last_error = e
            continue
        logger.info("Model strategy '%s' succeeded", strategy.name)
        return text

    raise ModelInvocationError("Failed to get AI recommendations") from last_error


def get_ai_recommendations(ctx: GatewayContext, prompt_type, context_data) -> str:
    """Free-form recommendations for one of the prompt types.

    Args:
        prompt_type: exerciseTips, workoutPlanning or nutritionTips (anything else: exerciseTips)
        context_data: Workout context, as text or structured data

    Returns:
        Plain text from the model
    """
    logger.info("AI recommendations requested (promptType=%s, model=%s)",
                prompt_type, ctx.settings.model_id)
    request = ModelRequest.for_text(
        system_prompt_for(prompt_type),
        to_text(context_data),
        ctx.settings,
    )
    return run_strategies(ctx, request)


def get_workout_recommendations(ctx: GatewayContext, exercise_data, workout_history) -> str:
    """Structured coaching advice for the next session of an exercise.

    Returns:
        JSON text of the model's message object
    """
    text = COACHING_REQUEST_TEMPLATE.format(
        exercise_data=envelope.encode_json(exercise_data),
        workout_history=envelope.encode_json(workout_history),
    )
    request = ModelRequest.for_text(COACHING_SYSTEM_PROMPT, text, ctx.settings)
    return _converse_message(ctx, request)


def chat(ctx: GatewayContext, conversation) -> str:
    """Continue a conversation with the assistant.

    Args:
        conversation: Converse-format message list (or its JSON text)

    Returns:
        JSON text of the model's message object
    """
    messages = json.loads(conversation) if isinstance(conversation, str) else conversation
    if not isinstance(messages, list):
        raise InvalidArgumentsError("conversation must be a list of messages")
    request = ModelRequest(
        system_prompt=CHAT_SYSTEM_PROMPT,
        messages=messages,
        max_tokens=ctx.settings.max_tokens,
        temperature=ctx.settings.temperature,
    )
    return _converse_message(ctx, request)


def _converse_message(ctx: GatewayContext, request: ModelRequest) -> str:
    response = sdk_bedrock.converse(
        ctx,
        request.system_prompt,
        request.to_converse_messages(),
        inference_config=request.inference_config,
    )
    message = _output_message(response)
    if not message:
        raise ModelInvocationError("No message in the response output")
    return envelope.encode_json(message)


def _output_message(response: Dict[str, Any]) -> Dict[str, Any]:
    return ((response or {}).get("output") or {}).get("message")


def _first_text(message):
    if not message:
        return None
    content: List[Dict[str, Any]] = message.get("content") or []
    if not content:
        return None
    return content[0].get("text")
