"""
Bedrock runtime SDK functions.

The two call shapes used to reach the generative model: single-shot
InvokeModel with a provider-specific body, and multi-turn Converse.
"""

import json
import logging
from typing import Any, Dict, List, Optional

from lift_gateway.sdk.client import GatewayContext

logger = logging.getLogger(__name__)


def invoke_model(ctx: GatewayContext, body: Dict[str, Any]) -> Dict[str, Any]:
    """
    Single-shot model invocation.

    bedrock-runtime InvokeModel

    Args:
        body: Provider request body (JSON-encoded before sending)

    Returns:
        Parsed response body
    """
    response = ctx.bedrock.invoke_model(
        modelId=ctx.settings.model_id,
        contentType="application/json",
        accept="application/json",
        body=json.dumps(body),
    )
    raw = response["body"].read()
    if isinstance(raw, bytes):
        raw = raw.decode("utf-8")
    return json.loads(raw)


def converse(
    ctx: GatewayContext,
    system_prompt: str,
    messages: List[Dict[str, Any]],
    inference_config: Optional[Dict[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Conversational model invocation.

    bedrock-runtime Converse

    Args:
        system_prompt: System instruction text
        messages: Converse-format messages [{role, content: [{text}]}]
        inference_config: {maxTokens, temperature} (defaults to settings)

    Returns:
        Full Converse response (output.message, usage, stopReason, ...)
    """
    response = ctx.bedrock.converse(
        modelId=ctx.settings.model_id,
        system=[{"text": system_prompt}],
        messages=messages,
        inferenceConfig=inference_config or ctx.settings.inference_config,
    )
    logger.debug("Converse stop reason: %s", response.get("stopReason"))
    return response
