"""
Domain types for model invocation.

Only ModelRequest needs a dataclass: it is built once per invocation and
rendered into either Bedrock call shape. Envelopes and messages stay as
plain dicts.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from lift_gateway.config import Settings
from lift_gateway.sdk.types import ANTHROPIC_VERSION


@dataclass
class ModelRequest:
    """A system prompt plus a conversation, with inference limits."""
    system_prompt: str
    messages: List[Dict[str, Any]] = field(default_factory=list)
    max_tokens: int = 1000
    temperature: float = 0.5

    @classmethod
    def for_text(cls, system_prompt: str, text: str, settings: Settings) -> "ModelRequest":
        """Single user-turn request."""
        return cls(
            system_prompt=system_prompt,
            messages=[{"role": "user", "content": text}],
            max_tokens=settings.max_tokens,
            temperature=settings.temperature,
        )

    def to_invoke_body(self) -> Dict[str, Any]:
        """Anthropic messages body for InvokeModel."""
        return {
            "anthropic_version": ANTHROPIC_VERSION,
            "max_tokens": self.max_tokens,
            "temperature": self.temperature,
            "system": self.system_prompt,
            "messages": [
                {"role": m["role"], "content": _content_text(m["content"])}
                for m in self.messages
            ],
        }

    @property
    def inference_config(self) -> Dict[str, Any]:
        return {"maxTokens": self.max_tokens, "temperature": self.temperature}

    def to_converse_messages(self) -> List[Dict[str, Any]]:
        """Converse-format messages, with string content wrapped in text blocks."""
        return [
            {"role": m["role"], "content": _content_blocks(m["content"])}
            for m in self.messages
        ]


def _content_text(content) -> str:
    if isinstance(content, str):
        return content
    return "".join(block.get("text", "") for block in content)


def _content_blocks(content) -> List[Dict[str, Any]]:
    if isinstance(content, str):
        return [{"text": content}]
    return list(content)
