"""
Gateway configuration.

All settings come from environment variables so the same package runs as a
Lambda resolver and as a local MCP server.
"""

import os
from dataclasses import dataclass
from typing import Optional


DEFAULT_USERS_TABLE = "lifting-tracker-users"
DEFAULT_WORKOUTS_TABLE = "lifting-tracker-workouts"

# Shared with the legacy lifting tracker; changing it invalidates every stored hash.
LEGACY_PASSWORD_SALT = "salt123"


@dataclass(frozen=True)
class Settings:
    """Process-wide gateway settings."""
    region: Optional[str] = None
    model_id: Optional[str] = None
    users_table: str = DEFAULT_USERS_TABLE
    workouts_table: str = DEFAULT_WORKOUTS_TABLE
    password_salt: str = LEGACY_PASSWORD_SALT
    max_tokens: int = 1000
    temperature: float = 0.5
    connect_timeout: float = 5
    read_timeout: float = 60
    max_attempts: int = 1

    @classmethod
    def from_env(cls, environ=None) -> "Settings":
        """Build settings from environment variables.

        Environment variables:
        - AWS_REGION: Region for DynamoDB and Bedrock
        - MODEL_ID: Bedrock model identifier
        - USERS_TABLE / WORKOUTS_TABLE: DynamoDB table names
        - LEGACY_PASSWORD_SALT: Salt appended to passwords before hashing
        - MODEL_MAX_TOKENS / MODEL_TEMPERATURE: Inference configuration
        - AWS_CONNECT_TIMEOUT / AWS_READ_TIMEOUT: Per-call timeouts in seconds
        - AWS_MAX_ATTEMPTS: Total botocore attempts per call (default: 1, no retries)
        """
        env = os.environ if environ is None else environ
        return cls(
            region=env.get("AWS_REGION"),
            model_id=env.get("MODEL_ID"),
            users_table=env.get("USERS_TABLE", DEFAULT_USERS_TABLE),
            workouts_table=env.get("WORKOUTS_TABLE", DEFAULT_WORKOUTS_TABLE),
            password_salt=env.get("LEGACY_PASSWORD_SALT", LEGACY_PASSWORD_SALT),
            max_tokens=int(env.get("MODEL_MAX_TOKENS", "1000")),
            temperature=float(env.get("MODEL_TEMPERATURE", "0.5")),
            connect_timeout=float(env.get("AWS_CONNECT_TIMEOUT", "5")),
            read_timeout=float(env.get("AWS_READ_TIMEOUT", "60")),
            max_attempts=int(env.get("AWS_MAX_ATTEMPTS", "1")),
        )

    @property
    def inference_config(self) -> dict:
        """Converse-style inference configuration."""
        return {"maxTokens": self.max_tokens, "temperature": self.temperature}
