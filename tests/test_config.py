"""Tests for environment-driven settings."""

from lift_gateway.config import LEGACY_PASSWORD_SALT, Settings


def test_defaults():
    settings = Settings.from_env({})
    assert settings.region is None
    assert settings.model_id is None
    assert settings.users_table == "lifting-tracker-users"
    assert settings.workouts_table == "lifting-tracker-workouts"
    assert settings.password_salt == LEGACY_PASSWORD_SALT == "salt123"
    assert settings.inference_config == {"maxTokens": 1000, "temperature": 0.5}
    assert settings.max_attempts == 1


def test_overrides():
    settings = Settings.from_env({
        "AWS_REGION": "eu-central-1",
        "MODEL_ID": "anthropic.claude-3-haiku-20240307-v1:0",
        "USERS_TABLE": "users-dev",
        "WORKOUTS_TABLE": "workouts-dev",
        "MODEL_MAX_TOKENS": "512",
        "MODEL_TEMPERATURE": "0.1",
        "AWS_CONNECT_TIMEOUT": "3",
        "AWS_READ_TIMEOUT": "20",
        "AWS_MAX_ATTEMPTS": "2",
    })
    assert settings.region == "eu-central-1"
    assert settings.model_id == "anthropic.claude-3-haiku-20240307-v1:0"
    assert settings.users_table == "users-dev"
    assert settings.workouts_table == "workouts-dev"
    assert settings.inference_config == {"maxTokens": 512, "temperature": 0.1}
    assert settings.connect_timeout == 3.0
    assert settings.read_timeout == 20.0
    assert settings.max_attempts == 2


def test_reads_process_environment(monkeypatch):
    monkeypatch.setenv("MODEL_ID", "from-env")
    assert Settings.from_env().model_id == "from-env"
