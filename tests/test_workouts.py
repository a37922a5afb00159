"""Tests for workout record tools."""

import json
from unittest.mock import patch

import pytest
from mcp.server.fastmcp import FastMCP

from lift_gateway import workouts
from tests.conftest import get_tool_result_text


@pytest.fixture
def app():
    app = FastMCP("Test Lift Gateway Workouts")
    return workouts.register_tools(app)


def _decode(result):
    return json.loads(json.loads(get_tool_result_text(result)))


@pytest.mark.asyncio
async def test_save_then_list(app):
    saved = _decode(await app.call_tool("save_legacy_workout", {
        "user_id": "u1",
        "workout": {"exercise": "squat", "date": "2024-01-01", "sets": [{"weight": 100, "reps": 5}]},
    }))
    listed = _decode(await app.call_tool("get_legacy_workouts", {"user_id": "u1"}))

    assert saved["success"] is True
    assert saved["workoutId"].startswith("squat#2024-01-01#")
    assert listed == {
        "success": True,
        "workouts": [{"exercise": "squat", "date": "2024-01-01", "sets": [{"weight": 100, "reps": 5}]}],
    }


@pytest.mark.asyncio
async def test_list_with_filters_builds_arguments(app):
    with patch("lift_gateway.workouts.invoke_operation", return_value='"{}"') as mock_invoke:
        await app.call_tool("get_legacy_workouts", {"user_id": "u1", "exercise": "bench"})

    operation, arguments, _ = mock_invoke.call_args.args
    assert operation.value == "getLegacyWorkouts"
    assert arguments == {"userId": "u1", "exercise": "bench"}


@pytest.mark.asyncio
async def test_store_failure_is_soft(app, gateway_ctx):
    gateway_ctx._workouts_table = None
    result = _decode(await app.call_tool("get_legacy_workouts", {"user_id": "u1"}))
    assert result == {"success": False, "error": "Failed to fetch workouts"}


def test_workout_tools_registered(app):
    tool_names = list(app._tool_manager._tools.keys())
    assert "get_legacy_workouts" in tool_names
    assert "save_legacy_workout" in tool_names
