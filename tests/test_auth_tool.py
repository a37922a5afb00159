"""
Tests for lift gateway authentication tools.

Tests credential checks through the MCP surface and the feature list.
"""
import json
import pytest
from mcp.server.fastmcp import FastMCP

from lift_gateway import auth_tool
from tests.conftest import get_tool_result_text


@pytest.fixture
def app_with_auth():
    """Create FastMCP app with auth tools registered."""
    app = FastMCP("Test Lift Gateway Auth")
    app = auth_tool.register_tools(app)
    return app


def _decode(result):
    return json.loads(json.loads(get_tool_result_text(result)))


@pytest.mark.asyncio
async def test_authenticate_user_success(app_with_auth, mock_get_context):
    result = await app_with_auth.call_tool(
        "authenticate_user", {"username": "alice", "password": "secret"}
    )

    data = _decode(result)
    assert data["success"] is True
    assert data["user"]["username"] == "alice"
    assert data["user"]["created_at"] == "2023-05-01T10:00:00.000Z"
    mock_get_context.assert_called_once()


@pytest.mark.asyncio
async def test_authenticate_user_wrong_password(app_with_auth):
    result = await app_with_auth.call_tool(
        "authenticate_user", {"username": "alice", "password": "wrong"}
    )
    assert _decode(result) == {"success": False, "error": "Invalid password"}


@pytest.mark.asyncio
async def test_authenticate_user_unknown(app_with_auth):
    result = await app_with_auth.call_tool(
        "authenticate_user", {"username": "nobody", "password": "x"}
    )
    assert _decode(result) == {"success": False, "error": "User not found"}


@pytest.mark.asyncio
async def test_get_available_features_returns_json(app_with_auth):
    """Test get_available_features tool returns valid JSON."""
    result = await app_with_auth.call_tool("get_available_features", {})

    text = get_tool_result_text(result)
    data = json.loads(text)
    assert data["platform"] == "Lifting Tracker"
    assert "auth" in data
    assert "workouts" in data
    assert "assistant" in data
    assert "notes" in data


# Test tool registration
def test_auth_tools_registered(app_with_auth):
    """Test that all auth tools are registered."""
    tools = app_with_auth._tool_manager._tools
    tool_names = list(tools.keys())

    for tool_name in ["authenticate_user", "get_available_features"]:
        assert tool_name in tool_names, f"Tool {tool_name} not registered"
