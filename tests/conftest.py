"""
Shared pytest fixtures for lift gateway testing.
"""
import io
import json
import pytest
from unittest.mock import Mock, patch

from botocore.exceptions import ClientError

from lift_gateway.api.auth import hash_password
from lift_gateway.config import Settings
from lift_gateway.sdk.client import GatewayContext
from lift_gateway.utils import MillisClock


def get_tool_result_text(result):
    """Extract text from tool result.

    FastMCP call_tool returns a tuple (list_of_TextContent, metadata_dict).
    This helper extracts the text from the first TextContent item.
    """
    # Handle tuple return: (content_list, metadata)
    if isinstance(result, tuple) and len(result) > 0:
        result = result[0]
    if isinstance(result, list) and len(result) > 0:
        if hasattr(result[0], 'text'):
            return result[0].text
    return str(result)


def invoke_response(text):
    """Build a bedrock-runtime InvokeModel response carrying ``text``."""
    body = {
        "id": "msg_01",
        "type": "message",
        "role": "assistant",
        "content": [{"type": "text", "text": text}],
    }
    return {"body": io.BytesIO(json.dumps(body).encode("utf-8")), "contentType": "application/json"}


def converse_response(text):
    """Build a bedrock-runtime Converse response carrying ``text``."""
    return {
        "output": {"message": {"role": "assistant", "content": [{"text": text}]}},
        "stopReason": "end_turn",
        "usage": {"inputTokens": 10, "outputTokens": 5, "totalTokens": 15},
    }


class FakeTable:
    """In-memory stand-in for a boto3 DynamoDB Table.

    Supports get_item by full key, put_item, and query on the partition key
    (read from the KeyConditionExpression). FilterExpression is recorded but
    not applied. A put_item carrying a ConditionExpression is treated as
    "key must not exist" and fails the way DynamoDB does when it does.
    """

    def __init__(self, key_names, items=None, page_size=None):
        self.key_names = key_names
        self.items = list(items or [])
        self.page_size = page_size
        self.query_calls = []
        self.put_calls = []

    def _key(self, item):
        return tuple(item.get(k) for k in self.key_names)

    def get_item(self, Key):
        wanted = tuple(Key.get(k) for k in self.key_names)
        for item in self.items:
            if self._key(item) == wanted:
                return {"Item": dict(item)}
        return {}

    def put_item(self, Item, ConditionExpression=None):
        self.put_calls.append({"Item": Item, "ConditionExpression": ConditionExpression})
        if ConditionExpression is not None and self.get_item(Key=Item):
            raise ClientError(
                {"Error": {"Code": "ConditionalCheckFailedException",
                           "Message": "The conditional request failed"}},
                "PutItem",
            )
        self.items = [i for i in self.items if self._key(i) != self._key(Item)]
        self.items.append(dict(Item))
        return {}

    def query(self, KeyConditionExpression, **kwargs):
        self.query_calls.append(dict(kwargs, KeyConditionExpression=KeyConditionExpression))
        key_attr, value = KeyConditionExpression.get_expression()["values"]
        matches = [dict(i) for i in self.items if i.get(key_attr.name) == value]

        start = kwargs.get("ExclusiveStartKey", {}).get("offset", 0)
        if self.page_size is None:
            return {"Items": matches[start:]}
        end = start + self.page_size
        response = {"Items": matches[start:end]}
        if end < len(matches):
            response["LastEvaluatedKey"] = {"offset": end}
        return response


@pytest.fixture
def settings():
    return Settings(region="us-east-1", model_id="test-model")


@pytest.fixture
def users_table(settings):
    return FakeTable(["username"], items=[{
        "username": "alice",
        "password": hash_password("secret", settings.password_salt),
        "created_at": "2023-05-01T10:00:00.000Z",
    }])


@pytest.fixture
def workouts_table():
    return FakeTable(["user_id", "workout_id"])


@pytest.fixture
def mock_bedrock():
    """Bedrock runtime client with both call shapes stubbed."""
    bedrock = Mock()
    bedrock.invoke_model = Mock(return_value=invoke_response("Invoke says hi"))
    bedrock.converse = Mock(return_value=converse_response("Converse says hi"))
    return bedrock


@pytest.fixture
def gateway_ctx(users_table, workouts_table, mock_bedrock, settings):
    return GatewayContext(
        users_table=users_table,
        workouts_table=workouts_table,
        bedrock=mock_bedrock,
        settings=settings,
    )


@pytest.fixture(autouse=True)
def mock_get_context(gateway_ctx):
    """Auto-mock client_factory.get_context in all entry-point modules.

    Patches get_context at the module level so tools and the Lambda handler
    receive the fake context instead of building boto3 resources.

    Yields the mock function (not the context) so tests can inspect calls.
    """
    get_context_fn = Mock(return_value=gateway_ctx)

    modules_to_patch = [
        "lift_gateway.handler",
        "lift_gateway.auth_tool",
        "lift_gateway.workouts",
        "lift_gateway.assistant",
    ]

    patchers = []
    for module in modules_to_patch:
        p = patch(f"{module}.get_context", get_context_fn)
        p.start()
        patchers.append(p)

    yield get_context_fn

    for p in patchers:
        p.stop()


@pytest.fixture(autouse=True)
def fresh_workout_clock():
    """Give each test its own workout id clock so pinned timestamps stay exact."""
    with patch("lift_gateway.api.workouts.workout_clock", MillisClock()) as clock:
        yield clock
