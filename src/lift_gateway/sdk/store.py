"""
Legacy store SDK functions.

Typed access to the lifting tracker's DynamoDB tables. Readers always return
``sets`` as a list, whatever shape it was stored in.
"""

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from boto3.dynamodb.conditions import Attr, Key

from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk.types import (
    ATTR_CREATED_AT,
    ATTR_DATE,
    ATTR_EXERCISE,
    ATTR_PASSWORD,
    ATTR_SETS,
    ATTR_USER_ID,
    ATTR_USERNAME,
    ATTR_WORKOUT_ID,
)
from lift_gateway.utils import from_dynamo

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """A legacy user credential."""
    username: str
    password_hash: str
    created_at: Optional[str] = None


@dataclass
class WorkoutRecord:
    """One exercise entry from the workout table."""
    user_id: str
    workout_id: str
    exercise: str
    date: str
    sets: Any = field(default_factory=list)
    created_at: Optional[str] = None

    def to_item(self) -> Dict[str, Any]:
        """Convert to a DynamoDB item. ``sets`` is always written as a JSON string."""
        return {
            ATTR_USER_ID: self.user_id,
            ATTR_WORKOUT_ID: self.workout_id,
            ATTR_EXERCISE: self.exercise,
            ATTR_DATE: self.date,
            ATTR_SETS: json.dumps(self.sets, separators=(",", ":"), ensure_ascii=False),
            ATTR_CREATED_AT: self.created_at,
        }

    @classmethod
    def from_item(cls, item: Dict[str, Any]) -> "WorkoutRecord":
        """Create a record from a raw DynamoDB item, normalizing ``sets``."""
        item = from_dynamo(item)
        return cls(
            user_id=item.get(ATTR_USER_ID),
            workout_id=item.get(ATTR_WORKOUT_ID),
            exercise=item.get(ATTR_EXERCISE),
            date=item.get(ATTR_DATE),
            sets=normalize_sets(item.get(ATTR_SETS)),
            created_at=item.get(ATTR_CREATED_AT),
        )


def normalize_sets(sets: Any) -> Any:
    """
    Normalize a stored ``sets`` attribute to its list form.

    Lists pass through, strings are parsed as JSON, anything else is returned
    unchanged.

    Raises:
        json.JSONDecodeError: If a string value is not valid JSON
    """
    if isinstance(sets, list):
        return sets
    if isinstance(sets, str):
        return json.loads(sets)
    return sets


def get_credential(ctx: GatewayContext, username: str) -> Optional[Credential]:
    """
    Look up a credential by exact username.

    GetItem {users_table} Key={username}

    Returns:
        Credential, or None if no such user
    """
    response = ctx.users_table.get_item(Key={ATTR_USERNAME: username})
    item = response.get("Item")
    if not item:
        return None
    return Credential(
        username=item.get(ATTR_USERNAME),
        password_hash=item.get(ATTR_PASSWORD),
        created_at=item.get(ATTR_CREATED_AT),
    )


def query_workouts(
    ctx: GatewayContext,
    user_id: str,
    exercise: Optional[str] = None,
    date: Optional[str] = None,
) -> List[WorkoutRecord]:
    """
    List a user's workout records.

    Query {workouts_table} KeyCondition user_id = :userId,
    following LastEvaluatedKey until exhausted.

    Args:
        user_id: Partition key
        exercise: Only return records for this exercise (optional)
        date: Only return records for this date (optional)

    Returns:
        Records with ``sets`` normalized to lists
    """
    query_kwargs = {"KeyConditionExpression": Key(ATTR_USER_ID).eq(user_id)}

    filter_expression = None
    if exercise:
        filter_expression = Attr(ATTR_EXERCISE).eq(exercise)
    if date:
        date_condition = Attr(ATTR_DATE).eq(date)
        filter_expression = date_condition if filter_expression is None else filter_expression & date_condition
    if filter_expression is not None:
        query_kwargs["FilterExpression"] = filter_expression

    items = []
    while True:
        response = ctx.workouts_table.query(**query_kwargs)
        items.extend(response.get("Items", []))
        last_key = response.get("LastEvaluatedKey")
        if not last_key:
            break
        query_kwargs["ExclusiveStartKey"] = last_key

    logger.debug("Fetched %d workout items for user %s", len(items), user_id)
    return [WorkoutRecord.from_item(item) for item in items]


def put_workout(ctx: GatewayContext, record: WorkoutRecord) -> None:
    """
    Persist a new workout record. Never replaces an existing one.

    PutItem {workouts_table} ConditionExpression attribute_not_exists(workout_id)

    Raises:
        botocore.exceptions.ClientError: ConditionalCheckFailedException if the
            workout id is already taken
    """
    ctx.workouts_table.put_item(
        Item=record.to_item(),
        ConditionExpression=Attr(ATTR_WORKOUT_ID).not_exists(),
    )
