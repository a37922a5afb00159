"""
Workout record service — list and append over the legacy workouts table.

Writers always store ``sets`` as a JSON string; readers accept either a
string or a native list (the store SDK normalizes on read).
"""

import json
import logging
from typing import Optional

from lift_gateway import envelope
from lift_gateway.sdk.client import GatewayContext
from lift_gateway.sdk import store as sdk_store
from lift_gateway.sdk.types import WORKOUT_ID_SEPARATOR
from lift_gateway.utils import MillisClock, drop_missing, to_iso_millis, utcnow

logger = logging.getLogger(__name__)

# Timestamp component of workout ids; unique within this process.
workout_clock = MillisClock()


def get_legacy_workouts(
    ctx: GatewayContext,
    user_id: str,
    exercise: Optional[str] = None,
    date: Optional[str] = None,
) -> str:
    """List a user's workouts.

    Args:
        user_id: Owner of the records
        exercise: Restrict to one exercise (optional)
        date: Restrict to one date, YYYY-MM-DD (optional)

    Returns:
        Envelope JSON: {success, workouts: [{exercise, date, sets}]}
    """
    logger.info("Fetching workouts for user %s", user_id)
    try:
        records = sdk_store.query_workouts(ctx, user_id, exercise=exercise, date=date)
    except Exception as e:
        logger.error(f"Error fetching workouts for {user_id}: {e}", exc_info=True)
        return envelope.failure("Failed to fetch workouts")

    workouts = [
        drop_missing({"exercise": r.exercise, "date": r.date, "sets": r.sets})
        for r in records
    ]
    logger.info("Returning %d workouts for user %s", len(workouts), user_id)
    return envelope.success(workouts=workouts)


def make_workout_id(exercise: str, date: str, millis: int) -> str:
    """Build ``exercise#date#epochMillis``."""
    return WORKOUT_ID_SEPARATOR.join([str(exercise), str(date), str(millis)])


def save_legacy_workout(ctx: GatewayContext, user_id: str, workout) -> str:
    """Append one exercise entry to a user's history.

    Args:
        user_id: Owner of the record
        workout: {exercise, date, sets} as a mapping or JSON text; all three are required

    Returns:
        Envelope JSON: {success, workoutId}
    """
    logger.info("Saving workout for user %s", user_id)
    try:
        data = json.loads(workout) if isinstance(workout, str) else workout
        now = utcnow()
        record = sdk_store.WorkoutRecord(
            user_id=user_id,
            workout_id=make_workout_id(data["exercise"], data["date"], workout_clock.next_millis(now)),
            exercise=data["exercise"],
            date=data["date"],
            sets=data["sets"],
            created_at=to_iso_millis(now),
        )
        sdk_store.put_workout(ctx, record)
    except Exception as e:
        logger.error(f"Error saving workout for {user_id}: {e}", exc_info=True)
        return envelope.failure("Failed to save workout")

    logger.info("Saved workout %s", record.workout_id)
    return envelope.success(workoutId=record.workout_id)
