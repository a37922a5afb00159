"""
Shared utility functions for the lift gateway.

Timestamp conversions and value coercion helpers used across domain modules.
"""

import json
import threading
from datetime import datetime, timedelta, timezone
from decimal import Decimal


EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


def utcnow() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def epoch_millis(moment: datetime) -> int:
    """Convert a datetime to milliseconds since the Unix epoch.

    Args:
        moment: Aware datetime

    Returns:
        Integer milliseconds (e.g. 1704067200000)
    """
    return (moment - EPOCH) // timedelta(milliseconds=1)


class MillisClock:
    """Strictly increasing epoch-millisecond source shared by concurrent callers.

    A reading that repeats or goes backwards is bumped to one past the last
    value handed out.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._last = 0

    def next_millis(self, moment: datetime) -> int:
        millis = epoch_millis(moment)
        with self._lock:
            if millis <= self._last:
                millis = self._last + 1
            self._last = millis
        return millis


def to_iso_millis(moment: datetime) -> str:
    """Format a datetime the way the legacy tracker stores timestamps.

    Args:
        moment: Aware datetime

    Returns:
        ISO-8601 UTC string with millisecond precision, like "2024-01-01T12:00:00.000Z"
    """
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def to_text(value) -> str:
    """Return strings unchanged and JSON-encode anything else."""
    if isinstance(value, str):
        return value
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def from_dynamo(value):
    """Convert DynamoDB ``Decimal`` numbers to ``int``/``float`` recursively."""
    if isinstance(value, Decimal):
        return int(value) if value == value.to_integral_value() else float(value)
    if isinstance(value, list):
        return [from_dynamo(v) for v in value]
    if isinstance(value, dict):
        return {k: from_dynamo(v) for k, v in value.items()}
    return value


def drop_missing(mapping: dict) -> dict:
    """Leave out keys whose value is None, as JSON.stringify does for undefined."""
    return {k: v for k, v in mapping.items() if v is not None}
