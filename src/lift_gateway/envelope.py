"""
Envelope codec.

Every operation returns a string. Store-backed operations return the JSON
text of a ``{"success": ...}`` envelope so failures travel as data. The
upstream GraphQL layer then encodes that string once more as a JSON scalar,
so callers parse twice: once for the scalar, once for the domain JSON.

JSON text is compact and keeps non-ASCII characters as-is, byte-compatible
with what the front end already parses.
"""

import json


def encode_json(value) -> str:
    """Serialize a domain value to compact JSON text."""
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False)


def success(**payload) -> str:
    """Encode a success envelope, e.g. ``{"success":true,"workoutId":"..."}``."""
    return encode_json({"success": True, **payload})


def failure(error: str) -> str:
    """Encode a soft-failure envelope."""
    return encode_json({"success": False, "error": error})


def encode_transport(result: str) -> str:
    """Wrap an operation result as the transport's opaque string scalar."""
    return json.dumps(result, ensure_ascii=False)


def decode_transport(scalar: str, returns_json: bool = True):
    """
    Unwrap a transport scalar back to the domain value.

    Args:
        scalar: String produced by ``encode_transport``
        returns_json: Whether the inner string is JSON text (False for plain-text results)

    Returns:
        Domain object (or plain text when ``returns_json`` is False)
    """
    inner = json.loads(scalar)
    if not returns_json:
        return inner
    return json.loads(inner)
