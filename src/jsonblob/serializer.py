"""Canonical JSON serialization for envelope payloads.

Values are serialized as compact UTF-8 JSON: no whitespace between tokens,
non-ASCII text kept verbatim, and dict insertion order preserved.
"""

from __future__ import annotations

import json
from typing import Any, Union

from .exceptions import EncodeError, ParseError

JsonValue = Union[None, bool, int, float, str, "list[JsonValue]", "dict[str, JsonValue]"]

_SEPARATORS = (",", ":")


def _reject_constant(name: str) -> float:
    raise ParseError(f"Payload contains non-standard JSON constant: {name}")


def serialize(value: Any) -> bytes:
    """Serialize a JSON value to canonical bytes.

    Args:
        value: JSON-compatible value (None, bool, int, float, str, list, dict)

    Returns:
        Compact UTF-8 encoded JSON document

    Raises:
        EncodeError: If value is outside the JSON data model or contains
            a non-finite float

    Example:
        >>> serialize({"hello": "world"})
        b'{"hello":"world"}'
    """
    try:
        data = json.dumps(
            value,
            separators=_SEPARATORS,
            ensure_ascii=False,
            allow_nan=False,
        ).encode("utf-8")
    except (TypeError, ValueError, RecursionError) as e:
        raise EncodeError(f"Value is not serializable as JSON: {e}") from e

    return data


def deserialize(data: bytes) -> JsonValue:
    """Parse canonical bytes back into a JSON value.

    Args:
        data: UTF-8 encoded JSON document

    Returns:
        Decoded value

    Raises:
        ParseError: If data is not valid UTF-8 JSON

    Example:
        >>> deserialize(b'{"hello":"world"}')
        {'hello': 'world'}
    """
    try:
        text = data.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ParseError(f"Payload is not valid UTF-8: {e}") from e

    try:
        return json.loads(text, parse_constant=_reject_constant)
    except RecursionError as e:
        raise ParseError("Payload nesting is too deep to parse") from e
    except ValueError as e:
        # JSONDecodeError, and int literals past the interpreter's digit limit.
        raise ParseError(f"Payload is not valid JSON: {e}") from e
