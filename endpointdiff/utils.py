"""Utility functions for EndpointDiff."""

from __future__ import annotations

import json
import math
from typing import Any, Optional


def get_type_name(value: Any) -> str:
    """Get a friendly JSON type name for a value."""
    if value is None:
        return "null"
    elif isinstance(value, bool):
        return "boolean"
    elif isinstance(value, int):
        return "integer"
    elif isinstance(value, float):
        return "number"
    elif isinstance(value, str):
        return "string"
    elif isinstance(value, (list, tuple)):
        return "array"
    elif isinstance(value, dict):
        return "object"
    else:
        return type(value).__name__


# Integral floats at or above this magnitude keep exponent form (1e+21)
EXPONENT_THRESHOLD = 1e21


def normalize_number(value: int | float) -> int | float:
    """
    Collapse an integral float to an int.

    `1` and `1.0` decoded from different endpoints then render identically.
    """
    if (
        isinstance(value, float)
        and math.isfinite(value)
        and value.is_integer()
        and abs(value) < EXPONENT_THRESHOLD
    ):
        return int(value)
    return value


def format_number(value: int | float) -> str:
    """Render a number as text, e.g. 1.0 -> "1", 1.5 -> "1.5", 1e21 -> "1e+21"."""
    value = normalize_number(value)
    return repr(value) if isinstance(value, float) else str(value)


def normalize_numbers(value: Any) -> Any:
    """Apply normalize_number to every number nested in a JSON value."""
    if isinstance(value, dict):
        return {k: normalize_numbers(v) for k, v in value.items()}
    elif isinstance(value, (list, tuple)):
        return [normalize_numbers(v) for v in value]
    elif isinstance(value, float):
        return normalize_number(value)
    return value


def to_compact_json(value: Any) -> str:
    """Serialize a value as compact JSON with sorted keys and normalized numbers."""
    return json.dumps(
        normalize_numbers(value),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
        default=str,
    )


def merge_headers(
    general: Optional[dict[str, str]],
    specific: Optional[dict[str, str]]
) -> dict[str, str]:
    """
    Merge two header mappings.
    Specific headers override general ones key by key.
    """
    merged = dict(general or {})
    merged.update(specific or {})
    return merged
