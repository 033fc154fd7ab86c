"""
canonical_json.py — Canonical encoding of hashing views

Renders the hashing view of an object (``_hash`` removed, child objects
already replaced by their hashes) into the exact string that gets digested:

- Object keys sorted by Unicode code point
- No insignificant whitespace
- Strings double-quoted; only internal double quotes are escaped
- Booleans as ``true`` / ``false``
- Integers as digits, floats positional with a fractional part (``1.0``)

IMPORTANT: Every implementation producing hashes for the same data MUST
render identical canonical strings, otherwise stored hashes stop validating
across systems.
"""

from __future__ import annotations
from typing import Any, Dict

from .errors import UnsupportedTypeError
from .numbers import format_number


def encode_string(value: str) -> str:
    """Quote a string, escaping internal double quotes."""
    escaped = value.replace('"', '\\"')
    return f'"{escaped}"'


def encode_value(value: Any) -> str:
    """Render a single value of a hashing view."""
    if isinstance(value, str):
        return encode_string(value)
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return format_number(value)
    if isinstance(value, list):
        return "[" + ",".join(encode_value(v) for v in value) + "]"
    if isinstance(value, dict):
        return canonical_dumps(value)
    raise UnsupportedTypeError(value)


def canonical_dumps(obj: Dict[str, Any]) -> str:
    """Return the canonical string with sorted keys and no whitespace."""
    for key in obj:
        if not isinstance(key, str):
            raise UnsupportedTypeError(key, context="object keys must be strings")
    return "{" + ",".join(
        f"{encode_string(key)}:{encode_value(obj[key])}" for key in sorted(obj)
    ) + "}"


def canonical_bytes(obj: Dict[str, Any]) -> bytes:
    """Return the canonical string as UTF-8 bytes."""
    return canonical_dumps(obj).encode("utf-8")
