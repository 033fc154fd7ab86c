"""
values.py — JSON value model

A tree is built from Python's JSON-native types: ``dict`` (objects with
string keys), ``list`` (arrays), ``str``, ``int``, ``float`` and ``bool``.
``None`` and any other runtime type are rejected with
``UnsupportedTypeError``.
"""

from __future__ import annotations
from typing import Any, Dict, List, Union

from .errors import TooDeepError, UnsupportedTypeError

JsonScalar = Union[str, int, float, bool]
JsonValue = Union[JsonScalar, List["JsonValue"], Dict[str, "JsonValue"]]
JsonObject = Dict[str, JsonValue]

HASH_KEY = "_hash"


def is_basic_type(value: Any) -> bool:
    """Return True for str, int, float and bool."""
    return isinstance(value, (str, bool, int, float))


def copy_json(obj: JsonObject, max_depth: int = 250, _depth: int = 0) -> JsonObject:
    """Deep-copy an object, rejecting unsupported value types."""
    if _depth >= max_depth:
        raise TooDeepError(max_depth)
    copy: JsonObject = {}
    for key, value in obj.items():
        if isinstance(value, list):
            copy[key] = copy_list(value, max_depth, _depth + 1)
        elif is_basic_type(value):
            copy[key] = value
        elif isinstance(value, dict):
            copy[key] = copy_json(value, max_depth, _depth + 1)
        else:
            raise UnsupportedTypeError(value)
    return copy


def copy_list(values: List[JsonValue], max_depth: int = 250, _depth: int = 0) -> List[JsonValue]:
    """Deep-copy an array, rejecting unsupported value types."""
    if _depth >= max_depth:
        raise TooDeepError(max_depth)
    copy: List[JsonValue] = []
    for element in values:
        if isinstance(element, list):
            copy.append(copy_list(element, max_depth, _depth + 1))
        elif is_basic_type(element):
            copy.append(element)
        elif isinstance(element, dict):
            copy.append(copy_json(element, max_depth, _depth + 1))
        else:
            raise UnsupportedTypeError(element)
    return copy
