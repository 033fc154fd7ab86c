"""
validator.py — Integrity check for hashed JSON trees

Recomputes every hash on an independent copy of the tree and compares it
with the hashes stored in the tree. Problems are raised with their tree path
(``/parent/0/child``; the root has the empty path):

- a missing ``_hash`` (absent or ``null``) is reported as soon as the object
  is reached (depth-first, key order then array index order);
- a wrong ``_hash`` is reported at the deepest object on its branch whose
  stored hash is wrong, i.e. the nearest object containing the changed data.
  This is not shallowest-first: with wrong hashes at both the root and
  ``/parent``, ``/parent`` is reported.
"""

from __future__ import annotations
import logging
from typing import List, Optional

from .config import ApplyConfig, HashConfig
from .errors import HashMismatchError, MissingHashError, TooDeepError, UnsupportedTypeError
from .hasher import JsonHash
from .values import HASH_KEY, JsonObject, JsonValue

logger = logging.getLogger(__name__)

_RECOMPUTE = ApplyConfig(
    in_place=False,
    update_existing_hashes=True,
    recursive=True,
    throw_on_wrong_hash=False,
)


def validate_hashes(json_obj: JsonObject, json_hash: JsonHash) -> None:
    """Raise if any object in ``json_obj`` has a missing or wrong hash.

    Raises:
        MissingHashError: If an object carries no ``_hash``.
        HashMismatchError: If a stored hash differs from the recomputed one.
    """
    if not isinstance(json_obj, dict):
        raise UnsupportedTypeError(json_obj, context="the root of a tree must be an object")

    logger.debug("Validating hashes")
    json_should = json_hash.apply(
        _drop_null_hashes(json_obj, json_hash.config.max_depth), _RECOMPUTE
    )
    _validate_object(json_obj, json_should, "", 0, json_hash.config.max_depth)
    logger.debug("Hashes are valid: %s", json_obj[HASH_KEY])


def validate(json_obj: JsonObject, config: Optional[HashConfig] = None) -> None:
    """Validate the hashes of ``json_obj`` with ``config`` or the defaults."""
    validate_hashes(json_obj, JsonHash(config))


def _drop_null_hashes(value: JsonValue, max_depth: int, depth: int = 0) -> JsonValue:
    if isinstance(value, dict):
        if depth >= max_depth:
            raise TooDeepError(max_depth)
        return {
            key: _drop_null_hashes(child, max_depth, depth + 1)
            for key, child in value.items()
            if not (key == HASH_KEY and child is None)
        }
    if isinstance(value, list):
        if depth >= max_depth:
            raise TooDeepError(max_depth)
        return [_drop_null_hashes(child, max_depth, depth + 1) for child in value]
    return value


def _validate_object(
    json_is: JsonObject,
    json_should: JsonObject,
    path: str,
    depth: int,
    max_depth: int,
) -> None:
    if depth >= max_depth:
        raise TooDeepError(max_depth, path)

    actual_hash = json_is.get(HASH_KEY)
    expected_hash = json_should[HASH_KEY]

    if actual_hash is None:
        raise MissingHashError(path)

    # Children first: the deepest wrong hash on a branch is reported.
    for key, value in json_is.items():
        if key == HASH_KEY:
            continue
        if isinstance(value, dict):
            _validate_object(value, json_should[key], f"{path}/{key}", depth + 1, max_depth)
        elif isinstance(value, list):
            _validate_list(value, json_should[key], f"{path}/{key}", depth + 1, max_depth)

    if actual_hash != expected_hash:
        raise HashMismatchError(actual_hash, expected_hash, path=path)


def _validate_list(
    values_is: List[JsonValue],
    values_should: List[JsonValue],
    path: str,
    depth: int,
    max_depth: int,
) -> None:
    if depth >= max_depth:
        raise TooDeepError(max_depth, path)

    for index, element in enumerate(values_is):
        if isinstance(element, dict):
            _validate_object(
                element, values_should[index], f"{path}/{index}", depth + 1, max_depth
            )
        elif isinstance(element, list):
            _validate_list(
                element, values_should[index], f"{path}/{index}", depth + 1, max_depth
            )
