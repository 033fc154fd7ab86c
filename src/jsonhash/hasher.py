"""
hasher.py — Writes content hashes into JSON trees

Every object of a tree receives a ``_hash`` field computed bottom-up:
children are hashed first, then the parent is hashed over a view of itself
in which child objects are replaced by their ``_hash`` and arrays are
flattened (nested objects become their hash, scalars their canonical
string form). The ``_hash`` field itself never contributes to its own
object's hash.

Example:
    from jsonhash import JsonHash

    hashed = JsonHash().apply({"key": "value"})
    assert hashed["_hash"] == "5Dq88zdSRIOcAS-WM_lYYt"
"""

from __future__ import annotations
import json
import logging
from typing import Any, Dict, List, Optional

from .canonical_json import canonical_dumps
from .config import ApplyConfig, HashConfig
from .digest import calc_hash
from .errors import HashMismatchError, TooDeepError, UnsupportedTypeError
from .numbers import convert_number, format_number
from .values import HASH_KEY, JsonObject, JsonValue, copy_json

logger = logging.getLogger(__name__)


class JsonHash:
    """Adds hashes to JSON objects."""

    def __init__(self, config: Optional[HashConfig] = None):
        self.config = config if config is not None else HashConfig()

    def apply(
        self,
        json_obj: JsonObject,
        apply_config: Optional[ApplyConfig] = None,
    ) -> JsonObject:
        """Write hashes into a JSON object.

        Args:
            json_obj: Root object of the tree.
            apply_config: Per-call options; defaults to ``ApplyConfig()``.

        Returns:
            JsonObject: ``json_obj`` itself when ``in_place`` is set,
            otherwise an independent deep copy carrying the hashes.

        Raises:
            UnsupportedTypeError: If the root is not an object or the tree
                holds a value of an unsupported type.
            InvalidNumberError: If a number cannot be hashed reliably.
            HashMismatchError: If ``throw_on_wrong_hash`` is set and an
                existing hash differs from the recomputed one.
            TooDeepError: If the tree nests deeper than ``max_depth``.
        """
        apply_config = apply_config if apply_config is not None else ApplyConfig()
        if not isinstance(json_obj, dict):
            raise UnsupportedTypeError(json_obj, context="the root of a tree must be an object")

        copy = json_obj if apply_config.in_place else copy_json(json_obj, self.config.max_depth)
        self._add_hashes_to_object(copy, apply_config, 0, "")
        return copy

    def apply_to_string(
        self,
        json_string: str,
        apply_config: Optional[ApplyConfig] = None,
    ) -> str:
        """Write hashes into JSON text and return compact JSON text."""
        json_obj = json.loads(json_string)
        apply_config = (apply_config or ApplyConfig()).copy_with(in_place=True)
        hashed = self.apply(json_obj, apply_config)
        return json.dumps(hashed, separators=(",", ":"), ensure_ascii=False)

    def calc_hash(self, text: str) -> str:
        """Hash a string with the configured algorithm and length."""
        return calc_hash(text, self.config.hash_length, self.config.hash_algorithm)

    def validate(self, json_obj: JsonObject) -> None:
        """Raise if the hashes in ``json_obj`` are missing or wrong."""
        from .validator import validate_hashes
        validate_hashes(json_obj, self)

    # ######################
    # Private
    # ######################

    def _check_depth(self, depth: int, path: str) -> None:
        if depth >= self.config.max_depth:
            raise TooDeepError(self.config.max_depth, path)

    def _add_hashes_to_object(
        self,
        obj: JsonObject,
        apply_config: ApplyConfig,
        depth: int,
        path: str,
    ) -> None:
        self._check_depth(depth, path)

        if not apply_config.update_existing_hashes and HASH_KEY in obj:
            logger.debug("Keeping existing hash at %s", path or "/")
            return

        # Hash children first
        for key, value in obj.items():
            if key == HASH_KEY:
                continue
            if isinstance(value, dict):
                if not apply_config.recursive and HASH_KEY in value:
                    continue
                self._add_hashes_to_object(value, apply_config, depth + 1, f"{path}/{key}")
            elif isinstance(value, list):
                self._process_list(value, apply_config, depth + 1, f"{path}/{key}")

        obj_to_hash: Dict[str, Any] = {}
        for key, value in obj.items():
            if key == HASH_KEY:
                continue
            if isinstance(value, dict):
                obj_to_hash[key] = self._child_hash(value, f"{path}/{key}")
            elif isinstance(value, list):
                obj_to_hash[key] = self._flatten_list(value, apply_config, f"{path}/{key}")
            elif isinstance(value, (str, bool)):
                obj_to_hash[key] = value
            elif isinstance(value, (int, float)):
                obj_to_hash[key] = convert_number(
                    value,
                    apply_config.floating_point_precision,
                    self.config.number_config,
                )
            else:
                raise UnsupportedTypeError(value)

        new_hash = self.calc_hash(canonical_dumps(obj_to_hash))

        if apply_config.throw_on_wrong_hash:
            old_hash = obj.get(HASH_KEY)
            if old_hash is not None and old_hash != new_hash:
                raise HashMismatchError(
                    old_hash, new_hash, context=f"object at {path}" if path else None
                )

        logger.debug("Hashed object at %s: %s", path or "/", new_hash)
        obj[HASH_KEY] = new_hash

    def _process_list(
        self,
        values: List[JsonValue],
        apply_config: ApplyConfig,
        depth: int,
        path: str,
    ) -> None:
        self._check_depth(depth, path)
        for index, element in enumerate(values):
            if isinstance(element, dict):
                if not apply_config.recursive and HASH_KEY in element:
                    continue
                self._add_hashes_to_object(element, apply_config, depth + 1, f"{path}/{index}")
            elif isinstance(element, list):
                self._process_list(element, apply_config, depth + 1, f"{path}/{index}")

    def _flatten_list(
        self,
        values: List[JsonValue],
        apply_config: ApplyConfig,
        path: str,
    ) -> List[Any]:
        flattened: List[Any] = []
        for index, element in enumerate(values):
            if isinstance(element, dict):
                flattened.append(self._child_hash(element, f"{path}/{index}"))
            elif isinstance(element, list):
                flattened.append(self._flatten_list(element, apply_config, f"{path}/{index}"))
            elif isinstance(element, str):
                flattened.append(element)
            elif isinstance(element, bool):
                flattened.append("true" if element else "false")
            elif isinstance(element, (int, float)):
                number = convert_number(
                    element,
                    apply_config.floating_point_precision,
                    self.config.number_config,
                )
                flattened.append(format_number(number))
            else:
                raise UnsupportedTypeError(element)
        return flattened

    @staticmethod
    def _child_hash(child: JsonObject, path: str) -> str:
        child_hash = child.get(HASH_KEY)
        if not isinstance(child_hash, str):
            raise UnsupportedTypeError(child_hash, context=f"_hash at {path} must be a string")
        return child_hash


def compute_digest(text: str, config: Optional[HashConfig] = None) -> str:
    """Hash a raw canonical string."""
    return JsonHash(config).calc_hash(text)


def apply_hashes(
    json_obj: JsonObject,
    apply_config: Optional[ApplyConfig] = None,
    config: Optional[HashConfig] = None,
) -> JsonObject:
    """Write hashes into ``json_obj``; see ``JsonHash.apply``."""
    return JsonHash(config).apply(json_obj, apply_config)


def apply_hashes_to_text(json_string: str, config: Optional[HashConfig] = None) -> str:
    """Decode JSON text, write hashes and encode it again."""
    return JsonHash(config).apply_to_string(json_string)


def add_hashes(
    json_obj: JsonObject,
    *,
    in_place: bool = False,
    update_existing_hashes: bool = True,
    recursive: bool = True,
    floating_point_precision: int = 10,
    throw_on_wrong_hash: bool = False,
    config: Optional[HashConfig] = None,
) -> JsonObject:
    """Keyword form of ``apply_hashes``."""
    apply_config = ApplyConfig(
        in_place=in_place,
        update_existing_hashes=update_existing_hashes,
        recursive=recursive,
        floating_point_precision=floating_point_precision,
        throw_on_wrong_hash=throw_on_wrong_hash,
    )
    return JsonHash(config).apply(json_obj, apply_config)
