"""
config.py — jsonhash configuration

Immutable configuration objects for hashing. ``HashConfig`` describes how a
hash is produced (length, algorithm, number handling); ``ApplyConfig``
describes how hashes are written into a given tree for a single call.

Configuration can also be read from a JSON file:

    {
      "hash":   {"hash_length": 22, "hash_algorithm": "SHA-256"},
      "number": {"precision": 0.001, "throw_on_range_error": true},
      "apply":  {"recursive": false}
    }
"""

from __future__ import annotations
import dataclasses
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Tuple

from .digest import encoded_length


@dataclass(frozen=True)
class NumberConfig:
    """Number handling for hashing.

    Hashing numbers must be consistent across platforms. Rounding noise can
    make numbers that are considered equal produce different hashes; with
    ``throw_on_range_error`` set, such numbers are rejected instead of
    silently hashed.
    """
    precision: float = 0.001
    max_num: float = 1000 * 1000 * 1000
    min_num: float = -1000 * 1000 * 1000
    throw_on_range_error: bool = False

    def __post_init__(self) -> None:
        if self.precision <= 0:
            raise ValueError(f"precision must be positive, got {self.precision}")
        if self.min_num > self.max_num:
            raise ValueError(
                f"min_num ({self.min_num}) must not exceed max_num ({self.max_num})"
            )

    def copy_with(self, **changes: Any) -> "NumberConfig":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class HashConfig:
    """How hashes are computed."""
    hash_length: int = 22
    hash_algorithm: str = "SHA-256"
    number_config: NumberConfig = field(default_factory=NumberConfig)
    max_depth: int = 250

    def __post_init__(self) -> None:
        if self.hash_length < 1:
            raise ValueError(f"hash_length must be at least 1, got {self.hash_length}")
        max_length = encoded_length(self.hash_algorithm)
        if self.hash_length > max_length:
            raise ValueError(
                f"hash_length must not exceed {max_length} for {self.hash_algorithm}, "
                f"got {self.hash_length}"
            )
        if self.max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {self.max_depth}")

    def copy_with(self, **changes: Any) -> "HashConfig":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


@dataclass(frozen=True)
class ApplyConfig:
    """Options for writing hashes into a tree.

    Attributes:
        in_place: Write hashes into the given tree instead of a deep copy.
        update_existing_hashes: Recompute hashes of objects that already
            carry a ``_hash``. When false, such objects and everything below
            them are left untouched.
        recursive: Recompute child hashes. When false, only the root hash is
            recomputed and existing child hashes are used verbatim.
        floating_point_precision: Decimal digits kept when hashing floats.
        throw_on_wrong_hash: Raise ``HashMismatchError`` when an existing
            hash differs from the recomputed one.
    """
    in_place: bool = False
    update_existing_hashes: bool = True
    recursive: bool = True
    floating_point_precision: int = 10
    throw_on_wrong_hash: bool = False

    def __post_init__(self) -> None:
        if self.floating_point_precision < 0:
            raise ValueError(
                "floating_point_precision must not be negative, "
                f"got {self.floating_point_precision}"
            )

    def copy_with(self, **changes: Any) -> "ApplyConfig":
        return dataclasses.replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return dataclasses.asdict(self)


_SECTIONS = ("hash", "number", "apply")


def _section(raw: Dict[str, Any], name: str, cls: type) -> Dict[str, Any]:
    values = raw.get(name, {})
    if not isinstance(values, dict):
        raise ValueError(f"Config section '{name}' must be an object")
    allowed = {f.name for f in dataclasses.fields(cls)} - {"number_config"}
    for key in values:
        if key not in allowed:
            raise ValueError(f"Unknown key '{key}' in config section '{name}'")
    return values


def config_from_dict(raw: Dict[str, Any]) -> Tuple[HashConfig, ApplyConfig]:
    """Build ``(HashConfig, ApplyConfig)`` from a parsed config document."""
    for key in raw:
        if key not in _SECTIONS:
            raise ValueError(f"Unknown config section '{key}'")

    number_config = NumberConfig(**_section(raw, "number", NumberConfig))
    hash_config = HashConfig(
        number_config=number_config, **_section(raw, "hash", HashConfig)
    )
    apply_config = ApplyConfig(**_section(raw, "apply", ApplyConfig))
    return hash_config, apply_config


def load_config(path: str | Path) -> Tuple[HashConfig, ApplyConfig]:
    """Read a JSON config file.

    Args:
        path: Path to the config file.

    Returns:
        Tuple[HashConfig, ApplyConfig]: Configs with file values applied over
        the defaults.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the file is not valid JSON or holds unknown keys.
    """
    raw = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(raw, dict):
        raise ValueError("Config file must contain a JSON object")
    return config_from_dict(raw)
