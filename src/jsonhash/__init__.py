"""jsonhash public API.

Deterministic content hashes written into every object of a JSON tree, and
validation of trees carrying such hashes.

Example:
    from jsonhash import apply_hashes, validate

    hashed = apply_hashes({"key": "value", "child": {"key": "value"}})
    print(hashed["_hash"])
    validate(hashed)
"""

from .config import ApplyConfig, HashConfig, NumberConfig, load_config
from .canonical_json import canonical_bytes, canonical_dumps
from .digest import calc_hash
from .errors import (
    JsonHashError,
    HashMismatchError,
    MissingHashError,
    UnsupportedTypeError,
    InvalidNumberError,
    TooDeepError,
    UnsupportedAlgorithmError,
)
from .hasher import (
    JsonHash,
    add_hashes,
    apply_hashes,
    apply_hashes_to_text,
    compute_digest,
)
from .validator import validate

__version__ = "1.0.0"
__all__ = [
    "JsonHash",
    "HashConfig",
    "ApplyConfig",
    "NumberConfig",
    "load_config",
    "apply_hashes",
    "apply_hashes_to_text",
    "add_hashes",
    "compute_digest",
    "validate",
    "calc_hash",
    "canonical_dumps",
    "canonical_bytes",
    "JsonHashError",
    "HashMismatchError",
    "MissingHashError",
    "UnsupportedTypeError",
    "InvalidNumberError",
    "TooDeepError",
    "UnsupportedAlgorithmError",
]
