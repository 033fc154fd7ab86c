"""
errors.py — jsonhash Error Taxonomy

Standardized error codes for hashing, canonicalization and validation
failures. Every error carries a stable code, the human-readable message and
optional context.
"""

from typing import Any, Optional

__all__ = [
    "JsonHashError",
    "HashMismatchError",
    "MissingHashError",
    "UnsupportedTypeError",
    "InvalidNumberError",
    "TooDeepError",
    "UnsupportedAlgorithmError",
]


def _path_hint(path: str) -> str:
    return f" at {path}" if path else ""


class JsonHashError(Exception):
    """Base class for all jsonhash errors."""
    def __init__(
        self,
        code: str,
        message: str,
        context: Optional[str] = None,
    ):
        self.code = code
        self.message = message
        self.context = context

        full_msg = f"[{code}] {message}"
        if context:
            full_msg += f" Context: {context}"

        super().__init__(full_msg)


# Integrity Errors (E0xx)
class HashMismatchError(JsonHashError):
    """A stored ``_hash`` does not equal the hash computed from the data."""
    def __init__(
        self,
        actual: str,
        expected: str,
        path: Optional[str] = None,
        context: Optional[str] = None,
    ):
        self.actual = actual
        self.expected = expected
        self.path = path
        if path is None:
            message = (
                f'Hash "{actual}" does not match the newly calculated one "{expected}". '
                "Please make sure that all systems are producing the same hashes."
            )
        else:
            message = f'Hash{_path_hint(path)} "{actual}" is wrong. Should be "{expected}".'
        super().__init__("JSONHASH_E001", message, context)


class MissingHashError(JsonHashError):
    """An object inside a tree under validation carries no ``_hash``."""
    def __init__(self, path: str = "", context: Optional[str] = None):
        self.path = path
        super().__init__("JSONHASH_E002", f"Hash{_path_hint(path)} is missing.", context)


# Input Errors (E1xx)
class UnsupportedTypeError(JsonHashError, TypeError):
    """A value outside str/int/float/bool/dict/list was found in the tree."""
    def __init__(self, value: Any, context: Optional[str] = None):
        self.type_name = type(value).__name__
        super().__init__("JSONHASH_E100", f"Unsupported type: {self.type_name}", context)


class InvalidNumberError(JsonHashError, ValueError):
    """NaN/Infinity, or a number outside the configured precision or range."""
    def __init__(self, value: Any, reason: str, context: Optional[str] = None):
        self.value = value
        super().__init__("JSONHASH_E101", reason, context)


class TooDeepError(JsonHashError):
    """The tree nests deeper than ``HashConfig.max_depth``."""
    def __init__(self, max_depth: int, path: str = "", context: Optional[str] = None):
        self.max_depth = max_depth
        self.path = path
        super().__init__(
            "JSONHASH_E102",
            f"Tree{_path_hint(path)} exceeds the maximum nesting depth of {max_depth}.",
            context,
        )


class UnsupportedAlgorithmError(JsonHashError, ValueError):
    """The configured digest algorithm identifier is unknown."""
    def __init__(self, algorithm: str, context: Optional[str] = None):
        self.algorithm = algorithm
        super().__init__(
            "JSONHASH_E103", f"Unsupported hash algorithm: {algorithm}", context
        )
