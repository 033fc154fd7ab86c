"""
digest.py — Hash strings for canonical text

A hash is the cryptographic digest of the UTF-8 bytes of a canonical string,
encoded as URL-safe base64 without padding and cut to a fixed length
(22 characters by default, about 132 bits of SHA-256).
"""

from __future__ import annotations
import base64
from typing import Callable, Dict

from cryptography.hazmat.primitives import hashes

from .errors import UnsupportedAlgorithmError

DEFAULT_ALGORITHM = "SHA-256"
DEFAULT_HASH_LENGTH = 22

_ALGORITHMS: Dict[str, Callable[[], hashes.HashAlgorithm]] = {
    "SHA-256": hashes.SHA256,
    "SHA-384": hashes.SHA384,
    "SHA-512": hashes.SHA512,
    "SHA3-256": hashes.SHA3_256,
    "SHA3-512": hashes.SHA3_512,
    "BLAKE2b": lambda: hashes.BLAKE2b(64),
}


def supported_algorithms() -> list[str]:
    return sorted(_ALGORITHMS)


def _algorithm(algorithm: str) -> hashes.HashAlgorithm:
    factory = _ALGORITHMS.get(algorithm)
    if factory is None:
        raise UnsupportedAlgorithmError(
            algorithm, context=f"supported: {', '.join(supported_algorithms())}"
        )
    return factory()


def encoded_length(algorithm: str = DEFAULT_ALGORITHM) -> int:
    """Number of characters in the unpadded base64 form of a full digest."""
    return (_algorithm(algorithm).digest_size * 4 + 2) // 3


def digest_bytes(data: bytes, algorithm: str = DEFAULT_ALGORITHM) -> bytes:
    """Return the raw digest of ``data``.

    Raises:
        UnsupportedAlgorithmError: If ``algorithm`` is not a known identifier.
    """
    ctx = hashes.Hash(_algorithm(algorithm))
    ctx.update(data)
    return ctx.finalize()


def calc_hash(
    text: str,
    hash_length: int = DEFAULT_HASH_LENGTH,
    algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """Hash a string into a URL-safe base64 identifier.

    Args:
        text: Canonical string to hash.
        hash_length: Number of characters to keep.
        algorithm: Digest algorithm identifier, ``SHA-256`` by default.

    Returns:
        str: URL-safe, unpadded base64 of the digest, cut to ``hash_length``.
    """
    raw = digest_bytes(text.encode("utf-8"), algorithm)
    encoded = base64.urlsafe_b64encode(raw).decode("ascii").rstrip("=")
    return encoded[:hash_length]
