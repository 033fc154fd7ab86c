import re

import pytest

from jsonhash.digest import calc_hash, digest_bytes, encoded_length, supported_algorithms
from jsonhash.errors import UnsupportedAlgorithmError

URL_SAFE = re.compile(r"^[A-Za-z0-9_-]+$")


def test_known_vectors():
    assert calc_hash('{"key":"value"}') == "5Dq88zdSRIOcAS-WM_lYYt"
    assert calc_hash('{"key":1}') == "t4HVsGBJblqznOBwy6IeLt"
    assert calc_hash("{}") == "RBNvo1WzZ4oRRq0W9-hknp"


def test_default_length_and_alphabet():
    h = calc_hash('{"a":"b"}')
    assert len(h) == 22
    assert URL_SAFE.match(h)


def test_is_deterministic():
    assert calc_hash("some text") == calc_hash("some text")


def test_shorter_hash_is_a_prefix():
    assert calc_hash('{"key":"value"}', hash_length=10) == "5Dq88zdSRI"


def test_long_hash_has_no_padding():
    h = calc_hash('{"key":"value"}', hash_length=100)
    assert len(h) == 43
    assert "=" not in h


def test_sha256_digest_is_32_bytes():
    assert len(digest_bytes(b"abc")) == 32


@pytest.mark.parametrize("algorithm", ["SHA-384", "SHA-512", "SHA3-256", "SHA3-512", "BLAKE2b"])
def test_other_algorithms(algorithm):
    h = calc_hash('{"key":"value"}', algorithm=algorithm)
    assert len(h) == 22
    assert URL_SAFE.match(h)
    assert h != "5Dq88zdSRIOcAS-WM_lYYt"


def test_unknown_algorithm():
    with pytest.raises(UnsupportedAlgorithmError) as exc_info:
        calc_hash("x", algorithm="MD5")
    assert "MD5" in str(exc_info.value)
    assert "SHA-256" in exc_info.value.context


def test_supported_algorithms_lists_default():
    assert "SHA-256" in supported_algorithms()


@pytest.mark.parametrize("algorithm,length", [
    ("SHA-256", 43),
    ("SHA-384", 64),
    ("SHA-512", 86),
    ("SHA3-256", 43),
    ("SHA3-512", 86),
    ("BLAKE2b", 86),
])
def test_encoded_length(algorithm, length):
    assert encoded_length(algorithm) == length
    assert len(calc_hash("x", hash_length=1000, algorithm=algorithm)) == length
