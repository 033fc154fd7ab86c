import os
import subprocess
import sys
from pathlib import Path

import jsonhash
from jsonhash import (
    JsonHash, HashConfig, ApplyConfig, NumberConfig, apply_hashes,
    compute_digest, validate, JsonHashError
)


def test_public_api_exports():
    for name in ("JsonHash", "apply_hashes", "apply_hashes_to_text", "compute_digest", "validate"):
        assert name in jsonhash.__all__
    for name in jsonhash.__all__:
        assert hasattr(jsonhash, name), name


def test_version():
    assert jsonhash.__version__ == "1.0.0"


def test_facade_round_trip():
    hashed = JsonHash(HashConfig()).apply({"a": 1, "b": 2}, ApplyConfig())
    assert hashed["_hash"] == "QyWM_3g_5wNtikMDP4MK38"
    validate(hashed)
    assert compute_digest('{"a":1,"b":2}') == hashed["_hash"]
    assert apply_hashes({"a": 1, "b": 2}) == hashed
    assert NumberConfig().precision == 0.001


def test_errors_share_a_base():
    assert issubclass(jsonhash.HashMismatchError, JsonHashError)
    assert issubclass(jsonhash.MissingHashError, JsonHashError)


def test_module_entry_point():
    src_dir = Path(jsonhash.__file__).resolve().parents[1]
    env = {**os.environ, "PYTHONPATH": str(src_dir)}
    result = subprocess.run(
        [sys.executable, "-m", "jsonhash", "digest", '{"key":"value"}'],
        capture_output=True,
        text=True,
        encoding="utf-8",
        env=env,
    )
    assert result.returncode == 0
    assert result.stdout.strip() == "5Dq88zdSRIOcAS-WM_lYYt"
