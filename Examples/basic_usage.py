#!/usr/bin/env python3
"""
basic_usage.py — Walkthrough of the jsonhash API

Run:
  PYTHONPATH=src python Examples/basic_usage.py
"""

import json

from jsonhash import ApplyConfig, JsonHash, JsonHashError, add_hashes


def main() -> None:
    jh = JsonHash()

    print("Create a json structure")
    data = {
        "a": "0",
        "b": "1",
        "child": {"d": 3, "e": 4},
    }

    print("Add hashes to the json structure")
    data = jh.apply(data)
    print(json.dumps(data, indent=2))

    print("Set a floating point precision to handle rounding differences")
    precise = ApplyConfig(floating_point_precision=5)
    json0 = jh.apply({"a": 1.000001}, precise)
    json1 = jh.apply({"a": 1.000002}, precise)
    print("Both objects have the same hash because the difference is below the precision")
    assert json0["_hash"] == json1["_hash"]

    print('Use the "in_place" option to modify the input object')
    data = {"a": 1, "b": 2}
    jh.apply(data, ApplyConfig(in_place=True))
    assert data["_hash"] == "QyWM_3g_5wNtikMDP4MK38"

    print('Set "recursive=False" to leave child hashes untouched')
    data = add_hashes({"a": 1, "b": 2, "child": {"_hash": "ABC123"}}, recursive=False)
    assert data["child"]["_hash"] == "ABC123"

    print('Set "recursive=True" (default) to recalculate child hashes')
    data = add_hashes({"a": 1, "b": 2, "child": {"_hash": "ABC123"}}, recursive=True)
    assert data["child"]["_hash"] == "RBNvo1WzZ4oRRq0W9-hknp"

    print('Set "update_existing_hashes=False" to create missing hashes only')
    data = {
        "a": 1,
        "b": 2,
        "child": {"c": 3},
        "child2": {"_hash": "ABC123", "d": 4},
    }
    data = jh.apply(data, ApplyConfig(update_existing_hashes=False))
    assert data["_hash"] == "pos6bn6mON0sirhEaXq41-"
    assert data["child"]["_hash"] == "yrqcsGrHfad4G4u9fgcAxY"
    assert data["child2"]["_hash"] == "ABC123"

    print("Use validate to check if the hashes are correct")
    data = jh.apply({"a": 1, "b": 2})
    jh.validate(data)

    try:
        jh.validate({"a": 3, "_hash": "invalid"})
    except JsonHashError as exc:
        print(exc)


if __name__ == "__main__":
    main()
