import dataclasses
import json

import pytest

from jsonhash.config import (
    ApplyConfig,
    HashConfig,
    NumberConfig,
    config_from_dict,
    load_config,
)


def test_defaults():
    hash_config = HashConfig()
    assert hash_config.hash_length == 22
    assert hash_config.hash_algorithm == "SHA-256"
    assert hash_config.number_config == NumberConfig()
    assert hash_config.max_depth == 250

    number_config = NumberConfig()
    assert number_config.precision == 0.001
    assert number_config.max_num == 1_000_000_000
    assert number_config.min_num == -1_000_000_000
    assert number_config.throw_on_range_error is False

    apply_config = ApplyConfig()
    assert apply_config.in_place is False
    assert apply_config.update_existing_hashes is True
    assert apply_config.recursive is True
    assert apply_config.floating_point_precision == 10
    assert apply_config.throw_on_wrong_hash is False


def test_configs_are_immutable():
    with pytest.raises(dataclasses.FrozenInstanceError):
        ApplyConfig().in_place = True
    with pytest.raises(dataclasses.FrozenInstanceError):
        HashConfig().hash_length = 5


def test_copy_with():
    base = ApplyConfig()
    changed = base.copy_with(in_place=True, recursive=False)
    assert changed.in_place is True
    assert changed.recursive is False
    assert base.in_place is False

    assert NumberConfig().copy_with(precision=0.5).precision == 0.5
    assert HashConfig().copy_with(hash_length=8).hash_length == 8


@pytest.mark.parametrize("factory", [
    lambda: HashConfig(hash_length=0),
    lambda: HashConfig(hash_length=44),
    lambda: HashConfig(hash_length=87, hash_algorithm="SHA-512"),
    lambda: HashConfig(hash_algorithm="MD5"),
    lambda: HashConfig(max_depth=0),
    lambda: NumberConfig(precision=0),
    lambda: NumberConfig(min_num=10, max_num=1),
    lambda: ApplyConfig(floating_point_precision=-1),
])
def test_invalid_values(factory):
    with pytest.raises(ValueError):
        factory()


def test_to_dict():
    data = HashConfig().to_dict()
    assert data["hash_length"] == 22
    assert data["number_config"]["precision"] == 0.001
    assert ApplyConfig().to_dict()["recursive"] is True


def test_config_from_dict():
    hash_config, apply_config = config_from_dict({
        "hash": {"hash_length": 10, "hash_algorithm": "SHA-512"},
        "number": {"throw_on_range_error": True},
        "apply": {"recursive": False},
    })
    assert hash_config.hash_length == 10
    assert hash_config.hash_algorithm == "SHA-512"
    assert hash_config.number_config.throw_on_range_error is True
    assert apply_config.recursive is False
    assert apply_config.in_place is False


def test_config_from_empty_dict():
    assert config_from_dict({}) == (HashConfig(), ApplyConfig())


def test_unknown_key():
    with pytest.raises(ValueError, match="Unknown key 'hash_len'"):
        config_from_dict({"hash": {"hash_len": 10}})


def test_number_config_is_not_a_hash_key():
    with pytest.raises(ValueError):
        config_from_dict({"hash": {"number_config": {}}})


def test_unknown_section():
    with pytest.raises(ValueError, match="Unknown config section 'extra'"):
        config_from_dict({"extra": {}})


def test_section_must_be_object():
    with pytest.raises(ValueError):
        config_from_dict({"apply": []})


def test_load_config(tmp_path):
    path = tmp_path / "jsonhash.json"
    path.write_text(json.dumps({"apply": {"floating_point_precision": 5}}), encoding="utf-8")
    hash_config, apply_config = load_config(path)
    assert hash_config == HashConfig()
    assert apply_config.floating_point_precision == 5


def test_load_config_rejects_non_object(tmp_path):
    path = tmp_path / "jsonhash.json"
    path.write_text("[]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_rejects_invalid_json(tmp_path):
    path = tmp_path / "jsonhash.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)


def test_load_config_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "missing.json")


def test_hash_length_may_use_the_full_digest():
    assert HashConfig(hash_length=43).hash_length == 43
    assert HashConfig(hash_length=86, hash_algorithm="SHA-512").hash_length == 86
    assert HashConfig(hash_length=86, hash_algorithm="BLAKE2b").hash_length == 86
