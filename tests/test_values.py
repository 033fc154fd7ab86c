import pytest

from jsonhash.errors import TooDeepError, UnsupportedTypeError
from jsonhash.values import copy_json, copy_list, is_basic_type


class TestCopyJson:
    def test_empty_json(self):
        assert copy_json({}) == {}

    def test_simple_value(self):
        assert copy_json({"a": 1}) == {"a": 1}

    def test_nested_value(self):
        original = {"a": {"b": 1}}
        copy = copy_json(original)
        assert copy == original
        assert copy["a"] is not original["a"]

    def test_list_value(self):
        assert copy_json({"a": [1, 2]}) == {"a": [1, 2]}

    def test_list_with_list(self):
        original = {"a": [[1, 2]]}
        copy = copy_json(original)
        assert copy == original
        assert copy["a"][0] is not original["a"][0]

    def test_list_with_map(self):
        assert copy_json({"a": [{"b": 1}]}) == {"a": [{"b": 1}]}

    def test_throws_on_unsupported_type_in_map(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            copy_json({"a": Exception()})
        assert exc_info.value.message == "Unsupported type: Exception"

    def test_throws_on_unsupported_type_in_list(self):
        with pytest.raises(UnsupportedTypeError) as exc_info:
            copy_json({"a": [Exception()]})
        assert exc_info.value.message == "Unsupported type: Exception"

    def test_throws_on_none(self):
        with pytest.raises(UnsupportedTypeError):
            copy_json({"a": None})

    def test_depth_limit(self):
        copy_json({"a": [{}]}, max_depth=3)
        with pytest.raises(TooDeepError):
            copy_json({"a": [{"b": {}}]}, max_depth=3)

    def test_copy_list(self):
        assert copy_list([1, "a", [True], {"b": 2.5}]) == [1, "a", [True], {"b": 2.5}]


def test_is_basic_type():
    assert is_basic_type(1)
    assert is_basic_type(1.0)
    assert is_basic_type("1")
    assert is_basic_type(True)
    assert is_basic_type(False)
    assert not is_basic_type(set())
    assert not is_basic_type(None)
    assert not is_basic_type([])
    assert not is_basic_type({})
