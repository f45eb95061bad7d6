"""Tests for constructing, querying and re-serializing ObjectPath documents."""

import json
from dataclasses import dataclass, field

import pytest
import yaml

from objpath import ObjectPath, Stash, UnsupportedOperationError
from objpath.testing import objpath_config_env


@dataclass
class FakeResponse:
    content: bytes
    headers: dict[str, str] = field(default_factory=dict)


def test_from_content_json_object() -> None:
    obj = ObjectPath.from_content(
        b'{"cluster_name": "c1", "nodes": {"n1": {"port": 9200}}}',
        "application/json",
    )

    assert obj.evaluate("cluster_name") == "c1"
    assert obj.evaluate("nodes.n1.port") == 9200
    assert obj.evaluate("nodes._arbitrary_key_") == "n1"


def test_from_content_json_array() -> None:
    obj = ObjectPath.from_content('[{"index": "a"}, {"index": "b"}]', "application/json")

    assert isinstance(obj.object, list)
    assert obj.evaluate("1.index") == "b"


def test_from_content_preserves_key_order() -> None:
    obj = ObjectPath.from_content(b'{"z": 1, "a": 2, "m": 3}', "application/json")

    assert list(obj.object) == ["z", "a", "m"]
    assert obj.evaluate("_arbitrary_key_") == "z"


def test_from_content_yaml() -> None:
    payload = b"nodes:\n  n1:\n    roles: [data, ingest]\n"

    obj = ObjectPath.from_content(payload, "application/yaml")

    assert obj.evaluate("nodes.n1.roles.1") == "ingest"


def test_from_content_uses_default_content_type() -> None:
    assert ObjectPath.from_content(b'{"a": 1}').evaluate("a") == 1

    with objpath_config_env(default_content_type="application/x-yaml"):
        assert ObjectPath.from_content(b"a: 2").evaluate("a") == 2


def test_from_content_propagates_decode_errors() -> None:
    with pytest.raises(json.JSONDecodeError):
        ObjectPath.from_content(b'{"a": ', "application/json")
    with pytest.raises(yaml.YAMLError):
        ObjectPath.from_content(b"a: [1, 2", "application/yaml")


def test_from_content_rejects_scalar_root() -> None:
    with pytest.raises(ValueError, match="top-level object or array"):
        ObjectPath.from_content(b"42", "application/json")


def test_from_response_reads_content_type_header() -> None:
    response = FakeResponse(
        content=b"acknowledged: true\n",
        headers={"Content-Type": "application/yaml; charset=UTF-8"},
    )

    assert ObjectPath.from_response(response).evaluate("acknowledged") is True


def test_from_response_without_content_type_defaults_to_json() -> None:
    response = FakeResponse(content=b'{"acknowledged": false}')

    assert ObjectPath.from_response(response).evaluate("acknowledged") is False


def test_evaluate_object_shorthand() -> None:
    assert ObjectPath.evaluate_object({"a": [1, 2]}, "a.1") == 2
    assert ObjectPath.evaluate_object({"a": [1, 2]}, "b.1") is None


def test_evaluate_with_stash() -> None:
    obj = ObjectPath({"a": 7})

    assert obj.evaluate("var", Stash({"var": "a"})) == 7
    assert obj.evaluate("var") is None


def test_evaluate_empty_path_returns_held_object() -> None:
    root = {"a": 1}

    assert ObjectPath(root).evaluate("") is root


def test_to_content_round_trips_mapping_as_json() -> None:
    root = {"name": "idx", "settings": {"shards": 2, "tags": ["a", "b"]}, "open": True}

    encoded = ObjectPath(root).to_content("application/json")

    assert json.loads(encoded) == root
    assert list(json.loads(encoded)) == ["name", "settings", "open"]


def test_to_content_round_trips_mapping_as_yaml() -> None:
    root = {"b": 1, "a": {"nested": [1, None, "x"]}}

    encoded = ObjectPath(root).to_content("application/yaml")

    decoded = ObjectPath.from_content(encoded, "application/yaml").object
    assert decoded == root
    assert list(decoded) == ["b", "a"]


def test_to_content_pretty_json() -> None:
    with objpath_config_env(pretty=True):
        encoded = ObjectPath({"a": 1}).to_content()

    assert encoded == b'{\n  "a": 1\n}'


def test_to_content_of_extracted_mapping() -> None:
    obj = ObjectPath({"outer": {"inner": 1}})
    sub = ObjectPath(obj.evaluate("outer"))

    assert json.loads(sub.to_content()) == {"inner": 1}


@pytest.mark.parametrize("root", [[1, 2], "text", 3, None])
def test_to_content_rejects_non_mapping_root(root: object) -> None:
    with pytest.raises(UnsupportedOperationError, match="created from a mapping"):
        ObjectPath(root).to_content()


def test_to_content_rejects_extracted_sequence() -> None:
    obj = ObjectPath.from_content(b'{"a": [1, 2]}', "application/json")
    sub = ObjectPath(obj.evaluate("a"))

    with pytest.raises(UnsupportedOperationError):
        sub.to_content()


def test_from_content_yaml_numeric_keys_are_addressable() -> None:
    obj = ObjectPath.from_content(
        b"shards:\n  0: primary\n  1: replica\n", "application/yaml"
    )

    assert obj.object == {"shards": {"0": "primary", "1": "replica"}}
    assert obj.evaluate("shards.0") == "primary"
    assert obj.evaluate("shards._arbitrary_key_") == "0"


def test_from_content_yaml_rejects_duplicate_keys() -> None:
    with pytest.raises(ValueError, match="duplicate key 'a'"):
        ObjectPath.from_content(b"a: 1\na: 2\n", "application/yaml")
