"""
Tests for JSON/YAML helpers.

These tests ensure mappings survive a JSON/YAML round-trip with key
order intact, and that non-mapping documents are rejected.
"""

import pytest

from objkit.serialization import (
    load_mapping_file,
    mapping_from_json,
    mapping_from_yaml,
    mapping_to_json,
    mapping_to_yaml,
    to_canonical_json,
)
from objkit.values import InvalidArgumentError


def build_sample_mapping():
    return {
        "name": "Serialization Test",
        "page": 3,
        "ratio": 0.5,
        "enabled": True,
        "owner": None,
        "filters": {"status": "open", "tags": ["a", "b"]},
    }


def test_json_roundtrip():
    before = build_sample_mapping()
    after = mapping_from_json(mapping_to_json(before))
    assert before == after
    assert list(after) == list(before)


def test_yaml_roundtrip():
    before = build_sample_mapping()
    after = mapping_from_yaml(mapping_to_yaml(before))
    assert before == after
    assert list(after) == list(before)


def test_yaml_keeps_key_order():
    text = mapping_to_yaml({"z": 1, "a": 2})
    assert text.index("z:") < text.index("a:")


def test_canonical_json_is_compact():
    assert to_canonical_json({"a": [1, 2], "b": {"c": None}}) == '{"a":[1,2],"b":{"c":null}}'


def test_canonical_json_decodes_bytes():
    assert to_canonical_json({"a": [b"x", "y"]}) == '{"a":["x","y"]}'


def test_canonical_json_rejects_unknown_types():
    with pytest.raises(TypeError):
        to_canonical_json({"a": {1, 2}})


def test_non_mapping_document_rejected():
    with pytest.raises(InvalidArgumentError):
        mapping_from_yaml("- 1\n- 2\n")
    with pytest.raises(InvalidArgumentError):
        mapping_from_json("[1, 2]")


def test_load_yaml_file(tmp_path):
    path = tmp_path / "settings.yaml"
    path.write_text("name: demo\nlimits:\n  max: 10\n")
    assert load_mapping_file(path) == {"name": "demo", "limits": {"max": 10}}


def test_load_json_file(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text('{"name": "demo", "tags": ["x"]}')
    assert load_mapping_file(str(path)) == {"name": "demo", "tags": ["x"]}


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_mapping_file(tmp_path / "missing.yaml")


def test_load_empty_file_rejected(tmp_path):
    path = tmp_path / "empty.yaml"
    path.write_text("")
    with pytest.raises(InvalidArgumentError):
        load_mapping_file(path)
