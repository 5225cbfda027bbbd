import pytest

from json_to_wire_model.pipeline.errors import CyclicReference, InvalidSchemaRoot, SchemaError
from json_to_wire_model.pipeline.schema_ast import FlatEntry, SchemaFlattener, display_path, flatten


def test_flat_document_has_one_entry():
    entries = flatten({"name": "n1", "tagline": "You Know, for Search"})
    assert len(entries) == 1
    root = entries[0]
    assert root.path == ""
    assert root.depth == 0
    assert root.parent_path is None


def test_entries_are_ordered_by_depth():
    document = {
        "a": {"deep": {"deeper": {"x": 1}}},
        "b": {"y": 2},
    }
    entries = flatten(document)
    assert [e.path for e in entries] == ["", "a", "b", "a.deep", "a.deep.deeper"]
    assert [e.depth for e in entries] == [0, 1, 1, 2, 3]


def test_siblings_keep_document_order():
    entries = flatten({"z": {}, "a": {}, "m": {}})
    assert [e.key for e in entries[1:]] == ["z", "a", "m"]


def test_parent_paths():
    entries = {e.path: e for e in flatten({"version": {"build": {"hash": "x"}}})}
    assert entries["version"].parent_path == ""
    assert entries["version.build"].parent_path == "version"
    assert entries["version.build"].key == "build"


def test_array_elements_use_first_element_only():
    entries = flatten({"nodes": [{"id": "a"}, {"other": {"x": 1}}]})
    assert [e.path for e in entries] == ["", "nodes[]"]
    element = entries[1]
    assert element.key == "nodes"
    assert element.parent_path == ""
    assert element.depth == 1
    assert element.node == {"id": "a"}


def test_nested_arrays():
    entries = flatten({"matrix": [[{"v": 1}]]})
    assert entries[1].path == "matrix[][]"


def test_ignored_keys_are_skipped():
    entries = SchemaFlattener(ignore_keys=["_shards"]).flatten({"_shards": {"total": 1}, "hits": {"_shards": {}}})
    assert [e.path for e in entries] == ["", "hits"]


def test_root_must_be_an_object():
    with pytest.raises(InvalidSchemaRoot):
        flatten([{"name": "n1"}])


def test_self_referencing_object_is_rejected():
    document = {"name": "n1"}
    document["self"] = document
    with pytest.raises(CyclicReference) as exc_info:
        flatten(document)
    assert exc_info.value.path == "self"


def test_cycle_through_array_is_rejected():
    child = {"id": "a"}
    document = {"children": [child]}
    child["parent"] = document
    with pytest.raises(CyclicReference) as exc_info:
        flatten(document)
    assert exc_info.value.path == "children[].parent"


def test_shared_subobject_is_not_a_cycle():
    shared = {"x": 1}
    entries = flatten({"a": shared, "b": shared})
    assert [e.path for e in entries] == ["", "a", "b"]


def test_flat_entry_validation():
    with pytest.raises(ValueError):
        FlatEntry(path="a", depth=-1, node={})
    with pytest.raises(TypeError):
        FlatEntry(path="a", depth=0, node=[])


def test_display_path():
    assert display_path("") == "<root>"
    assert display_path("version.number") == "version.number"


@pytest.mark.parametrize("value", [{"x": 1}, [{"x": 1}], ["a"]])
def test_container_under_empty_key_is_rejected(value):
    with pytest.raises(SchemaError) as exc_info:
        flatten({"name": "n1", "nested": {"": value}})
    assert "Empty key ''" in str(exc_info.value)
    assert exc_info.value.path == "nested"


def test_scalar_under_empty_key_is_kept():
    entries = flatten({"": "x", "name": "n1"})
    assert [e.path for e in entries] == [""]


def test_object_under_empty_root_key_is_rejected():
    with pytest.raises(SchemaError) as exc_info:
        flatten({"name": "n1", "": {"name": "n2"}})
    assert str(exc_info.value) == "Empty key '' holds a dict at [<root>]"
