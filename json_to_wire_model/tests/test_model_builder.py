import pytest

from json_to_wire_model.pipeline.analyzer import FieldType, ObjectModelBuilder
from json_to_wire_model.pipeline.errors import DuplicateFieldName, DuplicateTypeName, UntypableValue
from json_to_wire_model.pipeline.schema_ast import flatten
from json_to_wire_model.utils import pascal_to_snake_case, snake_to_pascal_case, to_identifier


def build(document, root_name="MainResponse", overrides=None, ignore_keys=()):
    return ObjectModelBuilder(root_name, overrides, ignore_keys).build(flatten(document, ignore_keys))


class TestObjectModelBuilder:
    def test_fields_follow_document_order(self):
        (model,) = build({"name": "n1", "cluster_name": "c1", "tagline": "You Know, for Search"})
        assert model.name == "MainResponse"
        assert model.field_names() == ["name", "cluster_name", "tagline"]
        assert all(f.type == FieldType.string() for f in model.fields)

    def test_nested_object_becomes_model(self):
        models = build({"name": "n1", "cluster_name": "c1", "version": {"number": "8.0.0", "build_snapshot": False}})
        assert [m.name for m in models] == ["MainResponse", "Version"]
        outer, version = models
        assert outer.fields[2].type == FieldType.ref("Version")
        assert version.parent == "MainResponse"
        assert version.path == "version"
        assert version.depth == 1
        assert [f.type for f in version.fields] == [FieldType.string(), FieldType.boolean()]

    def test_array_of_objects(self):
        models = build({"nodes": [{"id": "a"}]})
        outer, nodes = models
        assert outer.fields[0].type == FieldType.array_of(FieldType.ref("Nodes"))
        assert nodes.name == "Nodes"
        assert nodes.path == "nodes[]"
        assert outer.references() == ["Nodes"]

    def test_wire_names_are_kept(self):
        (model,) = build({"build-type": "tar", "class": "x"})
        assert [(f.name, f.wire_name) for f in model.fields] == [("build_type", "build-type"), ("class_", "class")]

    def test_sanitized_collision(self):
        with pytest.raises(DuplicateFieldName) as exc_info:
            build({"build-type": "tar", "build_type": "zip"})
        assert exc_info.value.path == "build_type"

    def test_duplicate_type_name(self):
        document = {"hot": {"actions": {"a": 1}}, "cold": {"actions": {"b": 2}}}
        with pytest.raises(DuplicateTypeName) as exc_info:
            build(document)
        assert exc_info.value.path == "cold.actions"
        assert "class_name_overrides" in str(exc_info.value)

    def test_overrides_resolve_duplicates(self):
        document = {"hot": {"actions": {"a": 1}}, "cold": {"actions": {"b": 2}}}
        models = build(document, overrides={"hot.actions": "HotActions", "cold.actions": "ColdActions"})
        assert [m.name for m in models] == ["MainResponse", "Hot", "Cold", "HotActions", "ColdActions"]
        assert models[1].fields[0].type == FieldType.ref("HotActions")

    def test_nested_key_matching_root_name(self):
        with pytest.raises(DuplicateTypeName):
            build({"version": {"number": "8"}}, root_name="Version")

    def test_ignored_keys(self):
        (model,) = build({"name": "n1", "_shards": {"total": 1}}, ignore_keys=["_shards"])
        assert model.field_names() == ["name"]

    def test_null_field_is_untypable(self):
        with pytest.raises(UntypableValue) as exc_info:
            build({"version": {"build_hash": None}})
        assert exc_info.value.path == "version.build_hash"

    def test_unnameable_key_uses_parent_name(self):
        models = build({"@@": {"x": 1}})
        assert models[1].name == "MainResponseObject"

    def test_key_starting_with_digit_uses_parent_name(self):
        models = build({"2xx": {"x": 1}})
        assert models[1].name == "MainResponse2Xx"
        assert models[0].field_names() == ["f_2xx"]


class TestNaming:
    @pytest.mark.parametrize(
        "text, expected",
        [
            ("cluster_name", "ClusterName"),
            ("buildType", "BuildType"),
            ("build-hash", "BuildHash"),
            ("version", "Version"),
            ("", ""),
        ],
    )
    def test_snake_to_pascal_case(self, text, expected):
        assert snake_to_pascal_case(text) == expected

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("MainResponseModel8", "main_response_model8"),
            ("Version", "version"),
            ("HotActions", "hot_actions"),
        ],
    )
    def test_pascal_to_snake_case(self, text, expected):
        assert pascal_to_snake_case(text) == expected

    @pytest.mark.parametrize(
        "name, expected",
        [
            ("cluster_uuid", "cluster_uuid"),
            ("buildHash", "buildHash"),
            ("build-type", "build_type"),
            ("class", "class_"),
            ("2fa", "f_2fa"),
            ("@timestamp", "timestamp"),
            ("---", "field"),
            ("PARSER", "PARSER_"),
            ("to_x_content", "to_x_content_"),
            ("from-x-content", "from_x_content_"),
        ],
    )
    def test_to_identifier(self, name, expected):
        assert to_identifier(name) == expected
