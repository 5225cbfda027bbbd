import pytest

from json_to_wire_model.xcontent import (
    ConstructingObjectParser,
    ParseField,
    XContentBuilder,
    XContentGenerationError,
    XContentParseError,
    XContentParser,
    array_of,
    boolean_value,
    constructor_arg,
    number_value,
    string_value,
)


def _point_parser(**kwargs):
    return ConstructingObjectParser(
        "Point",
        lambda a: ("point", a[0], a[1]),
        [
            constructor_arg(ParseField("x"), 0, number_value),
            constructor_arg(ParseField("label", ("name",)), 1, string_value),
        ],
        **kwargs,
    )


class TestValueParsers:
    def test_null_passes_everywhere(self):
        for parser in (string_value, boolean_value, number_value, array_of(string_value)):
            assert parser(None, "f") is None

    def test_number_rejects_bool(self):
        with pytest.raises(XContentParseError):
            number_value(True, "count")

    def test_boolean_rejects_string(self):
        with pytest.raises(XContentParseError) as exc_info:
            boolean_value("false", "build_snapshot")
        assert exc_info.value.path == "build_snapshot"
        assert "Expected a boolean, got string" in str(exc_info.value)

    def test_array_reports_element_path(self):
        with pytest.raises(XContentParseError) as exc_info:
            array_of(string_value)(["a", 1], "tags")
        assert exc_info.value.path == "tags[1]"


class TestConstructingObjectParser:
    def test_parse_by_position(self):
        assert _point_parser().parse({"label": "p", "x": 1}) == ("point", 1, "p")

    def test_missing_fields_are_none(self):
        assert _point_parser().parse({}) == ("point", None, None)

    def test_deprecated_name(self):
        assert _point_parser().parse({"name": "old"}) == ("point", None, "old")

    def test_json_text_and_parser_sources(self):
        parser = _point_parser()
        assert parser.parse('{"x": 2}') == ("point", 2, None)
        assert parser.parse(b'{"x": 2}') == ("point", 2, None)
        assert parser.parse(XContentParser.from_json('{"x": 2}')) == ("point", 2, None)

    def test_unknown_fields_ignored_by_default(self):
        assert _point_parser().parse({"x": 1, "z": 3}) == ("point", 1, None)

    def test_unknown_fields_rejected_when_strict(self):
        with pytest.raises(XContentParseError) as exc_info:
            _point_parser(ignore_unknown_fields=False).parse({"x": 1, "z": 3}, "shape")
        assert exc_info.value.path == "shape.z"

    def test_type_mismatch_names_path(self):
        with pytest.raises(XContentParseError) as exc_info:
            _point_parser().parse({"x": "one"})
        assert exc_info.value.path == "x"

    def test_nested_parser_as_value_parser(self):
        point = _point_parser()
        outer = ConstructingObjectParser("Outer", lambda a: a[0], [constructor_arg(ParseField("at"), 0, point)])
        assert outer.parse({"at": {"x": 1}}) == ("point", 1, None)
        assert outer.parse({"at": None}) is None
        with pytest.raises(XContentParseError) as exc_info:
            outer.parse({"at": {"x": True}})
        assert exc_info.value.path == "at.x"
        with pytest.raises(XContentParseError):
            outer.parse({"at": [1]})

    @pytest.mark.parametrize("positions", [(0, 2), (1, 2), (0, 0)])
    def test_positions_must_be_contiguous(self, positions):
        declarations = [constructor_arg(ParseField(f"f{i}"), p, string_value) for i, p in enumerate(positions)]
        with pytest.raises(ValueError):
            ConstructingObjectParser("Bad", lambda a: a, declarations)

    def test_duplicate_field_name(self):
        declarations = [
            constructor_arg(ParseField("a"), 0, string_value),
            constructor_arg(ParseField("b", ("a",)), 1, string_value),
        ]
        with pytest.raises(ValueError):
            ConstructingObjectParser("Bad", lambda a: a, declarations)

    def test_malformed_json(self):
        with pytest.raises(XContentParseError):
            _point_parser().parse("{not json")

    def test_non_object_document(self):
        with pytest.raises(XContentParseError):
            _point_parser().parse("[1, 2]")


class _Version:
    def __init__(self, number):
        self.number = number

    def to_x_content(self, builder, params=None):
        return builder.start_object().field("number", self.number, params).end_object()


class TestXContentBuilder:
    def test_keeps_field_order(self):
        builder = XContentBuilder().start_object()
        builder.field("name", "n1").field("cluster_name", "c1").field("tagline", "t")
        builder.end_object()
        assert builder.to_json() == '{"name":"n1","cluster_name":"c1","tagline":"t"}'

    def test_delegates_to_x_content(self):
        builder = XContentBuilder().start_object().field("version", _Version("8.0.0")).end_object()
        assert builder.build() == {"version": {"number": "8.0.0"}}

    def test_lists_mappings_and_nulls(self):
        builder = XContentBuilder().start_object()
        builder.field("nodes", [_Version("1"), None]).field("meta", {"a": [1, 2.5, True]})
        builder.end_object()
        assert builder.to_json() == '{"nodes":[{"number":"1"},null],"meta":{"a":[1,2.5,true]}}'

    def test_explicit_arrays(self):
        builder = XContentBuilder().start_object().start_array("tags").value("a").value("b").end_array().end_object()
        assert builder.build() == {"tags": ["a", "b"]}

    def test_pretty_and_bytes(self):
        builder = XContentBuilder().start_object().field("name", "café").end_object()
        assert builder.bytes() == '{"name":"café"}'.encode("utf-8")
        assert builder.to_json(pretty=True) == '{\n  "name": "café"\n}'

    def test_unclosed_object(self):
        with pytest.raises(XContentGenerationError):
            XContentBuilder().start_object().build()

    def test_end_without_start(self):
        with pytest.raises(XContentGenerationError):
            XContentBuilder().end_object()

    def test_field_outside_object(self):
        with pytest.raises(XContentGenerationError):
            XContentBuilder().field("name", "n1")

    def test_duplicate_field(self):
        builder = XContentBuilder().start_object().field("name", "a")
        with pytest.raises(XContentGenerationError):
            builder.field("name", "b")

    def test_field_name_without_value(self):
        builder = XContentBuilder().start_object().field_name("name")
        with pytest.raises(XContentGenerationError):
            builder.end_object()

    def test_unsupported_value(self):
        with pytest.raises(XContentGenerationError):
            XContentBuilder().start_object().field("when", object())

    def test_empty_builder(self):
        with pytest.raises(XContentGenerationError):
            XContentBuilder().build()
