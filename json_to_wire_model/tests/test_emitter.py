import ast

import pytest

from json_to_wire_model.pipeline import CodeGeneratorConfig, PipelineGenerator
from json_to_wire_model.pipeline.analyzer import FieldDef, FieldType, ObjectModel
from json_to_wire_model.pipeline.backends import EmitterState, PythonBackend, bind_positions
from json_to_wire_model.pipeline.errors import EmitError, UnknownRef
from json_to_wire_model.xcontent import XContentBuilder, XContentParser

MAIN_RESPONSE = {
    "name": "n1",
    "cluster_name": "c1",
    "version": {"number": "8.0.0", "build_snapshot": False},
}


def generate(schema, class_name="MainResponse", config=None):
    return PipelineGenerator(class_name, schema, config, package="generated").generate()


def _class_def(code):
    return next(node for node in ast.parse(code).body if isinstance(node, ast.ClassDef))


def _parser_call(code):
    for node in ast.parse(code).body:
        if isinstance(node, ast.Assign) and isinstance(node.targets[0], ast.Attribute) and node.targets[0].attr == "PARSER":
            return node.value
    raise AssertionError("No PARSER assignment")


class TestStructure:
    @pytest.mark.parametrize(
        "schema",
        [
            {"a": "x"},
            {"name": "n1", "count": 1, "ok": True, "tags": ["a"]},
            MAIN_RESPONSE,
            {"meta": {}},
        ],
    )
    def test_param_count_matches_parser_args_and_fields(self, schema):
        for unit in generate(schema):
            class_def = _class_def(unit.code)
            params = [n for n in class_def.body if isinstance(n, ast.AnnAssign) and n.target.id != "PARSER"]
            call = _parser_call(unit.code)
            lambda_body = call.args[1].body
            declarations = call.args[2].elts
            assert len(params) == len(lambda_body.args) == len(declarations)
            assert [arg.slice.value for arg in lambda_body.args] == list(range(len(params)))
            assert [d.args[1].value for d in declarations] == list(range(len(params)))

    def test_field_order_in_constructor_and_serializer(self):
        units = generate({"name": "n1", "cluster_name": "c1", "tagline": "t"})
        code = units[0].code
        serializer = code[code.index("def to_x_content") :]
        positions = [serializer.index(f'builder.field("{key}"') for key in ("name", "cluster_name", "tagline")]
        assert positions == sorted(positions)
        class_def = _class_def(code)
        params = [n.target.id for n in class_def.body if isinstance(n, ast.AnnAssign) and n.target.id != "PARSER"]
        assert params == ["name", "cluster_name", "tagline"]

    def test_referenced_models_are_emitted_first(self):
        units = generate({"policy": {"phases": {"hot": {"min_age": "0ms"}}}}, "IlmPolicy")
        assert [u.type_name for u in units] == ["Hot", "Phases", "Policy", "IlmPolicy"]

    def test_units_are_named_after_types(self):
        units = generate(MAIN_RESPONSE, "MainResponseModel8")
        assert [(u.module_name, str(u.relative_path)) for u in units] == [
            ("version", "generated/version.py"),
            ("main_response_model8", "generated/main_response_model8.py"),
        ]
        assert units[1].qualified_name == "generated.MainResponseModel8"

    def test_generation_is_deterministic(self):
        first = [u.code for u in generate(MAIN_RESPONSE)]
        second = [u.code for u in generate(dict(MAIN_RESPONSE))]
        assert first == second

    def test_generated_code_parses(self):
        for unit in generate({"a": [{"b": [[1]]}], "class": True, "x-y": {"z": "w"}}):
            ast.parse(unit.code)


class TestBackendErrors:
    def test_unknown_ref(self):
        model = ObjectModel("Outer", (FieldDef("version", FieldType.ref("Version")),), path="")
        backend = PythonBackend(CodeGeneratorConfig())
        with pytest.raises(UnknownRef) as exc_info:
            backend.generate([model], "pkg")
        assert "Version" in str(exc_info.value)
        assert exc_info.value.path == "<root>"

    def test_self_reference(self):
        model = ObjectModel("Node", (FieldDef("child", FieldType.ref("Node")),), path="")
        with pytest.raises(EmitError):
            PythonBackend(CodeGeneratorConfig()).generate([model], "pkg")

    def test_mutual_reference(self):
        a = ObjectModel("A", (FieldDef("b", FieldType.ref("B")),), path="")
        b = ObjectModel("B", (FieldDef("a", FieldType.ref("A")),), path="b", depth=1)
        with pytest.raises(EmitError):
            PythonBackend(CodeGeneratorConfig()).generate([a, b], "pkg")


class TestEmitterState:
    def _model(self):
        return ObjectModel("M", (FieldDef("a", FieldType.string()), FieldDef("b", FieldType.number())))

    def test_bind_positions(self):
        bound = bind_positions(self._model().fields)
        assert [(b.position, b.field.name) for b in bound] == [(0, "a"), (1, "b")]

    def test_out_of_order_field_is_rejected(self):
        state = EmitterState(self._model())
        with pytest.raises(RuntimeError):
            state.add_field(state.bound_fields[1], "float | None", "number_value", '"b"')

    def test_missing_field_is_rejected_on_finish(self):
        state = EmitterState(self._model())
        state.add_field(state.bound_fields[0], "str | None", "string_value", '"a"')
        with pytest.raises(RuntimeError):
            state.finish()

    def test_finish(self):
        state = EmitterState(self._model())
        for bound, parser in zip(state.bound_fields, ("string_value", "number_value")):
            state.add_field(bound, "x", parser, f'"{bound.field.name}"')
        emitted = state.finish()
        assert emitted.parser_args == ("a[0]", "a[1]")
        assert emitted.declarations[1] == 'constructor_arg(ParseField("b"), 1, number_value)'
        assert emitted.serializer_statements[0] == 'builder.field("a", self.a, params)'


class TestGeneratedCode:
    def test_end_to_end_serialization(self, load_generated):
        module = load_generated(MAIN_RESPONSE, "MainResponse")
        value = module.MainResponse("n1", "c1", module.Version("8.0.0", False))

        builder = value.to_x_content(XContentBuilder())
        assert builder.to_json() == '{"name":"n1","cluster_name":"c1","version":{"number":"8.0.0","build_snapshot":false}}'
        assert list(builder.build()) == ["name", "cluster_name", "version"]

    def test_round_trip(self, load_generated):
        document = {"name": "n1", "count": 2, "ok": True, "tags": ["a", "b"], "nodes": [{"id": "x", "roles": ["master"]}]}
        module = load_generated(document, "Cluster")
        parsed = module.Cluster.from_x_content(document)
        assert parsed.nodes[0].roles == ["master"]

        rendered = parsed.to_x_content(XContentBuilder()).to_json()
        assert module.Cluster.from_x_content(rendered) == parsed
        assert module.Cluster.from_x_content(XContentParser.from_json(rendered)) == parsed

    def test_missing_fields_are_none(self, load_generated):
        module = load_generated({"name": "n1", "uuid": "u"}, "Info")
        parsed = module.Info.from_x_content({"uuid": "u"})
        assert parsed == module.Info(None, "u")

    def test_sanitized_attribute_keeps_wire_name(self, load_generated):
        module = load_generated({"build-type": "tar", "class": "x"}, "Build")
        parsed = module.Build.from_x_content({"build-type": "zip", "class": "y"})
        assert parsed.build_type == "zip"
        assert parsed.class_ == "y"
        assert parsed.to_x_content(XContentBuilder()).build() == {"build-type": "zip", "class": "y"}

    @pytest.mark.parametrize("key", ["to_x_content", "from_x_content", "PARSER"])
    def test_member_named_keys_are_renamed(self, load_generated, key):
        module = load_generated({"name": "n", key: "x", "z": "y"}, "Node")
        parsed = module.Node.from_x_content({"name": "n", key: "x", "z": "y"})
        assert parsed == module.Node("n", "x", "y")
        assert getattr(parsed, f"{key}_") == "x"
        assert parsed.to_x_content(XContentBuilder()).build() == {"name": "n", key: "x", "z": "y"}

    def test_constructor_is_positional(self, load_generated):
        module = load_generated({"a": "x", "b": 1}, "Pair")
        assert module.Pair.PARSER.arity == 2
        with pytest.raises(TypeError):
            module.Pair("x")
