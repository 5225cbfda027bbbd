"""
Python code generation backend.

Generates one module per object model: a frozen dataclass whose fields
form the constructor, a ``to_x_content`` serializer and a positional
``PARSER`` built from the same ordered field walk.
"""

from __future__ import annotations

import json

from ...utils import pascal_to_snake_case
from ..analyzer.ir_nodes import FieldType, ObjectModel, TypeKind
from ..config import CodeGeneratorConfig
from ..errors import EmitError, UnknownRef
from ..schema_ast.nodes import display_path
from .base import CodeBackend, SourceUnit
from .emitter_state import EmittedClass, EmitterState

# Runtime names every non-empty model needs
_BASE_RUNTIME_IMPORTS = {"ConstructingObjectParser", "Params", "XContentBuilder"}


def py_literal(text: str) -> str:
    """Render a Python string literal."""
    return json.dumps(text, ensure_ascii=False)


class PythonBackend(CodeBackend):
    """Python code generation backend."""

    TEMPLATE_LANG = "python"
    FILE_EXTENSION = "py"

    TYPE_MAP = {
        TypeKind.STRING: "str",
        TypeKind.BOOL: "bool",
        TypeKind.NUMBER: "float",
    }

    VALUE_PARSER_MAP = {
        TypeKind.STRING: "string_value",
        TypeKind.BOOL: "boolean_value",
        TypeKind.NUMBER: "number_value",
    }

    def __init__(self, config: CodeGeneratorConfig):
        super().__init__(config)
        self.runtime_imports: set[str] = set()

    def generate(
        self,
        models: list[ObjectModel],
        package: str,
        header_lines: list[str] | None = None,
        api_version: int | None = None,
    ) -> list[SourceUnit]:
        """Generate Python modules for the models."""
        by_name = {model.name: model for model in models}
        emitted: dict[str, SourceUnit] = {}
        in_progress: set[str] = set()

        # Deepest models first, so referenced types already exist
        for model in reversed(models):
            self._emit(model, by_name, emitted, in_progress, package, header_lines or [], api_version)

        return list(emitted.values())

    def _emit(
        self,
        model: ObjectModel,
        by_name: dict[str, ObjectModel],
        emitted: dict[str, SourceUnit],
        in_progress: set[str],
        package: str,
        header_lines: list[str],
        api_version: int | None,
    ) -> None:
        if model.name in emitted:
            return
        if model.name in in_progress:
            raise EmitError(f"Type {model.name} references itself", display_path(model.path))
        in_progress.add(model.name)

        for ref in model.references():
            if ref not in by_name:
                raise UnknownRef(f"Field of {model.name} references unknown type {ref}", display_path(model.path))
            self._emit(by_name[ref], by_name, emitted, in_progress, package, header_lines, api_version)

        emitted[model.name] = SourceUnit(
            package=package,
            type_name=model.name,
            module_name=self.module_name(model.name),
            code=self.generate_model(model, header_lines),
            api_version=api_version,
        )
        in_progress.discard(model.name)

    def generate_model(self, model: ObjectModel, header_lines: list[str]) -> str:
        """Render the module for one model."""
        self.runtime_imports = set(_BASE_RUNTIME_IMPORTS)
        emitted_class = self._build_class(model)

        if emitted_class.fields:
            self.runtime_imports.update({"ParseField", "constructor_arg"})

        model_imports = sorted((self.module_name(ref), ref) for ref in model.references())

        prefix = self.prefix_template.render(
            header_lines=header_lines,
            comment_prefix=self._get_comment_prefix(),
            runtime_module=self.config.runtime_module,
            runtime_imports=sorted(self.runtime_imports),
            model_imports=model_imports,
        )
        class_code = self.class_template.render(self._prepare_class_context(emitted_class))
        return prefix.rstrip("\n") + "\n\n\n" + class_code

    def _build_class(self, model: ObjectModel) -> EmittedClass:
        state = EmitterState(model)
        for bound in state.bound_fields:
            field_type = bound.field.type
            state.add_field(
                bound,
                annotation=f"{self.translate_type(field_type)} | None",
                value_parser=self.value_parser(field_type),
                wire_literal=py_literal(bound.field.wire_name),
            )
        return state.finish()

    def _prepare_class_context(self, emitted_class: EmittedClass) -> dict:
        """
        Prepare the template context for a class.

        Args:
            emitted_class: The finished fragments of the model

        Returns:
            Dictionary of template variables
        """
        model = emitted_class.model
        source = display_path(model.path).replace("\\", "\\\\").replace('"', '\\"')
        return {
            "name": model.name,
            "name_literal": py_literal(model.name),
            "docstring": f"Wire model for the object at [{source}].",
            "constructor_params": emitted_class.constructor_params,
            "serializer_statements": emitted_class.serializer_statements,
            "declarations": emitted_class.declarations,
            "builder_expression": self._builder_expression(model.name, emitted_class.parser_args),
            "ignore_unknown_fields": self.config.ignore_unknown_fields,
        }

    def _builder_expression(self, class_name: str, parser_args: tuple[str, ...]) -> str:
        """The lambda handing the positional arguments to the constructor."""
        if not parser_args:
            return f"lambda a: {class_name}()"
        lines = [f"lambda a: {class_name}("]
        lines.extend(f"        {arg}," for arg in parser_args)
        lines.append("    )")
        return "\n".join(lines)

    def translate_type(self, field_type: FieldType) -> str:
        """Translate a field type to a Python annotation."""
        if field_type.kind == TypeKind.REF:
            return field_type.name
        if field_type.kind == TypeKind.ARRAY:
            return f"list[{self.translate_type(field_type.element)}]"
        return self.TYPE_MAP[field_type.kind]

    def value_parser(self, field_type: FieldType) -> str:
        """Expression parsing a wire value of the given type."""
        if field_type.kind == TypeKind.REF:
            return f"{field_type.name}.PARSER"
        if field_type.kind == TypeKind.ARRAY:
            self.runtime_imports.add("array_of")
            return f"array_of({self.value_parser(field_type.element)})"
        parser = self.VALUE_PARSER_MAP[field_type.kind]
        self.runtime_imports.add(parser)
        return parser

    @staticmethod
    def module_name(type_name: str) -> str:
        return pascal_to_snake_case(type_name)
