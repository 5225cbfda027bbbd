"""
Pipeline generator.

Orchestrates one generation run:

1. Phase 1 (Flattener): collect the objects of the example document
2. Phase 2 (Builder): name them and build ordered object models
3. Phase 3 (Backend): emit one source unit per model
4. Phase 4 (Writer): write all units atomically, or check them against disk
"""

from __future__ import annotations

import json
import keyword
import logging
from pathlib import Path
from typing import Any

from .analyzer.ir_nodes import ObjectModel, VersionedModel
from .analyzer.model_builder import ObjectModelBuilder
from .backends.base import SourceUnit
from .backends.python_backend import PythonBackend
from .config import CodeGeneratorConfig
from .errors import DuplicateTypeName, InvalidSchemaRoot, ObjectPathNotFound, SchemaError, StaleOutputError
from .output.atomic_writer import AtomicWriter
from .schema_ast.flattener import SchemaFlattener
from .schema_ast.nodes import display_path

logger = logging.getLogger(__name__)

GENERATED_MARKER = "GENERATED CODE - DO NOT MODIFY"

# Names every generated module binds; a model may not shadow them
RESERVED_TYPE_NAMES = frozenset(
    {
        "ClassVar",
        "ConstructingObjectParser",
        "ParseField",
        "Params",
        "XContentBuilder",
        "annotations",
        "dataclass",
    }
)


def load_schema(path: str | Path) -> Any:
    """Read an example document, keeping its key order."""
    with open(path, encoding="utf-8") as f:
        return json.load(f)


def select_object(document: Any, object_path: str | None) -> Any:
    """
    Select the sub-object at a ``/``-separated path.

    Args:
        document: The parsed example document
        object_path: Path such as ``"responses/main"``; None or "." selects the document

    Raises:
        ObjectPathNotFound: If a segment is missing
    """
    if not object_path or object_path == ".":
        return document
    node = document
    walked: list[str] = []
    for segment in object_path.split("/"):
        if not segment:
            continue
        walked.append(segment)
        if not isinstance(node, dict) or segment not in node:
            raise ObjectPathNotFound(f"Could not find the object defined by [{object_path}]", ".".join(walked))
        node = node[segment]
    return node


def _check_identifier(name: str, what: str) -> None:
    if not name.isidentifier() or keyword.iskeyword(name):
        raise SchemaError(f"Invalid {what} '{name}'")


class PipelineGenerator:
    """Generates wire model sources from one example document."""

    def __init__(
        self,
        name: str,
        schema: Any,
        config: CodeGeneratorConfig | None = None,
        package: str = "",
        source_name: str = "",
        api_version: int | None = None,
        object_path: str | None = None,
        command_line: str | None = None,
    ):
        """
        Initialize the generator.

        Args:
            name: Type name of the root object
            schema: The parsed example document
            config: Code generation configuration
            package: Dotted package the units belong to
            source_name: Name of the schema file, recorded in the generation comment
            api_version: API major version the generated models belong to
            object_path: Optional ``/``-separated path of the root object in the document
            command_line: Command line recorded in the generation comment
        """
        self.name = name
        self.schema = schema
        self.config = config or CodeGeneratorConfig()
        self.package = package
        self.source_name = source_name
        self.api_version = api_version
        self.object_path = object_path
        self.command_line = command_line

    def analyze(self) -> list[ObjectModel]:
        """
        Run the flattener and builder.

        Returns:
            Object models ordered by depth ascending

        Raises:
            SchemaError: On any schema problem
        """
        _check_identifier(self.name, "type name")
        for part in filter(None, self.package.split(".")):
            _check_identifier(part, "package name")

        root = select_object(self.schema, self.object_path)
        if not isinstance(root, dict):
            raise InvalidSchemaRoot(f"Example document must be a JSON object, got {type(root).__name__}", display_path(""))

        entries = SchemaFlattener(self.config.ignore_fields).flatten(root)
        builder = ObjectModelBuilder(self.name, self.config.class_name_overrides, self.config.ignore_fields)
        models = builder.build(entries)
        self._check_names(models)

        logger.info("Built %d model(s) for %s", len(models), self.name)
        return models

    def versioned_models(self) -> list[VersionedModel]:
        return [VersionedModel(model, self.api_version) for model in self.analyze()]

    def _check_names(self, models: list[ObjectModel]) -> None:
        modules: dict[str, str] = {}
        for model in models:
            _check_identifier(model.name, "type name")
            if model.name in RESERVED_TYPE_NAMES:
                raise DuplicateTypeName(f"Type name '{model.name}' clashes with a name used by generated code", display_path(model.path))
            module = PythonBackend.module_name(model.name)
            if module in modules:
                raise DuplicateTypeName(f"Types '{modules[module]}' and '{model.name}' map to the same module '{module}'", display_path(model.path))
            modules[module] = model.name

    def header_lines(self) -> list[str]:
        if not self.config.add_generation_comment:
            return []
        lines = [GENERATED_MARKER]
        if self.source_name:
            lines.append(f"Source: {self.source_name}")
        if self.api_version is not None:
            lines.append(f"API version: {self.api_version}")
        if self.config.include_command_line and self.command_line:
            lines.append(f"Command: {self.command_line}")
        return lines

    def generate(self) -> list[SourceUnit]:
        """
        Generate all source units of the run.

        Deterministic: the same document and configuration always yield
        the same units with the same content.
        """
        models = self.analyze()
        backend = PythonBackend(self.config)
        return backend.generate(models, self.package, self.header_lines(), self.api_version)

    def write(self, output_dir: str | Path) -> list[Path]:
        """Generate and write all units; nothing is written if any step fails."""
        return write_units(self.generate(), output_dir, self.config)

    def check(self, output_dir: str | Path) -> None:
        """Raise StaleOutputError if the units on disk differ from a fresh generation."""
        check_units(self.generate(), output_dir)


def unit_paths(units: list[SourceUnit], output_dir: str | Path) -> dict[Path, str]:
    output_dir = Path(output_dir)
    return {output_dir.joinpath(*unit.relative_path.parts): unit.code for unit in units}


def write_units(units: list[SourceUnit], output_dir: str | Path, config: CodeGeneratorConfig) -> list[Path]:
    """Write units under ``output_dir`` atomically."""
    writer = AtomicWriter(mode=config.output.mode)
    return writer.write_all(unit_paths(units, output_dir), validate=config.output.validate_before_write)


def check_units(units: list[SourceUnit], output_dir: str | Path) -> None:
    """
    Compare units with the files under ``output_dir``.

    Raises:
        StaleOutputError: Listing every missing or differing file
    """
    stale = []
    for path, code in unit_paths(units, output_dir).items():
        if not path.exists() or path.read_text(encoding="utf-8") != code:
            stale.append(str(path))
    if stale:
        raise StaleOutputError(stale)


def generate(
    schema_path: str | Path,
    package_name: str,
    type_name: str,
    config: CodeGeneratorConfig | None = None,
    api_version: int | None = None,
    object_path: str | None = None,
) -> list[SourceUnit]:
    """
    Generate the source units for one example document.

    Args:
        schema_path: Path of the example JSON document
        package_name: Dotted package of the generated modules
        type_name: Type name of the root object

    Returns:
        One unit per generated model
    """
    schema_path = Path(schema_path)
    generator = PipelineGenerator(
        type_name,
        load_schema(schema_path),
        config,
        package=package_name,
        source_name=schema_path.name,
        api_version=api_version,
        object_path=object_path,
    )
    return generator.generate()
