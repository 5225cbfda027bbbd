"""
Base class for code generation backends.

Defines the interface that all language-specific backends must implement.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path, PurePosixPath

import jinja2

from ..analyzer.ir_nodes import FieldType, ObjectModel
from ..config import CodeGeneratorConfig


@dataclass(frozen=True)
class SourceUnit:
    """One emitted source file, identified by (package, type name)."""

    package: str
    type_name: str
    module_name: str
    code: str
    api_version: int | None = None

    @property
    def relative_path(self) -> PurePosixPath:
        """Path of the unit relative to the output root."""
        parts = [p for p in self.package.split(".") if p]
        return PurePosixPath(*parts, f"{self.module_name}.py")

    @property
    def qualified_name(self) -> str:
        return f"{self.package}.{self.type_name}" if self.package else self.type_name


class CodeBackend(ABC):
    """Abstract base class for code generation backends."""

    # Template directory name
    TEMPLATE_LANG: str = ""

    # File extension
    FILE_EXTENSION: str = ""

    def __init__(self, config: CodeGeneratorConfig):
        """
        Initialize the backend.

        Args:
            config: Code generation configuration
        """
        self.config = config
        self._setup_templates()

    def _setup_templates(self) -> None:
        """Set up Jinja2 templates."""
        template_dir = Path(__file__).parent.parent.parent / "templates" / self.TEMPLATE_LANG
        self.jinja_env = jinja2.Environment(
            loader=jinja2.FileSystemLoader(str(template_dir)),
            lstrip_blocks=True,
            trim_blocks=True,
            keep_trailing_newline=True,
            undefined=jinja2.StrictUndefined,
        )

        self.prefix_template = self.jinja_env.get_template(f"prefix.{self.FILE_EXTENSION}.jinja2")
        self.class_template = self.jinja_env.get_template(f"class.{self.FILE_EXTENSION}.jinja2")

    @abstractmethod
    def generate(
        self,
        models: list[ObjectModel],
        package: str,
        header_lines: list[str] | None = None,
        api_version: int | None = None,
    ) -> list[SourceUnit]:
        """
        Generate one source unit per model.

        Args:
            models: Object models, ordered by depth ascending
            package: Target package of the units
            header_lines: Lines of the generation comment
            api_version: API major version the models belong to

        Returns:
            Units in emission order
        """

    @abstractmethod
    def translate_type(self, field_type: FieldType) -> str:
        """
        Translate a field type to a language-specific type string.

        Args:
            field_type: The resolved field type

        Returns:
            Language-specific type string
        """

    def _get_comment_prefix(self) -> str:
        """Get the comment prefix for the language."""
        return "#" if self.TEMPLATE_LANG == "python" else "//"
