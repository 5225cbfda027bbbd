"""
Configuration for the wire model generator pipeline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class OutputMode(str, Enum):
    """Output mode for file generation.

    Controls behavior when an output file already exists.
    """

    ERROR_IF_EXISTS = "error"  # Default: raise error if file exists with other content
    FORCE = "force"  # Overwrite without asking


@dataclass
class OutputConfig:
    """Configuration for output file handling.

    Attributes:
        mode: How to handle existing output files
        validate_before_write: Whether to compile generated code before writing
    """

    mode: OutputMode = OutputMode.ERROR_IF_EXISTS
    validate_before_write: bool = True


@dataclass
class CodeGeneratorConfig:
    """Configuration options for code generation."""

    # Add generation comment at top of each unit
    add_generation_comment: bool = True

    # Include the reconstructed command line in the generation comment
    include_command_line: bool = False

    # Wire keys dropped from every object
    ignore_fields: list[str] = field(default_factory=list)

    # Explicit type names keyed by dotted object path ("" is the root)
    class_name_overrides: dict[str, str] = field(default_factory=dict)

    # Module the generated code imports its parser/builder runtime from
    runtime_module: str = "json_to_wire_model.xcontent"

    # Whether generated parsers skip fields they do not declare
    ignore_unknown_fields: bool = True

    # Output configuration
    output: OutputConfig = field(default_factory=OutputConfig)

    @staticmethod
    def from_dict(d: dict) -> CodeGeneratorConfig:
        """Create a config from a dictionary."""
        config = CodeGeneratorConfig()
        for k, v in d.items():
            if k == "output" and isinstance(v, dict):
                mode = v.get("mode", OutputMode.ERROR_IF_EXISTS)
                if isinstance(mode, str):
                    mode = OutputMode(mode)
                config.output = OutputConfig(
                    mode=mode,
                    validate_before_write=v.get("validate_before_write", True),
                )
            elif hasattr(config, k):
                setattr(config, k, v)
        return config

    def to_dict(self) -> dict:
        """Convert config to a dictionary."""
        return {
            "add_generation_comment": self.add_generation_comment,
            "include_command_line": self.include_command_line,
            "ignore_fields": self.ignore_fields,
            "class_name_overrides": self.class_name_overrides,
            "runtime_module": self.runtime_module,
            "ignore_unknown_fields": self.ignore_unknown_fields,
            "output": {
                "mode": self.output.mode.value,
                "validate_before_write": self.output.validate_before_write,
            },
        }
