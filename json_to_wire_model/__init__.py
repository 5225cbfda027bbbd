"""JSON to Wire Model Generator

Generates versioned, positional wire models from example JSON responses,
and adapts domain objects to and from the wire format of each supported
API version.
"""

__version__ = "1.0.0"

from .pipeline import (
    AtomicWriter,
    CodeGeneratorConfig,
    EmitError,
    OutputConfig,
    OutputMode,
    PipelineGenerator,
    SchemaError,
    WireModelError,
    generate,
)

__all__ = [
    "PipelineGenerator",
    "CodeGeneratorConfig",
    "OutputConfig",
    "OutputMode",
    "AtomicWriter",
    "SchemaError",
    "EmitError",
    "WireModelError",
    "generate",
]
