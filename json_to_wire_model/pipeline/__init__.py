"""
Pipeline - example-document to wire model generator.

This module provides a multi-phase architecture for generating wire model
sources from an example JSON response:

1. Phase 1 (Flattener): Collect every object of the document, ordered by depth
2. Phase 2 (Analyzer): Classify values, name types and build object models
3. Phase 3 (Backend): Emit one source unit per model from templates
4. Phase 4 (Writer): Write all units atomically, or check them against disk
"""

from __future__ import annotations

from .backends import SourceUnit
from .config import CodeGeneratorConfig, OutputConfig, OutputMode
from .errors import (
    CyclicReference,
    DuplicateFieldName,
    DuplicateTypeName,
    EmitError,
    InvalidSchemaRoot,
    ObjectPathNotFound,
    OutputExistsError,
    SchemaError,
    StaleOutputError,
    UnknownRef,
    UntypableValue,
    WireModelError,
)
from .generator import PipelineGenerator, generate, load_schema
from .manifest import Manifest, ModelRun, check_all, generate_all, load_manifest, write_all
from .output import AtomicWriter

__all__ = [
    "AtomicWriter",
    "CodeGeneratorConfig",
    "CyclicReference",
    "DuplicateFieldName",
    "DuplicateTypeName",
    "EmitError",
    "InvalidSchemaRoot",
    "Manifest",
    "ModelRun",
    "ObjectPathNotFound",
    "OutputConfig",
    "OutputExistsError",
    "OutputMode",
    "PipelineGenerator",
    "SchemaError",
    "SourceUnit",
    "StaleOutputError",
    "UnknownRef",
    "UntypableValue",
    "WireModelError",
    "check_all",
    "generate",
    "generate_all",
    "load_manifest",
    "load_schema",
    "write_all",
]
