"""
Error taxonomy for the wire model generator.

Schema errors are detected while flattening and building object models,
emit errors while rendering sources. Both are fatal to a generation run
and carry the dotted schema path of the offending node.
"""

from __future__ import annotations


class WireModelError(Exception):
    """Base class for every error raised by the generator."""


class SchemaError(WireModelError):
    """The example document cannot be turned into object models."""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} at [{self.path}]"
        return self.message


class UntypableValue(SchemaError):
    """A value whose type cannot be inferred (null or empty array)."""


class CyclicReference(SchemaError):
    """A node revisits one of its own ancestors."""


class DuplicateTypeName(SchemaError):
    """Two objects would produce the same generated type name."""


class DuplicateFieldName(SchemaError):
    """Two wire keys of one object collapse to the same attribute name."""


class InvalidSchemaRoot(SchemaError):
    """The document (or selected sub-object) is not a JSON object."""


class ObjectPathNotFound(SchemaError):
    """The requested object path does not exist in the document."""


class EmitError(WireModelError):
    """The object models are inconsistent with each other."""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(str(self))

    def __str__(self) -> str:
        if self.path:
            return f"{self.message} at [{self.path}]"
        return self.message


class UnknownRef(EmitError):
    """A field references a type missing from the model set."""


class OutputExistsError(WireModelError):
    """An output unit already exists with different content."""


class StaleOutputError(WireModelError):
    """Checked-in generated sources differ from a fresh generation."""

    def __init__(self, stale_paths: list[str]):
        self.stale_paths = stale_paths
        super().__init__("Generated sources are out of date: " + ", ".join(stale_paths))
