"""
Value classifier.

Maps a raw JSON value from the example document to a FieldType.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from ...utils import snake_to_pascal_case
from ..errors import UntypableValue
from ..schema_ast.nodes import display_path, element_path
from .ir_nodes import FieldType

# Given (object path, field key) returns the type name for that object
TypeNamer = Callable[[str, str], str]


def default_type_namer(path: str, key: str) -> str:
    return snake_to_pascal_case(key)


class ValueClassifier:
    """Classifies example values into field types."""

    def __init__(self, type_namer: TypeNamer | None = None):
        """
        Initialize the classifier.

        Args:
            type_namer: Callback naming the synthetic type of a nested object
        """
        self.type_namer = type_namer or default_type_namer

    def classify(self, value: Any, path: str, key: str) -> FieldType:
        """
        Classify a JSON value.

        Args:
            value: The example value
            path: Dotted path of the value in the document
            key: Key of the enclosing field (names nested object types)

        Returns:
            The resolved FieldType

        Raises:
            UntypableValue: For null, empty arrays, or non-JSON values
        """
        # bool must be checked before numbers, bool is an int subclass
        if isinstance(value, bool):
            return FieldType.boolean()
        if isinstance(value, str):
            return FieldType.string()
        if isinstance(value, (int, float)):
            return FieldType.number()
        if isinstance(value, dict):
            return FieldType.ref(self.type_namer(path, key))
        if isinstance(value, list):
            if not value:
                raise UntypableValue("Cannot infer the element type of an empty array", display_path(path))
            # First element wins, the remaining elements are not inspected
            return FieldType.array_of(self.classify(value[0], element_path(path), key))
        if value is None:
            raise UntypableValue("Cannot infer a type from null", display_path(path))
        raise UntypableValue(f"Unsupported value of type {type(value).__name__}", display_path(path))


def classify(value: Any, path: str = "", key: str = "") -> FieldType:
    """Classify a value using the default type naming."""
    return ValueClassifier().classify(value, path, key)
