"""
Schema AST module.

Contains the flattened entry definition and the flattener for example documents.
"""

from __future__ import annotations

from .flattener import SchemaFlattener, flatten
from .nodes import ROOT_PATH, FlatEntry, child_path, display_path, element_path

__all__ = [
    "FlatEntry",
    "ROOT_PATH",
    "SchemaFlattener",
    "child_path",
    "display_path",
    "element_path",
    "flatten",
]
