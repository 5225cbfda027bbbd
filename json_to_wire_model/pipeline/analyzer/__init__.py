"""
Analyzer module.

Contains value classification, name resolution, and object model building.
"""

from __future__ import annotations

from .classifier import ValueClassifier, classify
from .ir_nodes import FieldDef, FieldType, ObjectModel, TypeKind, VersionedModel
from .model_builder import ObjectModelBuilder
from .name_resolver import NameMapping, NameResolver

__all__ = [
    "FieldDef",
    "FieldType",
    "ObjectModel",
    "TypeKind",
    "VersionedModel",
    "ValueClassifier",
    "classify",
    "ObjectModelBuilder",
    "NameMapping",
    "NameResolver",
]
