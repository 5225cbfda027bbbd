"""
Object model builder.

Phase 2 of the pipeline: turn each flattened entry into an ObjectModel
whose fields keep the key order of the example document.
"""

from __future__ import annotations

from collections.abc import Iterable

from ...utils import to_identifier
from ..errors import DuplicateFieldName
from ..schema_ast.nodes import FlatEntry, child_path, display_path
from .classifier import ValueClassifier
from .ir_nodes import FieldDef, ObjectModel
from .name_resolver import NameMapping, NameResolver


class ObjectModelBuilder:
    """Builds object models from flattened entries."""

    def __init__(self, root_name: str, overrides: dict[str, str] | None = None, ignore_keys: Iterable[str] = ()):
        """
        Initialize the builder.

        Args:
            root_name: Type name of the root object
            overrides: Mapping from object path to an explicit type name
            ignore_keys: Wire keys dropped from every object
        """
        self.name_resolver = NameResolver(root_name, overrides)
        self.ignore_keys = frozenset(ignore_keys)

    def build(self, entries: list[FlatEntry]) -> list[ObjectModel]:
        """
        Build one model per entry, in entry order.

        Raises:
            DuplicateTypeName: If two entries collapse to the same type name
            DuplicateFieldName: If two keys collapse to the same attribute name
            UntypableValue: If a field value cannot be classified
        """
        mapping = self.name_resolver.resolve_names(entries)
        classifier = ValueClassifier(mapping.name_for)
        return [self._build_model(entry, mapping, classifier) for entry in entries]

    def _build_model(self, entry: FlatEntry, mapping: NameMapping, classifier: ValueClassifier) -> ObjectModel:
        fields: list[FieldDef] = []
        claimed: dict[str, str] = {}

        for key, value in entry.node.items():
            if key in self.ignore_keys:
                continue
            path = child_path(entry.path, key)
            name = to_identifier(key)
            if name in claimed:
                raise DuplicateFieldName(f"Keys '{claimed[name]}' and '{key}' both map to attribute '{name}'", display_path(path))
            claimed[name] = key
            fields.append(FieldDef(name=name, type=classifier.classify(value, path, key), wire_name=key))

        parent = mapping.type_names[entry.parent_path] if entry.parent_path is not None else None
        return ObjectModel(
            name=mapping.type_names[entry.path],
            fields=tuple(fields),
            parent=parent,
            path=entry.path,
            depth=entry.depth,
        )
