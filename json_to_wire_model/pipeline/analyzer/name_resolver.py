"""
Name resolver for generated types.

Converts field keys to PascalCase type names and rejects collisions
between objects that would end up with the same name.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from ...utils import snake_to_pascal_case
from ..errors import DuplicateTypeName
from ..schema_ast.nodes import FlatEntry, display_path


@dataclass
class NameMapping:
    """Result of name resolution."""

    # Object path -> type name
    type_names: dict[str, str] = field(default_factory=dict)

    # Type name -> object path that claimed it
    owners: dict[str, str] = field(default_factory=dict)

    def name_for(self, path: str, key: str = "") -> str:
        return self.type_names[path]


class NameResolver:
    """Resolves type names for flattened entries."""

    def __init__(self, root_name: str, overrides: dict[str, str] | None = None):
        """
        Initialize the resolver.

        Args:
            root_name: Type name of the root object
            overrides: Mapping from object path to an explicit type name
        """
        self.root_name = root_name
        self.overrides = overrides or {}

    def resolve_names(self, entries: list[FlatEntry]) -> NameMapping:
        """
        Name every entry.

        Entries must be ordered so that a parent comes before its children,
        which the depth ordering of the flattener guarantees.

        Raises:
            DuplicateTypeName: If two entries produce the same type name
        """
        mapping = NameMapping()

        for entry in entries:
            name = self._type_name(entry, mapping)
            if name in mapping.owners:
                raise DuplicateTypeName(
                    f"Type name '{name}' is produced by both [{display_path(mapping.owners[name])}] and [{display_path(entry.path)}]; "
                    "use class_name_overrides to rename one of them",
                    display_path(entry.path),
                )
            mapping.type_names[entry.path] = name
            mapping.owners[name] = entry.path

        return mapping

    def _type_name(self, entry: FlatEntry, mapping: NameMapping) -> str:
        if entry.path in self.overrides:
            return self.overrides[entry.path]
        if entry.parent_path is None:
            return self.root_name

        name = snake_to_pascal_case(entry.key)
        if not name:
            # Keys without any usable word characters are named after the parent
            return f"{mapping.type_names[entry.parent_path]}Object"
        if not name.isidentifier():
            return f"{mapping.type_names[entry.parent_path]}{name}"
        return name
