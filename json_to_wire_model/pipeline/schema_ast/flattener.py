"""
Schema flattener.

Phase 1 of the pipeline: walk the example document depth-first and
collect one FlatEntry per object, ordered by depth.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import Any

from ..errors import CyclicReference, InvalidSchemaRoot, SchemaError
from .nodes import ROOT_PATH, FlatEntry, child_path, display_path, element_path

logger = logging.getLogger(__name__)


class SchemaFlattener:
    """Flattens nested JSON objects into an ordered list of entries."""

    def __init__(self, ignore_keys: Iterable[str] = ()):
        """
        Initialize the flattener.

        Args:
            ignore_keys: Wire keys that are skipped everywhere in the document
        """
        self.ignore_keys = frozenset(ignore_keys)

    def flatten(self, document: Any) -> list[FlatEntry]:
        """
        Flatten a document.

        Args:
            document: The parsed example document, must be an object

        Returns:
            Entries sorted by depth ascending, traversal order kept within a depth

        Raises:
            InvalidSchemaRoot: If the document is not an object
            CyclicReference: If a node contains one of its ancestors
            SchemaError: If an object or array sits under an empty key
        """
        if not isinstance(document, dict):
            raise InvalidSchemaRoot(f"Example document must be a JSON object, got {type(document).__name__}", display_path(ROOT_PATH))

        entries: list[FlatEntry] = []
        self._visit_object(document, ROOT_PATH, "", 0, None, entries, [])

        # sorted() is stable, so siblings keep their document order
        ordered = sorted(entries, key=lambda e: e.depth)
        for entry in ordered:
            logger.debug("Flattened [%s] at depth %d", display_path(entry.path), entry.depth)
        return ordered

    def _visit_object(
        self,
        node: dict[str, Any],
        path: str,
        key: str,
        depth: int,
        parent_path: str | None,
        entries: list[FlatEntry],
        ancestors: list[int],
    ) -> None:
        self._enter(node, path, ancestors)
        entries.append(FlatEntry(path=path, depth=depth, node=node, key=key, parent_path=parent_path))

        for child_key, value in node.items():
            if child_key in self.ignore_keys:
                continue
            if not child_key and isinstance(value, (dict, list)):
                # An empty key can neither name a type nor address it
                raise SchemaError(f"Empty key '' holds a {type(value).__name__}", display_path(path))
            self._visit_value(value, child_path(path, child_key), child_key, depth + 1, path, entries, ancestors)

        ancestors.pop()

    def _visit_value(
        self,
        value: Any,
        path: str,
        key: str,
        depth: int,
        parent_path: str,
        entries: list[FlatEntry],
        ancestors: list[int],
    ) -> None:
        if isinstance(value, dict):
            self._visit_object(value, path, key, depth, parent_path, entries, ancestors)
        elif isinstance(value, list) and value:
            # Elements share one type, inferred from the first element only
            self._enter(value, path, ancestors)
            self._visit_value(value[0], element_path(path), key, depth, parent_path, entries, ancestors)
            ancestors.pop()

    def _enter(self, container: Any, path: str, ancestors: list[int]) -> None:
        identity = id(container)
        if identity in ancestors:
            raise CyclicReference("Node contains one of its own ancestors", display_path(path))
        ancestors.append(identity)


def flatten(document: Any, ignore_keys: Iterable[str] = ()) -> list[FlatEntry]:
    """Flatten a document into depth-ordered entries."""
    return SchemaFlattener(ignore_keys).flatten(document)
