"""
Flattened view of an example document.

Each object of the document (the root included) becomes one FlatEntry,
addressed by its dotted path from the root.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

ROOT_PATH = ""

# Suffix appended to a path for the elements of an array
ELEMENT_SUFFIX = "[]"


def child_path(parent: str, key: str) -> str:
    """Dotted path of ``key`` inside the object at ``parent``."""
    return f"{parent}.{key}" if parent else key


def element_path(path: str) -> str:
    """Path of the elements of the array at ``path``."""
    return f"{path}{ELEMENT_SUFFIX}"


def display_path(path: str) -> str:
    return path or "<root>"


@dataclass(frozen=True)
class FlatEntry:
    """One object-typed node of the example document."""

    path: str
    depth: int
    node: dict[str, Any]

    # Key of the field holding this object (empty for the root)
    key: str = ""

    # Path of the nearest enclosing object entry
    parent_path: str | None = None

    def __post_init__(self):
        if self.depth < 0:
            raise ValueError(f"Negative depth {self.depth} for [{display_path(self.path)}]")
        if not isinstance(self.node, dict):
            raise TypeError(f"FlatEntry [{display_path(self.path)}] must wrap an object, got {type(self.node).__name__}")
