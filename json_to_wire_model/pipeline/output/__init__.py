"""
Output module.

Writes generated units to disk, all or nothing.
"""

from __future__ import annotations

from .atomic_writer import AtomicWriter

__all__ = [
    "AtomicWriter",
]
