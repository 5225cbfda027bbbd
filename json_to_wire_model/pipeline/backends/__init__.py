"""
Code generation backends.

Contains the source emitter for generated wire models.
"""

from __future__ import annotations

from .base import CodeBackend, SourceUnit
from .emitter_state import BoundField, EmittedClass, EmitterState, bind_positions
from .python_backend import PythonBackend

__all__ = [
    "BoundField",
    "CodeBackend",
    "EmittedClass",
    "EmitterState",
    "PythonBackend",
    "SourceUnit",
    "bind_positions",
]
