"""
Per-model accumulation of generated fragments.

Positions are bound to fields in a single pass over the model's field
list. The constructor parameters, the positional parser arguments, the
field declarations and the serializer statements are then all appended
while walking that same bound sequence, so they cannot disagree on order.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from ..analyzer.ir_nodes import FieldDef, ObjectModel


@dataclass(frozen=True)
class BoundField:
    """A field paired with its constructor argument position."""

    position: int
    field: FieldDef


def bind_positions(fields: Sequence[FieldDef]) -> tuple[BoundField, ...]:
    """Pair each field with its position, 0..n-1 in declaration order."""
    return tuple(BoundField(position, f) for position, f in enumerate(fields))


@dataclass(frozen=True)
class EmittedClass:
    """The finished fragments of one model."""

    model: ObjectModel
    constructor_params: tuple[str, ...]
    parser_args: tuple[str, ...]
    declarations: tuple[str, ...]
    serializer_statements: tuple[str, ...]
    fields: tuple[BoundField, ...]


class EmitterState:
    """Append-only builder for the fragments of one model.

    One instance per model per generation run; never shared.
    """

    def __init__(self, model: ObjectModel):
        self.model = model
        self.bound_fields = bind_positions(model.fields)
        self._constructor_params: list[str] = []
        self._parser_args: list[str] = []
        self._declarations: list[str] = []
        self._serializer_statements: list[str] = []
        self._emitted: list[BoundField] = []
        self._finished = False

    def add_field(self, bound: BoundField, annotation: str, value_parser: str, wire_literal: str) -> None:
        """
        Append every fragment for one field.

        Args:
            bound: The field and its position, taken from ``bound_fields``
            annotation: Python type annotation of the attribute
            value_parser: Expression parsing the field's wire value
            wire_literal: Python string literal of the wire name
        """
        if self._finished:
            raise RuntimeError(f"Emitter for {self.model.name} is already finished")
        if bound.position != len(self._emitted) or self.bound_fields[bound.position] is not bound:
            raise RuntimeError(f"Field {bound.field.name} of {self.model.name} emitted out of order at position {bound.position}")

        name = bound.field.name
        self._constructor_params.append(f"{name}: {annotation}")
        self._parser_args.append(f"a[{bound.position}]")
        self._declarations.append(f"constructor_arg(ParseField({wire_literal}), {bound.position}, {value_parser})")
        self._serializer_statements.append(f"builder.field({wire_literal}, self.{name}, params)")
        self._emitted.append(bound)

    def finish(self) -> EmittedClass:
        """Freeze the accumulated fragments."""
        count = len(self.model.fields)
        lengths = {
            len(self._constructor_params),
            len(self._parser_args),
            len(self._declarations),
            len(self._serializer_statements),
            len(self._emitted),
        }
        if lengths != {count}:
            raise RuntimeError(f"Emitter for {self.model.name} produced fragments for {sorted(lengths)} fields, expected {count}")

        self._finished = True
        return EmittedClass(
            model=self.model,
            constructor_params=tuple(self._constructor_params),
            parser_args=tuple(self._parser_args),
            declarations=tuple(self._declarations),
            serializer_statements=tuple(self._serializer_statements),
            fields=tuple(self._emitted),
        )
