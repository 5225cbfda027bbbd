"""
IR (Intermediate Representation) node definitions.

These nodes represent the analyzed example document, ready for code
generation. Every field type is resolved once while building the object
models; nothing downstream re-inspects raw JSON values.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class TypeKind(Enum):
    """Kind of a field type."""

    STRING = "string"
    BOOL = "bool"
    NUMBER = "number"
    REF = "ref"  # Another generated model
    ARRAY = "array"  # list[T]


@dataclass(frozen=True)
class FieldType:
    """A resolved field type.

    A closed variant: ``kind`` selects which of ``name`` (for REF) or
    ``element`` (for ARRAY) is meaningful. Use the constructors below
    rather than instantiating directly.
    """

    kind: TypeKind
    name: str = ""
    element: FieldType | None = None

    @classmethod
    def string(cls) -> FieldType:
        return cls(TypeKind.STRING)

    @classmethod
    def boolean(cls) -> FieldType:
        return cls(TypeKind.BOOL)

    @classmethod
    def number(cls) -> FieldType:
        return cls(TypeKind.NUMBER)

    @classmethod
    def ref(cls, type_name: str) -> FieldType:
        return cls(TypeKind.REF, name=type_name)

    @classmethod
    def array_of(cls, element: FieldType) -> FieldType:
        return cls(TypeKind.ARRAY, element=element)

    def referenced_type(self) -> str | None:
        """Name of the model this type points at, looking through arrays."""
        if self.kind == TypeKind.REF:
            return self.name
        if self.kind == TypeKind.ARRAY and self.element is not None:
            return self.element.referenced_type()
        return None

    def __str__(self) -> str:
        if self.kind == TypeKind.REF:
            return f"Ref({self.name})"
        if self.kind == TypeKind.ARRAY:
            return f"ArrayOf({self.element})"
        return {TypeKind.STRING: "String", TypeKind.BOOL: "Bool", TypeKind.NUMBER: "Number"}[self.kind]


@dataclass(frozen=True)
class FieldDef:
    """A field of an object model.

    ``name`` is the Python attribute name, ``wire_name`` the JSON key it
    is read from and written to.
    """

    name: str
    type: FieldType
    wire_name: str = ""

    def __post_init__(self):
        if not self.wire_name:
            object.__setattr__(self, "wire_name", self.name)


@dataclass(frozen=True)
class ObjectModel:
    """A named type built from one object of the example document."""

    name: str
    fields: tuple[FieldDef, ...] = ()
    parent: str | None = None

    # Dotted path of the source object (for error messages)
    path: str = ""
    depth: int = 0

    def field_names(self) -> list[str]:
        return [f.name for f in self.fields]

    def references(self) -> list[str]:
        """Types referenced by this model's fields, in field order."""
        refs = []
        for f in self.fields:
            target = f.type.referenced_type()
            if target is not None and target not in refs:
                refs.append(target)
        return refs


@dataclass(frozen=True)
class VersionedModel:
    """An object model tagged with the API major version it belongs to."""

    model: ObjectModel
    api_version: int | None = None

    @property
    def name(self) -> str:
        return self.model.name
