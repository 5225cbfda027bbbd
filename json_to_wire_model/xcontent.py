"""
Runtime support for generated wire models.

Generated modules only depend on this module: a positional constructing
parser that collects wire values into a fixed-order argument tuple and
hands it to a single constructor, and an order-preserving builder that
the generated ``to_x_content`` methods write into.
"""

from __future__ import annotations

import json
from collections.abc import Callable, Mapping, Sequence
from dataclasses import dataclass
from typing import Any, Generic, Protocol, TypeVar

T = TypeVar("T")

# Parses one wire value found at a dotted path
ValueParser = Callable[[Any, str], Any]

Params = Mapping[str, Any]


class XContentParseError(ValueError):
    """A wire document does not match the declared fields."""

    def __init__(self, message: str, path: str = ""):
        self.message = message
        self.path = path
        super().__init__(f"{message} at [{path}]" if path else message)


class XContentGenerationError(ValueError):
    """The builder was driven into an invalid state."""


class ToXContent(Protocol):
    def to_x_content(self, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder: ...


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, Mapping):
        return "object"
    if isinstance(value, list):
        return "array"
    return type(value).__name__


# ---------------------------------------------------------------------------
# Value parsers
# ---------------------------------------------------------------------------


def string_value(value: Any, path: str = "") -> str | None:
    if value is None or isinstance(value, str):
        return value
    raise XContentParseError(f"Expected a string, got {_json_type(value)}", path)


def boolean_value(value: Any, path: str = "") -> bool | None:
    if value is None or isinstance(value, bool):
        return value
    raise XContentParseError(f"Expected a boolean, got {_json_type(value)}", path)


def number_value(value: Any, path: str = "") -> int | float | None:
    if value is None or (isinstance(value, (int, float)) and not isinstance(value, bool)):
        return value
    raise XContentParseError(f"Expected a number, got {_json_type(value)}", path)


def array_of(element: ValueParser) -> ValueParser:
    """Value parser for an array whose elements are parsed by ``element``."""

    def parse_array(value: Any, path: str = "") -> list[Any] | None:
        if value is None:
            return None
        if not isinstance(value, list):
            raise XContentParseError(f"Expected an array, got {_json_type(value)}", path)
        return [element(item, f"{path}[{i}]") for i, item in enumerate(value)]

    return parse_array


# ---------------------------------------------------------------------------
# Parsing
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class ParseField:
    """A wire key, optionally accepted under deprecated names as well."""

    name: str
    deprecated_names: tuple[str, ...] = ()

    def all_names(self) -> tuple[str, ...]:
        return (self.name, *self.deprecated_names)


@dataclass(frozen=True)
class FieldDeclaration:
    """Binds a wire field to one position of the constructor arguments."""

    parse_field: ParseField
    position: int
    value_parser: ValueParser


def constructor_arg(parse_field: ParseField, position: int, value_parser: ValueParser) -> FieldDeclaration:
    """Declare the constructor argument at ``position``."""
    return FieldDeclaration(parse_field, position, value_parser)


class XContentParser:
    """Holds one decoded wire document, keeping its key order."""

    def __init__(self, content: Mapping[str, Any]):
        if not isinstance(content, Mapping):
            raise XContentParseError(f"Expected an object, got {_json_type(content)}")
        self._content = content

    @classmethod
    def from_json(cls, text: str | bytes) -> XContentParser:
        try:
            content = json.loads(text)
        except json.JSONDecodeError as e:
            raise XContentParseError(f"Malformed JSON: {e}") from e
        return cls(content)

    def map(self) -> Mapping[str, Any]:
        return self._content


def _content_of(source: Any) -> Mapping[str, Any]:
    if isinstance(source, XContentParser):
        return source.map()
    if isinstance(source, (str, bytes, bytearray)):
        return XContentParser.from_json(source).map()
    return XContentParser(source).map()


class ConstructingObjectParser(Generic[T]):
    """Parses an object by collecting field values into positional arguments.

    Every declaration names its argument position explicitly. Positions
    must be exactly ``0..n-1``; a gap or a duplicate is rejected when the
    parser is defined, not when a document is parsed. Fields absent from
    the document leave ``None`` at their position.
    """

    def __init__(
        self,
        name: str,
        builder: Callable[[tuple[Any, ...]], T],
        declarations: Sequence[FieldDeclaration],
        ignore_unknown_fields: bool = True,
    ):
        self.name = name
        self.builder = builder
        self.declarations = tuple(declarations)
        self.ignore_unknown_fields = ignore_unknown_fields

        positions = sorted(d.position for d in self.declarations)
        if positions != list(range(len(self.declarations))):
            raise ValueError(f"[{name}] constructor argument positions must be 0..{len(self.declarations) - 1}, got {positions}")

        self._fields: dict[str, FieldDeclaration] = {}
        for declaration in self.declarations:
            for wire_name in declaration.parse_field.all_names():
                if wire_name in self._fields:
                    raise ValueError(f"[{name}] field [{wire_name}] is declared twice")
                self._fields[wire_name] = declaration

    @property
    def arity(self) -> int:
        return len(self.declarations)

    def parse(self, source: Any, path: str = "") -> T:
        """
        Parse an object.

        Args:
            source: A mapping, JSON text, or XContentParser
            path: Dotted path of the object (for error messages)

        Returns:
            The constructed object

        Raises:
            XContentParseError: On a type mismatch, or an unknown field when
                unknown fields are not ignored
        """
        content = _content_of(source)
        args: list[Any] = [None] * self.arity
        for key, value in content.items():
            declaration = self._fields.get(key)
            if declaration is None:
                if self.ignore_unknown_fields:
                    continue
                raise XContentParseError(f"[{self.name}] unknown field [{key}]", _join(path, key))
            args[declaration.position] = declaration.value_parser(value, _join(path, key))
        return self.builder(tuple(args))

    def __call__(self, value: Any, path: str = "") -> T | None:
        """Use this parser as the value parser of a nested object field."""
        if value is None:
            return None
        if not isinstance(value, Mapping):
            raise XContentParseError(f"[{self.name}] expected an object, got {_json_type(value)}", path)
        return self.parse(value, path)

    def __repr__(self) -> str:
        return f"ConstructingObjectParser({self.name!r}, arity={self.arity})"


# ---------------------------------------------------------------------------
# Building
# ---------------------------------------------------------------------------

_UNSET = object()


class XContentBuilder:
    """Builds a JSON document through start/end markers.

    Object keys keep the order in which fields are written.
    """

    def __init__(self):
        self._stack: list[dict[str, Any] | list[Any]] = []
        self._root: Any = _UNSET
        self._pending_name: str | None = None

    def start_object(self, name: str | None = None) -> XContentBuilder:
        if name is not None:
            self.field_name(name)
        obj: dict[str, Any] = {}
        self._add(obj)
        self._stack.append(obj)
        return self

    def end_object(self) -> XContentBuilder:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise XContentGenerationError("end_object() without a matching start_object()")
        if self._pending_name is not None:
            raise XContentGenerationError(f"Field [{self._pending_name}] has no value")
        self._stack.pop()
        return self

    def start_array(self, name: str | None = None) -> XContentBuilder:
        if name is not None:
            self.field_name(name)
        arr: list[Any] = []
        self._add(arr)
        self._stack.append(arr)
        return self

    def end_array(self) -> XContentBuilder:
        if not self._stack or not isinstance(self._stack[-1], list):
            raise XContentGenerationError("end_array() without a matching start_array()")
        self._stack.pop()
        return self

    def field_name(self, name: str) -> XContentBuilder:
        if not self._stack or not isinstance(self._stack[-1], dict):
            raise XContentGenerationError(f"Field [{name}] written outside of an object")
        if self._pending_name is not None:
            raise XContentGenerationError(f"Field [{self._pending_name}] has no value")
        if name in self._stack[-1]:
            raise XContentGenerationError(f"Field [{name}] written twice")
        self._pending_name = name
        return self

    def field(self, name: str, value: Any, params: Params | None = None) -> XContentBuilder:
        self.field_name(name)
        return self.value(value, params)

    def value(self, value: Any, params: Params | None = None) -> XContentBuilder:
        if hasattr(value, "to_x_content"):
            value.to_x_content(self, params)
        elif isinstance(value, (list, tuple)):
            self.start_array()
            for item in value:
                self.value(item, params)
            self.end_array()
        elif isinstance(value, Mapping):
            self.start_object()
            for key, item in value.items():
                self.field(key, item, params)
            self.end_object()
        elif value is None or isinstance(value, (str, bool, int, float)):
            self._add(value)
        else:
            raise XContentGenerationError(f"Cannot write a value of type {type(value).__name__}")
        return self

    def _add(self, value: Any) -> None:
        if not self._stack:
            if self._root is not _UNSET:
                raise XContentGenerationError("Document already has a root value")
            self._root = value
            return
        top = self._stack[-1]
        if isinstance(top, dict):
            if self._pending_name is None:
                raise XContentGenerationError("Value written inside an object without a field name")
            top[self._pending_name] = value
            self._pending_name = None
        else:
            top.append(value)

    def build(self) -> Any:
        """Return the finished document."""
        if self._stack:
            raise XContentGenerationError(f"{len(self._stack)} unclosed object(s) or array(s)")
        if self._root is _UNSET:
            raise XContentGenerationError("Nothing was written")
        return self._root

    def to_json(self, pretty: bool = False) -> str:
        if pretty:
            return json.dumps(self.build(), indent=2, ensure_ascii=False)
        return json.dumps(self.build(), separators=(",", ":"), ensure_ascii=False)

    def bytes(self) -> bytes:
        return self.to_json().encode("utf-8")
