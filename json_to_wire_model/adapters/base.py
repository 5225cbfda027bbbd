"""
Adapter mappings between domain objects and versioned wire models.

An ``AdapterMapping`` ties one generated wire model to the domain type of
the same entity for one API version. Every domain field is either mapped
to the wire or dropped explicitly, and every wire field of the generated
model carries a ``FieldRule`` saying what to do when a peer omits it.
``lint_mapping`` checks both coverage rules against the generated model.
"""

from __future__ import annotations

import dataclasses
import logging
import typing
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..pipeline.errors import WireModelError
from ..xcontent import ConstructingObjectParser, Params, ToXContent, XContentBuilder

logger = logging.getLogger(__name__)


class AdapterError(WireModelError):
    """A required wire field is missing and has no default or sentinel."""

    def __init__(self, message: str, field: str = ""):
        self.message = message
        self.field = field
        super().__init__(f"{message} [{field}]" if field else message)


class AdapterLintError(WireModelError):
    """An adapter mapping does not cover its domain type or wire model."""

    def __init__(self, mapping_name: str, problems: list[str]):
        self.mapping_name = mapping_name
        self.problems = problems
        super().__init__(f"Adapter [{mapping_name}] is incomplete: " + "; ".join(problems))


class OnMissing(Enum):
    """What decoding does with a wire field the peer did not send."""

    FAIL = "fail"
    DEFAULT_VALUE = "default_value"
    SENTINEL_UNKNOWN = "sentinel_unknown"


@dataclass(frozen=True)
class FieldRule:
    """
    Missing-value policy of one wire field.

    Args:
        field: Dotted wire path, e.g. ``"version.build_flavor"``
        on_missing: Policy applied when the value is absent or null
        default: Value substituted for DEFAULT_VALUE, or the sentinel for
            SENTINEL_UNKNOWN
    """

    field: str
    on_missing: OnMissing = OnMissing.FAIL
    default: Any = None

    def __post_init__(self):
        if self.on_missing == OnMissing.SENTINEL_UNKNOWN and self.default is None:
            raise ValueError(f"Rule for [{self.field}] needs a sentinel value")


def apply_rule(rule: FieldRule, value: Any, decode: Callable[[Any], Any] | None = None) -> Any:
    """
    Resolve one decoded wire value against its rule.

    Args:
        rule: The field's rule
        value: The value found on the wire, None if absent
        decode: Optional conversion applied to a present value

    Returns:
        The (decoded) value, or the rule's default/sentinel if absent

    Raises:
        AdapterError: If the value is absent and the rule is FAIL
    """
    if value is not None:
        return decode(value) if decode else value
    if rule.on_missing == OnMissing.FAIL:
        raise AdapterError("Missing required wire field", rule.field)
    logger.debug("Wire field [%s] missing, using %s %r", rule.field, rule.on_missing.value, rule.default)
    return rule.default


def rules_by_field(*rules: FieldRule) -> dict[str, FieldRule]:
    return {rule.field: rule for rule in rules}


def domain_field_paths(domain_type: type) -> tuple[str, ...]:
    """Dotted paths of the leaf fields of a (nested) domain dataclass."""
    paths: list[str] = []
    hints = typing.get_type_hints(domain_type)
    for f in dataclasses.fields(domain_type):
        field_type = hints[f.name]
        if dataclasses.is_dataclass(field_type):
            paths.extend(f"{f.name}.{sub}" for sub in domain_field_paths(field_type))
        else:
            paths.append(f.name)
    return tuple(paths)


def wire_field_paths(parser: ConstructingObjectParser, prefix: str = "") -> tuple[str, ...]:
    """Dotted paths of every wire field a generated parser declares, nested objects included."""
    paths: list[str] = []
    for declaration in sorted(parser.declarations, key=lambda d: d.position):
        path = f"{prefix}{declaration.parse_field.name}"
        paths.append(path)
        if isinstance(declaration.value_parser, ConstructingObjectParser):
            paths.extend(wire_field_paths(declaration.value_parser, f"{path}."))
    return tuple(paths)


def _covered(path: str, names: frozenset[str]) -> bool:
    parts = path.split(".")
    return any(".".join(parts[:i]) in names for i in range(1, len(parts) + 1))


@dataclass(frozen=True)
class AdapterMapping:
    """Translation of one entity between its domain type and a versioned wire model."""

    name: str
    api_version: int
    wire_type: type
    to_wire: Callable[[Any], ToXContent]
    from_wire: Callable[[Any], Any]
    rules: dict[str, FieldRule] = field(default_factory=dict)
    domain_fields: tuple[str, ...] = ()
    mapped_fields: frozenset[str] = frozenset()
    dropped_fields: frozenset[str] = frozenset()

    def to_x_content(self, domain: Any, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder:
        return self.to_wire(domain).to_x_content(builder, params)

    def from_x_content(self, source: Any) -> Any:
        return self.from_wire(self.wire_type.from_x_content(source))


def lint_mapping(mapping: AdapterMapping) -> None:
    """
    Check that a mapping covers its domain type and its wire model.

    A domain field is covered when it, or one of its enclosing fields, is
    mapped or dropped. Every wire field declared by the generated parser
    needs a rule, and every rule must name a declared wire field.

    Raises:
        AdapterLintError: Listing every coverage problem found
    """
    problems = []

    for path in mapping.domain_fields:
        if not _covered(path, mapping.mapped_fields | mapping.dropped_fields):
            problems.append(f"domain field [{path}] is neither mapped nor dropped")
    for path in sorted(mapping.mapped_fields & mapping.dropped_fields):
        problems.append(f"domain field [{path}] is both mapped and dropped")
    for path in sorted((mapping.mapped_fields | mapping.dropped_fields) - set(mapping.domain_fields)):
        if not any(domain_path.startswith(f"{path}.") for domain_path in mapping.domain_fields):
            problems.append(f"[{path}] is not a domain field")

    wire_fields = wire_field_paths(mapping.wire_type.PARSER)
    for path in wire_fields:
        if path not in mapping.rules:
            problems.append(f"wire field [{path}] has no rule")
    for path in sorted(set(mapping.rules) - set(wire_fields)):
        problems.append(f"rule for [{path}] matches no wire field")

    if problems:
        raise AdapterLintError(f"{mapping.name} v{mapping.api_version}", problems)
