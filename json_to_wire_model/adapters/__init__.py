"""
Version adapters.

Translate domain objects to and from the generated wire model of the API
version a request asked for. The REST boundary only calls
:func:`to_x_content` and :func:`from_x_content` with that version.
"""

from __future__ import annotations

from typing import Any

from ..pipeline.errors import WireModelError
from ..xcontent import Params, XContentBuilder
from . import main_v7, main_v8
from .base import (
    AdapterError,
    AdapterLintError,
    AdapterMapping,
    FieldRule,
    OnMissing,
    apply_rule,
    lint_mapping,
)

ADAPTERS: dict[int, AdapterMapping] = {
    main_v7.MAPPING.api_version: main_v7.MAPPING,
    main_v8.MAPPING.api_version: main_v8.MAPPING,
}

SUPPORTED_VERSIONS = tuple(sorted(ADAPTERS))


class UnsupportedVersionError(KeyError, WireModelError):
    """No adapter exists for the requested API version."""

    def __init__(self, api_version: int):
        self.api_version = api_version
        super().__init__(api_version)

    def __str__(self) -> str:
        supported = ", ".join(str(v) for v in SUPPORTED_VERSIONS)
        return f"Unsupported API version [{self.api_version}], expected one of [{supported}]"


def get_adapter(api_version: int) -> AdapterMapping:
    try:
        return ADAPTERS[api_version]
    except KeyError:
        raise UnsupportedVersionError(api_version) from None


def lint_all() -> list[AdapterMapping]:
    """Lint every registered mapping; returns them on success."""
    mappings = [ADAPTERS[v] for v in SUPPORTED_VERSIONS]
    for mapping in mappings:
        lint_mapping(mapping)
    return mappings


def to_x_content(domain: Any, builder: XContentBuilder, params: Params | None, api_version: int) -> XContentBuilder:
    """Write a domain object in the wire format of ``api_version``."""
    return get_adapter(api_version).to_x_content(domain, builder, params)


def from_x_content(parser: Any, api_version: int) -> Any:
    """Read a domain object from the wire format of ``api_version``."""
    return get_adapter(api_version).from_x_content(parser)


__all__ = [
    "ADAPTERS",
    "AdapterError",
    "AdapterLintError",
    "AdapterMapping",
    "FieldRule",
    "OnMissing",
    "SUPPORTED_VERSIONS",
    "UnsupportedVersionError",
    "apply_rule",
    "from_x_content",
    "get_adapter",
    "lint_all",
    "lint_mapping",
    "to_x_content",
]
