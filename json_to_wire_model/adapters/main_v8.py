"""
Main endpoint adapter for API version 8.

v8 nests version and build information under ``version``. Build flavor and
type are read leniently: a name this version does not know, sent by a peer
on another version, decodes to ``UNKNOWN`` instead of failing.

The wire carries a single ``version.number``: the build's qualified
version, or the release number when the build has none. The domain release
number is derived from it, so it is recorded as dropped rather than mapped.
"""

from __future__ import annotations

from ..domain import CURRENT_VERSION, Build, BuildType, Flavor, MainResponse, Version
from ..models.main.v8 import MainResponseModel8
from ..models.main.v8 import Version as VersionModel
from ..xcontent import Params, XContentBuilder
from .base import AdapterMapping, FieldRule, OnMissing, apply_rule, domain_field_paths, rules_by_field

TAGLINE = "You Know, for Search"

RULES = rules_by_field(
    FieldRule("name"),
    FieldRule("cluster_name"),
    FieldRule("cluster_uuid", OnMissing.DEFAULT_VALUE, "_na_"),
    FieldRule("version"),
    FieldRule("version.number"),
    FieldRule("version.build_flavor", OnMissing.SENTINEL_UNKNOWN, Flavor.UNKNOWN),
    FieldRule("version.build_type", OnMissing.SENTINEL_UNKNOWN, BuildType.UNKNOWN),
    FieldRule("version.build_hash", OnMissing.DEFAULT_VALUE, ""),
    FieldRule("version.build_date", OnMissing.DEFAULT_VALUE, ""),
    FieldRule("version.build_snapshot", OnMissing.DEFAULT_VALUE, False),
    FieldRule("version.lucene_version", OnMissing.DEFAULT_VALUE, CURRENT_VERSION.lucene_version),
    FieldRule(
        "version.minimum_wire_compatibility_version",
        OnMissing.DEFAULT_VALUE,
        CURRENT_VERSION.minimum_wire_compatibility_version,
    ),
    FieldRule(
        "version.minimum_index_compatibility_version",
        OnMissing.DEFAULT_VALUE,
        CURRENT_VERSION.minimum_index_compatibility_version,
    ),
    FieldRule("tagline", OnMissing.DEFAULT_VALUE, TAGLINE),
)


def _release_number(qualified_version: str) -> str:
    """``8.0.0-SNAPSHOT`` -> ``8.0.0``"""
    return qualified_version.split("-", 1)[0]


def _lenient_flavor(name: str) -> Flavor:
    return Flavor.from_display_name(name, strict=False)


def _lenient_build_type(name: str) -> BuildType:
    return BuildType.from_display_name(name, strict=False)


def to_wire_model(response: MainResponse) -> MainResponseModel8:
    build = response.build
    version = response.version
    return MainResponseModel8(
        response.node_name,
        response.cluster_name,
        response.cluster_uuid,
        VersionModel(
            build.qualified_version or version.number,
            build.flavor.display_name,
            build.type.display_name,
            build.hash,
            build.date,
            build.is_snapshot,
            version.lucene_version,
            version.minimum_wire_compatibility_version,
            version.minimum_index_compatibility_version,
        ),
        TAGLINE,
    )


def from_wire_model(model: MainResponseModel8) -> MainResponse:
    wire_version = apply_rule(RULES["version"], model.version)
    number = apply_rule(RULES["version.number"], wire_version.number)
    return MainResponse(
        node_name=apply_rule(RULES["name"], model.name),
        version=Version(
            number=_release_number(number),
            lucene_version=apply_rule(RULES["version.lucene_version"], wire_version.lucene_version),
            minimum_wire_compatibility_version=apply_rule(
                RULES["version.minimum_wire_compatibility_version"], wire_version.minimum_wire_compatibility_version
            ),
            minimum_index_compatibility_version=apply_rule(
                RULES["version.minimum_index_compatibility_version"], wire_version.minimum_index_compatibility_version
            ),
        ),
        cluster_name=apply_rule(RULES["cluster_name"], model.cluster_name),
        cluster_uuid=apply_rule(RULES["cluster_uuid"], model.cluster_uuid),
        build=Build(
            flavor=apply_rule(RULES["version.build_flavor"], wire_version.build_flavor, _lenient_flavor),
            type=apply_rule(RULES["version.build_type"], wire_version.build_type, _lenient_build_type),
            hash=apply_rule(RULES["version.build_hash"], wire_version.build_hash),
            date=apply_rule(RULES["version.build_date"], wire_version.build_date),
            is_snapshot=apply_rule(RULES["version.build_snapshot"], wire_version.build_snapshot),
            qualified_version=number,
        ),
    )


# Domain fields written to the wire only through build.qualified_version
DERIVED_FIELDS = frozenset({"version.number"})


MAPPING = AdapterMapping(
    name="main",
    api_version=8,
    wire_type=MainResponseModel8,
    to_wire=to_wire_model,
    from_wire=from_wire_model,
    rules=RULES,
    domain_fields=domain_field_paths(MainResponse),
    mapped_fields=frozenset(domain_field_paths(MainResponse)) - DERIVED_FIELDS,
    dropped_fields=DERIVED_FIELDS,
)


def to_x_content(response: MainResponse, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder:
    return MAPPING.to_x_content(response, builder, params)


def from_x_content(parser) -> MainResponse:
    return MAPPING.from_x_content(parser)
