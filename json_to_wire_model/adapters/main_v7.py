"""
Main endpoint adapter for API version 7.

The v7 wire format carries neither version nor build information: both are
dropped when encoding and replaced by ``CURRENT_VERSION`` and
``EMPTY_BUILD`` when decoding.
"""

from __future__ import annotations

from ..domain import CURRENT_VERSION, EMPTY_BUILD, MainResponse
from ..models.main.v7 import MainResponseModel7
from ..xcontent import Params, XContentBuilder
from .base import AdapterMapping, FieldRule, OnMissing, apply_rule, domain_field_paths, rules_by_field

TAGLINE = "You Know, for Search"

RULES = rules_by_field(
    FieldRule("name"),
    FieldRule("cluster_name"),
    FieldRule("cluster_uuid", OnMissing.DEFAULT_VALUE, "_na_"),
    FieldRule("tagline", OnMissing.DEFAULT_VALUE, TAGLINE),
)


def to_wire_model(response: MainResponse) -> MainResponseModel7:
    return MainResponseModel7(
        response.node_name,
        response.cluster_name,
        response.cluster_uuid,
        TAGLINE,
    )


def from_wire_model(model: MainResponseModel7) -> MainResponse:
    return MainResponse(
        node_name=apply_rule(RULES["name"], model.name),
        # Not carried by v7
        version=CURRENT_VERSION,
        cluster_name=apply_rule(RULES["cluster_name"], model.cluster_name),
        cluster_uuid=apply_rule(RULES["cluster_uuid"], model.cluster_uuid),
        build=EMPTY_BUILD,
    )


MAPPING = AdapterMapping(
    name="main",
    api_version=7,
    wire_type=MainResponseModel7,
    to_wire=to_wire_model,
    from_wire=from_wire_model,
    rules=RULES,
    domain_fields=domain_field_paths(MainResponse),
    mapped_fields=frozenset({"node_name", "cluster_name", "cluster_uuid"}),
    dropped_fields=frozenset({"version", "build"}),
)


def to_x_content(response: MainResponse, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder:
    return MAPPING.to_x_content(response, builder, params)


def from_x_content(parser) -> MainResponse:
    return MAPPING.from_x_content(parser)
