# GENERATED CODE - DO NOT MODIFY
# Source: main/v7/response.json
# API version: 7
from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from json_to_wire_model.xcontent import (
    ConstructingObjectParser,
    Params,
    ParseField,
    XContentBuilder,
    constructor_arg,
    string_value,
)


@dataclass(frozen=True)
class MainResponseModel7:
    """Wire model for the object at [<root>]."""

    name: str | None
    cluster_name: str | None
    cluster_uuid: str | None
    tagline: str | None

    PARSER: ClassVar[ConstructingObjectParser[MainResponseModel7]]

    def to_x_content(self, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder:
        builder.start_object()
        builder.field("name", self.name, params)
        builder.field("cluster_name", self.cluster_name, params)
        builder.field("cluster_uuid", self.cluster_uuid, params)
        builder.field("tagline", self.tagline, params)
        builder.end_object()
        return builder

    @classmethod
    def from_x_content(cls, source) -> MainResponseModel7:
        return cls.PARSER.parse(source)


MainResponseModel7.PARSER = ConstructingObjectParser(
    "MainResponseModel7",
    lambda a: MainResponseModel7(
        a[0],
        a[1],
        a[2],
        a[3],
    ),
    [
        constructor_arg(ParseField("name"), 0, string_value),
        constructor_arg(ParseField("cluster_name"), 1, string_value),
        constructor_arg(ParseField("cluster_uuid"), 2, string_value),
        constructor_arg(ParseField("tagline"), 3, string_value),
    ],
)
