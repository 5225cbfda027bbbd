# GENERATED CODE - DO NOT MODIFY
# Source: main/v8/response.json
# API version: 8
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

from .version import Version


@dataclass(frozen=True)
class MainResponseModel8:
    """Wire model for the object at [<root>]."""

    name: str | None
    cluster_name: str | None
    cluster_uuid: str | None
    version: Version | None
    tagline: str | None

    PARSER: ClassVar[ConstructingObjectParser[MainResponseModel8]]

    def to_x_content(self, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder:
        builder.start_object()
        builder.field("name", self.name, params)
        builder.field("cluster_name", self.cluster_name, params)
        builder.field("cluster_uuid", self.cluster_uuid, params)
        builder.field("version", self.version, params)
        builder.field("tagline", self.tagline, params)
        builder.end_object()
        return builder

    @classmethod
    def from_x_content(cls, source) -> MainResponseModel8:
        return cls.PARSER.parse(source)


MainResponseModel8.PARSER = ConstructingObjectParser(
    "MainResponseModel8",
    lambda a: MainResponseModel8(
        a[0],
        a[1],
        a[2],
        a[3],
        a[4],
    ),
    [
        constructor_arg(ParseField("name"), 0, string_value),
        constructor_arg(ParseField("cluster_name"), 1, string_value),
        constructor_arg(ParseField("cluster_uuid"), 2, string_value),
        constructor_arg(ParseField("version"), 3, Version.PARSER),
        constructor_arg(ParseField("tagline"), 4, string_value),
    ],
)
