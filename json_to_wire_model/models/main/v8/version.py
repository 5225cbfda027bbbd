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
    boolean_value,
    constructor_arg,
    string_value,
)


@dataclass(frozen=True)
class Version:
    """Wire model for the object at [version]."""

    number: str | None
    build_flavor: str | None
    build_type: str | None
    build_hash: str | None
    build_date: str | None
    build_snapshot: bool | None
    lucene_version: str | None
    minimum_wire_compatibility_version: str | None
    minimum_index_compatibility_version: str | None

    PARSER: ClassVar[ConstructingObjectParser[Version]]

    def to_x_content(self, builder: XContentBuilder, params: Params | None = None) -> XContentBuilder:
        builder.start_object()
        builder.field("number", self.number, params)
        builder.field("build_flavor", self.build_flavor, params)
        builder.field("build_type", self.build_type, params)
        builder.field("build_hash", self.build_hash, params)
        builder.field("build_date", self.build_date, params)
        builder.field("build_snapshot", self.build_snapshot, params)
        builder.field("lucene_version", self.lucene_version, params)
        builder.field("minimum_wire_compatibility_version", self.minimum_wire_compatibility_version, params)
        builder.field("minimum_index_compatibility_version", self.minimum_index_compatibility_version, params)
        builder.end_object()
        return builder

    @classmethod
    def from_x_content(cls, source) -> Version:
        return cls.PARSER.parse(source)


Version.PARSER = ConstructingObjectParser(
    "Version",
    lambda a: Version(
        a[0],
        a[1],
        a[2],
        a[3],
        a[4],
        a[5],
        a[6],
        a[7],
        a[8],
    ),
    [
        constructor_arg(ParseField("number"), 0, string_value),
        constructor_arg(ParseField("build_flavor"), 1, string_value),
        constructor_arg(ParseField("build_type"), 2, string_value),
        constructor_arg(ParseField("build_hash"), 3, string_value),
        constructor_arg(ParseField("build_date"), 4, string_value),
        constructor_arg(ParseField("build_snapshot"), 5, boolean_value),
        constructor_arg(ParseField("lucene_version"), 6, string_value),
        constructor_arg(ParseField("minimum_wire_compatibility_version"), 7, string_value),
        constructor_arg(ParseField("minimum_index_compatibility_version"), 8, string_value),
    ],
)
