"""
Domain objects of the main (root) endpoint.

These are the version-independent values the rest of a server works with.
Wire models of each API version are translated to and from them by the
adapters in :mod:`json_to_wire_model.adapters`.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Flavor(Enum):
    DEFAULT = "default"
    OSS = "oss"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display_name(cls, name: str, strict: bool = True) -> Flavor:
        """
        Look up a flavor by its wire name.

        Args:
            name: Wire name such as ``"default"``
            strict: If False, names this version does not know map to UNKNOWN

        Raises:
            ValueError: If strict and the name is unknown
        """
        for flavor in cls:
            if flavor.value == name:
                return flavor
        if strict:
            raise ValueError(f"unexpected distribution flavor [{name}]; your distribution is broken")
        return cls.UNKNOWN


class BuildType(Enum):
    DEB = "deb"
    DOCKER = "docker"
    RPM = "rpm"
    TAR = "tar"
    ZIP = "zip"
    UNKNOWN = "unknown"

    @property
    def display_name(self) -> str:
        return self.value

    @classmethod
    def from_display_name(cls, name: str, strict: bool = True) -> BuildType:
        """Same contract as :meth:`Flavor.from_display_name`."""
        for build_type in cls:
            if build_type.value == name:
                return build_type
        if strict:
            raise ValueError(f"unexpected distribution type [{name}]; your distribution is broken")
        return cls.UNKNOWN


@dataclass(frozen=True)
class Version:
    number: str
    lucene_version: str
    minimum_wire_compatibility_version: str
    minimum_index_compatibility_version: str


@dataclass(frozen=True)
class Build:
    flavor: Flavor
    type: BuildType
    hash: str
    date: str
    is_snapshot: bool
    qualified_version: str


@dataclass(frozen=True)
class MainResponse:
    """What a node reports about itself and its cluster."""

    node_name: str
    version: Version
    cluster_name: str
    cluster_uuid: str
    build: Build


# Version of this node; used where the wire format carries none
CURRENT_VERSION = Version(
    number="8.0.0",
    lucene_version="8.6.2",
    minimum_wire_compatibility_version="7.10.0",
    minimum_index_compatibility_version="7.0.0",
)

# Placeholder build for wire formats that carry no build information
EMPTY_BUILD = Build(
    flavor=Flavor.UNKNOWN,
    type=BuildType.UNKNOWN,
    hash="",
    date="",
    is_snapshot=False,
    qualified_version="",
)
