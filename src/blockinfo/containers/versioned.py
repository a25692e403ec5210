"""
Version-tagged beacon blocks.

A block fetched from a beacon node is one of a closed set of schema
variants. Each variant is a small frozen dataclass wrapping the signed
block of its fork, and `VersionedBlock` is their union. Consumers
dispatch with `match`, so an unhandled variant is visible at the
dispatch site.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Type

from blockinfo.errors import UnknownSchemaVersion

from . import altair, bellatrix, capella, deneb, phase0


class DataVersion(Enum):
    """
    Enumerates block schema versions, bundling the version name with its block type.

    Attributes:
        value (str): The Beacon-API version name (e.g., "deneb").
        block_type (Type): The signed block container of that fork.
    """

    def __init__(self, value: str, block_type: Type[Any]):
        self._value_ = value
        self.block_type = block_type

    PHASE0 = ("phase0", phase0.SignedBeaconBlock)
    ALTAIR = ("altair", altair.SignedBeaconBlock)
    BELLATRIX = ("bellatrix", bellatrix.SignedBeaconBlock)
    CAPELLA = ("capella", capella.SignedBeaconBlock)
    DENEB = ("deneb", deneb.SignedBeaconBlock)

    @classmethod
    def from_name(cls, name: str) -> DataVersion:
        """
        Look up a version by its Beacon-API name.

        Raises:
            UnknownSchemaVersion: If the name is not a known fork.
        """
        # Members are built from tuples, so `cls(name)` cannot find them by name.
        wanted = name.lower()
        for version in cls:
            if version.value == wanted:
                return version
        raise UnknownSchemaVersion(name)


@dataclass(frozen=True, slots=True)
class Phase0Block:
    block: phase0.SignedBeaconBlock
    version = DataVersion.PHASE0


@dataclass(frozen=True, slots=True)
class AltairBlock:
    block: altair.SignedBeaconBlock
    version = DataVersion.ALTAIR


@dataclass(frozen=True, slots=True)
class BellatrixBlock:
    block: bellatrix.SignedBeaconBlock
    version = DataVersion.BELLATRIX


@dataclass(frozen=True, slots=True)
class CapellaBlock:
    block: capella.SignedBeaconBlock
    version = DataVersion.CAPELLA


@dataclass(frozen=True, slots=True)
class DenebBlock:
    """
    A Deneb block, together with its blob sidecars once they are fetched.

    Sidecars are empty until the orchestrator attaches them.
    """

    block: deneb.SignedBeaconBlock
    blob_sidecars: tuple[deneb.BlobSidecar, ...] = ()
    version = DataVersion.DENEB


VersionedBlock = Phase0Block | AltairBlock | BellatrixBlock | CapellaBlock | DenebBlock
"""A signed beacon block tagged with its schema version."""

_WRAPPERS: dict[DataVersion, type] = {
    DataVersion.PHASE0: Phase0Block,
    DataVersion.ALTAIR: AltairBlock,
    DataVersion.BELLATRIX: BellatrixBlock,
    DataVersion.CAPELLA: CapellaBlock,
    DataVersion.DENEB: DenebBlock,
}


def versioned_block(version: DataVersion, block: Any) -> VersionedBlock:
    """Wrap a signed block of `version` in its variant."""
    if type(block) is not version.block_type:
        raise TypeError(f"{version.value} expects {version.block_type.__name__}")
    return _WRAPPERS[version](block)


def parse_versioned_block(version_name: str, data: Any) -> VersionedBlock:
    """
    Build a variant from the Beacon-API `version` field and JSON `data`.

    Raises:
        UnknownSchemaVersion: If `version_name` is not a known fork.
        pydantic.ValidationError: If `data` does not match the fork's schema.
    """
    version = DataVersion.from_name(version_name)
    return versioned_block(version, version.block_type.model_validate(data))
