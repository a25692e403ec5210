"""
Beacon block schemas for every supported fork.

Each fork module defines the containers that fork introduces or changes.
The body grows fork by fork, and its field order is the SSZ order.
"""

from . import altair, bellatrix, capella, deneb, phase0, presets
from .versioned import (
    AltairBlock,
    BellatrixBlock,
    CapellaBlock,
    DataVersion,
    DenebBlock,
    Phase0Block,
    VersionedBlock,
    parse_versioned_block,
    versioned_block,
)

__all__ = [
    "phase0",
    "altair",
    "bellatrix",
    "capella",
    "deneb",
    "presets",
    "DataVersion",
    "VersionedBlock",
    "Phase0Block",
    "AltairBlock",
    "BellatrixBlock",
    "CapellaBlock",
    "DenebBlock",
    "parse_versioned_block",
    "versioned_block",
]
