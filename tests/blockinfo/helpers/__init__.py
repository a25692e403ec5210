"""Test helpers for blockinfo unit tests."""

from __future__ import annotations

from .builders import (
    make_attestation,
    make_blob_sidecar,
    make_block_response,
    make_bytes32,
    make_bytes48,
    make_head_event,
    make_signed_block,
    make_timing,
    make_versioned_block,
    make_voluntary_exit,
    make_withdrawal,
)
from .mocks import MockBeaconNode

__all__ = [
    # Builders
    "make_attestation",
    "make_blob_sidecar",
    "make_block_response",
    "make_bytes32",
    "make_bytes48",
    "make_head_event",
    "make_signed_block",
    "make_timing",
    "make_versioned_block",
    "make_voluntary_exit",
    "make_withdrawal",
    # Mocks
    "MockBeaconNode",
]
