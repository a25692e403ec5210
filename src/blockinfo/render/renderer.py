"""
Block rendering.

`BlockRenderer.render` turns a version-tagged block into exactly one
output string for the selected mode. Dispatch is an exhaustive match over
the block variants; a block of an unknown variant renders nothing.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from pydantic_core import PydanticSerializationError

from blockinfo.chain import NetworkTiming
from blockinfo.containers import (
    AltairBlock,
    BellatrixBlock,
    CapellaBlock,
    DataVersion,
    DenebBlock,
    Phase0Block,
    VersionedBlock,
    deneb,
    phase0,
)
from blockinfo.errors import EncodeError, UnknownSchemaVersion, UnsupportedCombination
from blockinfo.types import SSZError

from .modes import OutputMode
from .text import format_text

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BlockRenderer:
    """Renders blocks against one network's timing."""

    timing: NetworkTiming
    """Used by the text report for epochs and timestamps."""

    verbose: bool = False
    """Adds per-operation detail to the text report."""

    def render(self, block: VersionedBlock, mode: OutputMode) -> str:
        """
        Render `block` in `mode`.

        Returns:
            One JSON line, one hex line, or the text report; always newline-terminated.

        Raises:
            UnsupportedCombination: SSZ output was requested for a Phase0 block.
            EncodeError: The block could not be serialized.
            UnknownSchemaVersion: The block is not a known variant.
        """
        match block:
            case Phase0Block(signed):
                # No binary encoding is offered for Phase0.
                if mode is OutputMode.SSZ:
                    raise UnsupportedCombination(DataVersion.PHASE0.value, mode.value)
                return self._render(signed, block.version, mode)
            case AltairBlock(signed) | BellatrixBlock(signed) | CapellaBlock(signed):
                return self._render(signed, block.version, mode)
            case DenebBlock(signed, sidecars):
                # Sidecars only feed the text report.
                return self._render(signed, block.version, mode, sidecars)
            case _:
                raise UnknownSchemaVersion(type(block).__name__)

    def _render(
        self,
        signed: phase0.SignedBeaconBlock,
        version: DataVersion,
        mode: OutputMode,
        blob_sidecars: Sequence[deneb.BlobSidecar] = (),
    ) -> str:
        logger.debug(
            f"Rendering {version.value} block at slot {signed.message.slot} as {mode.value}"
        )
        match mode:
            case OutputMode.JSON:
                try:
                    return signed.model_dump_json() + "\n"
                except PydanticSerializationError as exc:
                    raise EncodeError(f"failed to generate JSON: {exc}") from exc
            case OutputMode.SSZ:
                try:
                    return signed.encode_bytes().hex() + "\n"
                except (SSZError, ValueError, TypeError) as exc:
                    raise EncodeError(f"failed to generate SSZ: {exc}") from exc
            case OutputMode.TEXT:
                return format_text(
                    signed, self.timing, verbose=self.verbose, blob_sidecars=blob_sidecars
                )
