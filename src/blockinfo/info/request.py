"""
Block info requests and sessions.

A request is what the caller asked for. A session is a request bound to
the network timing and renderer it runs with. The session is passed
explicitly through every fetch and render; nothing is held globally.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass, field
from typing import TextIO

from blockinfo.chain import NetworkTiming
from blockinfo.errors import UsageError
from blockinfo.render import BlockRenderer, OutputMode


@dataclass(frozen=True, slots=True)
class BlockInfoRequest:
    """
    One invocation of the tool.

    Exactly one of `block_id` and `block_time` must be given.
    """

    block_id: str | None = None
    """Slot number, block root, or a named identifier such as "head"."""

    block_time: str | None = None
    """Time expression resolved to a slot before fetching."""

    json_output: bool = False
    ssz_output: bool = False

    stream: bool = False
    """Keep rendering each new head block after the first render."""

    quiet: bool = False
    """Only check that the block exists; render nothing."""

    verbose: bool = False

    def __post_init__(self) -> None:
        if not self.block_id and not self.block_time:
            raise UsageError("no block ID or block time")
        if self.block_id and self.block_time:
            raise UsageError("only one of block ID and block time may be given")

    @property
    def mode(self) -> OutputMode:
        """The output mode selected by the flags."""
        return OutputMode.from_flags(self.json_output, self.ssz_output)


@dataclass(frozen=True, slots=True)
class BlockInfoSession:
    """A request bound to its network timing and output."""

    request: BlockInfoRequest

    timing: NetworkTiming
    """Read once when the session opens; fixed for its lifetime."""

    block_id: str
    """The identifier of the first block, after time resolution."""

    output: TextIO = field(default_factory=lambda: sys.stdout)
    """Where rendered blocks are written."""

    @property
    def mode(self) -> OutputMode:
        return self.request.mode

    @property
    def renderer(self) -> BlockRenderer:
        return BlockRenderer(self.timing, verbose=self.request.verbose)
