"""Output mode selection."""

from __future__ import annotations

from enum import Enum


class OutputMode(Enum):
    """How a block is written to standard output. Exactly one applies per render."""

    JSON = "json"
    """The full block as one line of Beacon-API JSON."""

    SSZ = "ssz"
    """The block's canonical SSZ bytes as one line of hex."""

    TEXT = "text"
    """A multi-line human-readable report."""

    @classmethod
    def from_flags(cls, json_output: bool, ssz_output: bool) -> OutputMode:
        """Pick a mode from the CLI flags; JSON wins over SSZ, and text is the default."""
        if json_output:
            return cls.JSON
        if ssz_output:
            return cls.SSZ
        return cls.TEXT

    @property
    def separates_events(self) -> bool:
        """Whether streamed renders are followed by a blank line."""
        return self is OutputMode.TEXT
