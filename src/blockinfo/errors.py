"""
Error taxonomy of the block info tool.

Every failure the tool reports is a `BlockInfoError`. Lower-level
exceptions are wrapped at the boundary where they occur, with the
original chained as `__cause__`.
"""

from __future__ import annotations


class BlockInfoError(Exception):
    """
    Base exception for all block info errors.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class UsageError(BlockInfoError):
    """The request is malformed (no block ID or block time, or both)."""


class ConfigError(BlockInfoError):
    """Chain timing could not be obtained from the beacon node."""


class ParseError(BlockInfoError):
    """
    A time expression could not be parsed.

    Attributes:
        form: The input form that was attempted ("hex string", "decimal string", "datetime").
        value: The raw input.
    """

    def __init__(self, form: str, value: str) -> None:
        self.form = form
        self.value = value
        super().__init__(f"failed to parse block time as {form}: {value!r}")


class FetchError(BlockInfoError):
    """A beacon node request failed or returned an unusable response."""


class EmptyBlockError(BlockInfoError):
    """No block exists at the requested identifier."""

    def __init__(self, block_id: str | None = None) -> None:
        self.block_id = block_id
        super().__init__("empty beacon block")


class RenderError(BlockInfoError):
    """A block could not be rendered."""


class EncodeError(RenderError):
    """Serializing a block to JSON or SSZ failed."""


class UnsupportedCombination(RenderError):
    """The requested output mode is not offered for the block's schema."""

    def __init__(self, version: str, mode: str) -> None:
        self.version = version
        self.mode = mode
        super().__init__(f"{mode} output is not supported for {version} blocks")


class UnknownSchemaVersion(RenderError):
    """The block's schema version is not one this tool knows."""

    def __init__(self, version: object) -> None:
        self.version = version
        super().__init__(f"unknown block version {version!r}")
