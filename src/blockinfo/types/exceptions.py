"""
Errors raised by the SSZ types.

`SSZTypeError` and `SSZValueError` also derive from the matching builtin,
so Pydantic reports value problems raised inside validators as
`ValidationError` while shape problems surface unchanged.
"""

from __future__ import annotations


class SSZError(Exception):
    """
    Base class of every SSZ failure.

    Attributes:
        message: Human-readable error description.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class SSZTypeError(SSZError, TypeError):
    """A type is incompletely defined, or a value cannot become the declared type."""


class SSZValueError(SSZError, ValueError):
    """A value of the right type breaks a length or limit rule."""


class SSZDecodeError(SSZValueError):
    """
    SSZ bytes do not describe a value of the target type.

    Attributes:
        type_name: The type being decoded.
        detail: What was wrong with the bytes.
    """

    def __init__(self, type_name: str, detail: str) -> None:
        self.type_name = type_name
        self.detail = detail
        super().__init__(f"Failed to decode {type_name}: {detail}")


class SSZTruncatedError(SSZDecodeError):
    """The bytes end in the middle of a fixed-size part."""

    def __init__(self, type_name: str, *, expected_bytes: int, actual_bytes: int) -> None:
        self.expected_bytes = expected_bytes
        self.actual_bytes = actual_bytes
        super().__init__(type_name, f"expected {expected_bytes} bytes, got {actual_bytes}")


class SSZOffsetError(SSZDecodeError):
    """An offset points into the fixed part, backwards, or past the end."""

    def __init__(self, type_name: str, *, field_name: str, start: int, end: int) -> None:
        self.field_name = field_name
        self.start = start
        self.end = end
        super().__init__(
            type_name, f"invalid offsets for field '{field_name}' (start={start}, end={end})"
        )
