"""
Offset-table layout shared by containers and sequences.

A composite value encodes as a fixed part followed by a variable part.
Fixed-size members sit in the fixed part directly. Each variable-size
member leaves a 4-byte little-endian offset there instead, pointing at
its bytes in the variable part:

    [fixed_1][offset_2][fixed_3]...[variable_2]...
"""

from __future__ import annotations

from typing import Final, Sequence

from .exceptions import SSZDecodeError, SSZOffsetError, SSZTruncatedError

OFFSET_BYTE_LENGTH: Final = 4
"""Width of one offset in the fixed part."""


def encode_offset(offset: int) -> bytes:
    return offset.to_bytes(OFFSET_BYTE_LENGTH, "little")


def decode_offset(data: bytes) -> int:
    return int.from_bytes(data, "little")


def encode_parts(parts: Sequence[tuple[bool, bytes]]) -> bytes:
    """
    Lay out encoded members in order.

    Args:
        parts: `(is_fixed_size, encoding)` for each member.
    """
    fixed_size = sum(len(data) if fixed else OFFSET_BYTE_LENGTH for fixed, data in parts)
    head, tail = bytearray(), bytearray()
    for fixed, data in parts:
        if fixed:
            head += data
        else:
            head += encode_offset(fixed_size + len(tail))
            tail += data
    return bytes(head + tail)


def split_fixed(type_name: str, data: bytes, sizes: Sequence[int]) -> tuple[list[bytes], int]:
    """
    Cut the fixed part of `data` into pieces of the given sizes.

    Returns:
        The pieces and the total length of the fixed part.

    Raises:
        SSZTruncatedError: If `data` ends inside a piece.
    """
    pieces = []
    position = 0
    for size in sizes:
        piece = data[position : position + size]
        if len(piece) != size:
            raise SSZTruncatedError(type_name, expected_bytes=size, actual_bytes=len(piece))
        pieces.append(piece)
        position += size
    return pieces, position


def slice_variable(
    type_name: str, data: bytes, fixed_end: int, offsets: Sequence[tuple[str, int]]
) -> list[bytes]:
    """
    Cut the variable part of `data` at the given offsets.

    Each member runs from its offset to the next member's offset, and the
    last one to the end of `data`.

    Raises:
        SSZOffsetError: If an offset is inside the fixed part, out of order,
            or past the end.
    """
    ends = [start for _, start in offsets[1:]] + [len(data)]
    pieces = []
    for (name, start), end in zip(offsets, ends):
        if not fixed_end <= start <= end <= len(data):
            raise SSZOffsetError(type_name, field_name=name, start=start, end=end)
        pieces.append(data[start:end])
    return pieces


def split_uniform(type_name: str, data: bytes, size: int) -> list[bytes]:
    """
    Cut `data` into back-to-back pieces of `size` bytes.

    Raises:
        SSZDecodeError: If `data` is not a whole number of pieces.
    """
    if len(data) % size:
        raise SSZDecodeError(
            type_name, f"{len(data)} bytes not divisible by element size {size}"
        )
    return [data[i : i + size] for i in range(0, len(data), size)]
