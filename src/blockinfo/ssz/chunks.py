"""
Chunking of encoded values for merkleization.

Leaves of an SSZ Merkle tree are 32-byte chunks. Basic values, byte
strings and bitfields are packed into chunks from their encoding.
"""

from __future__ import annotations

from typing import Final, Sequence

from blockinfo.types import Bytes32

BYTES_PER_CHUNK: Final = 32
BITS_PER_CHUNK: Final = BYTES_PER_CHUNK * 8


def chunk_count(size: int, per_chunk: int = BYTES_PER_CHUNK) -> int:
    """Chunks needed for `size` units at `per_chunk` units per chunk."""
    return -(-size // per_chunk)


def pack_bytes(data: bytes) -> list[Bytes32]:
    """Split `data` into chunks, zero-padding the last one."""
    padded = data.ljust(chunk_count(len(data)) * BYTES_PER_CHUNK, b"\x00")
    starts = range(0, len(padded), BYTES_PER_CHUNK)
    return [Bytes32(padded[i : i + BYTES_PER_CHUNK]) for i in starts]


def pack_bits(bits: Sequence[bool]) -> list[Bytes32]:
    """
    Pack bits little-endian into chunks.

    No bitlist delimiter is added. A bitlist's length is mixed into its
    root instead.
    """
    packed = bytearray(chunk_count(len(bits), 8))
    for i, bit in enumerate(bits):
        if bit:
            packed[i // 8] |= 1 << (i % 8)
    return pack_bytes(bytes(packed))
