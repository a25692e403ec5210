"""Binary Merkle trees over 32-byte chunks."""

from __future__ import annotations

import hashlib
from typing import Final, Optional, Sequence

from blockinfo.types import ZERO_HASH, Bytes32

MAX_DEPTH: Final = 64
"""Deepest tree a beacon block needs. Every limit is below 2**64 chunks."""


def hash_pair(left: bytes, right: bytes) -> Bytes32:
    """SHA-256 of two concatenated nodes."""
    return Bytes32(hashlib.sha256(left + right).digest())


def next_power_of_two(n: int) -> int:
    """Smallest power of two that is at least `n`, and never below one."""
    return 1 if n <= 1 else 1 << (n - 1).bit_length()


def _zero_subtrees(depth: int) -> tuple[Bytes32, ...]:
    roots = [ZERO_HASH]
    while len(roots) <= depth:
        roots.append(hash_pair(roots[-1], roots[-1]))
    return tuple(roots)


ZERO_HASHES: Final = _zero_subtrees(MAX_DEPTH)
"""`ZERO_HASHES[d]` is the root of an all-zero subtree of depth `d`."""


class Merkle:
    """Merkle roots as SSZ computes them."""

    @staticmethod
    def merkleize(chunks: Sequence[Bytes32], limit: Optional[int] = None) -> Bytes32:
        """
        Root of `chunks` in a tree wide enough for `limit` chunks.

        Without a limit the tree is as wide as the chunks need. Empty
        leaves are never built: a node missing its right sibling is paired
        with the zero subtree of its level, so a list with a huge limit
        costs only what its real chunks cost.

        Raises:
            ValueError: If there are more chunks than `limit`.
        """
        if limit is not None and len(chunks) > limit:
            raise ValueError(f"merkleize: {len(chunks)} chunks exceed limit {limit}")
        width = next_power_of_two(len(chunks) if limit is None else limit)
        depth = width.bit_length() - 1
        if not chunks:
            return ZERO_HASHES[depth]

        nodes = list(chunks)
        for level in range(depth):
            if len(nodes) % 2:
                nodes.append(ZERO_HASHES[level])
            nodes = [hash_pair(nodes[i], nodes[i + 1]) for i in range(0, len(nodes), 2)]
        return nodes[0]

    @staticmethod
    def mix_in_length(root: Bytes32, length: int) -> Bytes32:
        """Hash a list's root with its length as a little-endian uint256."""
        if length < 0:
            raise ValueError("length must be non-negative")
        return hash_pair(root, length.to_bytes(32, "little"))
