"""SSZ merkleization, used to compute block roots."""

from .hash import hash_tree_root
from .merkleization import Merkle

__all__ = [
    "Merkle",
    "hash_tree_root",
]
