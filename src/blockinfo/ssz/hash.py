"""
`hash_tree_root`: the SSZ root of any value in a beacon block.

A block's root is the root of its message, and that root is what the
chain uses as the block's identifier.
"""

from __future__ import annotations

from functools import singledispatch

from blockinfo.types import (
    BaseBitlist,
    BaseBitvector,
    BaseByteList,
    BaseBytes,
    BaseUint,
    Bytes32,
    Container,
    SSZList,
    SSZVector,
)

from .chunks import BITS_PER_CHUNK, chunk_count, pack_bits, pack_bytes
from .merkleization import Merkle


@singledispatch
def hash_tree_root(value: object) -> Bytes32:
    """
    Raises:
        TypeError: If `value` is not an SSZ value.
    """
    raise TypeError(f"hash_tree_root: unsupported value type {type(value).__name__}")


@hash_tree_root.register(BaseUint)
@hash_tree_root.register(BaseBytes)
def _packed(value: BaseUint | BaseBytes) -> Bytes32:
    return Merkle.merkleize(pack_bytes(value.encode_bytes()))


@hash_tree_root.register
def _byte_list(value: BaseByteList) -> Bytes32:
    limit = chunk_count(type(value).LIMIT)
    return Merkle.mix_in_length(Merkle.merkleize(pack_bytes(value.data), limit), len(value.data))


@hash_tree_root.register
def _bitvector(value: BaseBitvector) -> Bytes32:
    return Merkle.merkleize(pack_bits(value.data), chunk_count(type(value).LENGTH, BITS_PER_CHUNK))


@hash_tree_root.register
def _bitlist(value: BaseBitlist) -> Bytes32:
    limit = chunk_count(type(value).LIMIT, BITS_PER_CHUNK)
    return Merkle.mix_in_length(Merkle.merkleize(pack_bits(value.data), limit), len(value.data))


def _elements_root(value: SSZVector | SSZList, capacity: int) -> Bytes32:
    element_type = type(value).ELEMENT_TYPE
    if issubclass(element_type, BaseUint):
        # Basic elements share chunks.
        limit = chunk_count(capacity * element_type.get_byte_length())
        return Merkle.merkleize(pack_bytes(value.encode_bytes()), limit)
    return Merkle.merkleize([hash_tree_root(element) for element in value], capacity)


@hash_tree_root.register
def _vector(value: SSZVector) -> Bytes32:
    return _elements_root(value, type(value).LENGTH)


@hash_tree_root.register
def _list(value: SSZList) -> Bytes32:
    return Merkle.mix_in_length(_elements_root(value, type(value).LIMIT), len(value))


@hash_tree_root.register
def _container(value: Container) -> Bytes32:
    # Declaration order is the leaf order.
    roots = [hash_tree_root(getattr(value, name)) for name, _ in value.field_types()]
    return Merkle.merkleize(roots)
