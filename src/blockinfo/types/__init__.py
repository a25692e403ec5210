"""SSZ types shared by every beacon block schema."""

from .base import ApiModel, StrictBaseModel
from .bitfields import BaseBitlist, BaseBitvector
from .byte_arrays import (
    ZERO_HASH,
    BaseByteList,
    BaseBytes,
    Bytes4,
    Bytes20,
    Bytes32,
    Bytes48,
    Bytes96,
    Bytes256,
    to_hex,
)
from .collections import SSZList, SSZVector
from .container import Container
from .exceptions import (
    SSZDecodeError,
    SSZError,
    SSZOffsetError,
    SSZTruncatedError,
    SSZTypeError,
    SSZValueError,
)
from .ssz_base import SSZModel, SSZType
from .uint import BaseUint, Uint64, Uint256

__all__ = [
    # Scalars and byte strings
    "BaseUint",
    "Uint64",
    "Uint256",
    "BaseBytes",
    "Bytes4",
    "Bytes20",
    "Bytes32",
    "Bytes48",
    "Bytes96",
    "Bytes256",
    "ZERO_HASH",
    "to_hex",
    # Composites
    "BaseByteList",
    "BaseBitvector",
    "BaseBitlist",
    "SSZList",
    "SSZVector",
    "Container",
    # Bases
    "SSZModel",
    "SSZType",
    "ApiModel",
    "StrictBaseModel",
    # Exceptions
    "SSZError",
    "SSZTypeError",
    "SSZValueError",
    "SSZDecodeError",
    "SSZTruncatedError",
    "SSZOffsetError",
]
