"""
Bitfields: fixed-length `BaseBitvector` and bounded `BaseBitlist`.

Bits pack little-endian: bit `i` is bit `i % 8` of byte `i // 8`. A
bitlist also sets one delimiter bit just past its last bit, which is how
its length is recovered from the bytes. On the Beacon API both are the
`0x`-hex of those bytes.

    class SyncCommitteeBits(BaseBitvector):
        LENGTH = 512

    class AggregationBits(BaseBitlist):
        LIMIT = 2048
"""

from __future__ import annotations

from typing import Any, ClassVar, Iterable

from pydantic import Field, field_validator, model_serializer
from typing_extensions import Self

from .byte_arrays import to_hex
from .exceptions import SSZDecodeError, SSZTypeError, SSZValueError
from .ssz_base import SSZModel


def bits_to_bytes(bits: Iterable[bool], byte_count: int) -> bytearray:
    packed = bytearray(byte_count)
    for i, bit in enumerate(bits):
        if bit:
            packed[i // 8] |= 1 << (i % 8)
    return packed


def bytes_to_bits(data: bytes, count: int) -> tuple[bool, ...]:
    return tuple(bool(data[i // 8] >> (i % 8) & 1) for i in range(count))


def _as_bits(value: Any) -> tuple[bool, ...]:
    if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
        raise SSZTypeError(f"Bits must be an iterable of bools, got {type(value).__name__}")
    bits = tuple(value)
    for bit in bits:
        if bit not in (0, 1):
            raise SSZValueError(f"A bit must be 0 or 1, got {bit!r}")
    return tuple(bool(bit) for bit in bits)


class _Bitfield(SSZModel):
    data: tuple[bool, ...] = Field(default=())

    @classmethod
    def _from_json_value(cls, value: Any) -> Any:
        if isinstance(value, str):
            return cls.decode_bytes(bytes.fromhex(value.removeprefix("0x"))).data
        return value

    @model_serializer(mode="plain")
    def _to_hex(self) -> str:
        return to_hex(self.encode_bytes())

    def count_set(self) -> int:
        """Number of bits set."""
        return sum(self.data)


class BaseBitvector(_Bitfield):
    """Exactly `LENGTH` bits."""

    LENGTH: ClassVar[int]

    @field_validator("data", mode="before")
    @classmethod
    def _check_length(cls, value: Any) -> tuple[bool, ...]:
        if not hasattr(cls, "LENGTH"):
            raise SSZTypeError(f"{cls.__name__} must define LENGTH")
        bits = _as_bits(value)
        if len(bits) != cls.LENGTH:
            raise SSZValueError(
                f"{cls.__name__} requires exactly {cls.LENGTH} bits, got {len(bits)}"
            )
        return bits

    @classmethod
    def is_fixed_size(cls) -> bool:
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        return (cls.LENGTH + 7) // 8

    def encode_bytes(self) -> bytes:
        return bytes(bits_to_bytes(self.data, self.get_byte_length()))

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        if len(data) != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {len(data)}"
            )
        return cls(data=bytes_to_bits(data, cls.LENGTH))


class BaseBitlist(_Bitfield):
    """Up to `LIMIT` bits."""

    LIMIT: ClassVar[int]

    @field_validator("data", mode="before")
    @classmethod
    def _check_limit(cls, value: Any) -> tuple[bool, ...]:
        if not hasattr(cls, "LIMIT"):
            raise SSZTypeError(f"{cls.__name__} must define LIMIT")
        bits = _as_bits(value)
        if len(bits) > cls.LIMIT:
            raise SSZValueError(
                f"{cls.__name__} cannot exceed {cls.LIMIT} bits, got {len(bits)}"
            )
        return bits

    @classmethod
    def is_fixed_size(cls) -> bool:
        return False

    @classmethod
    def get_byte_length(cls) -> int:
        raise SSZTypeError(f"{cls.__name__} is variable-size")

    def encode_bytes(self) -> bytes:
        count = len(self.data)
        packed = bits_to_bytes(self.data, count // 8 + 1)
        packed[count // 8] |= 1 << (count % 8)
        return bytes(packed)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        The highest set bit of the last byte is the delimiter.

        Raises:
            SSZDecodeError: If there is no delimiter or the length exceeds `LIMIT`.
        """
        if not data or data[-1] == 0:
            raise SSZDecodeError(cls.__name__, "has no delimiter bit")
        count = 8 * (len(data) - 1) + data[-1].bit_length() - 1
        if count > cls.LIMIT:
            raise SSZDecodeError(cls.__name__, f"length {count} exceeds limit {cls.LIMIT}")
        return cls(data=bytes_to_bits(data, count))
