"""
Byte strings: fixed-length `BaseBytes` and bounded `BaseByteList`.

Roots, keys, signatures and addresses are fixed-length. Extra data and
transactions are byte lists. Both travel on the Beacon API as `0x`-hex.
"""

from __future__ import annotations

from typing import Any, ClassVar

from pydantic import Field, field_validator, model_serializer
from pydantic.annotated_handlers import GetCoreSchemaHandler
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import SSZDecodeError, SSZTypeError, SSZValueError
from .ssz_base import SSZModel, SSZType


def to_hex(data: bytes) -> str:
    """Render bytes in the Beacon-API `0x`-prefixed lowercase form."""
    return "0x" + bytes(data).hex()


def _as_bytes(value: Any) -> bytes:
    """Accept raw bytes, or hex with or without the `0x` prefix."""
    if isinstance(value, str):
        return bytes.fromhex(value.removeprefix("0x"))
    if isinstance(value, (bytes, bytearray)):
        return bytes(value)
    raise SSZTypeError(f"Expected bytes or hex string, got {type(value).__name__}")


class BaseBytes(bytes, SSZType):
    """A byte string of exactly `LENGTH` bytes. Its encoding is itself."""

    LENGTH: ClassVar[int]

    def __new__(cls, value: bytes | bytearray | str = b"") -> Self:
        """
        Raises:
            SSZTypeError: If `value` is neither bytes nor a hex string.
            ValueError: If `value` is not hex, or has the wrong length.
        """
        data = _as_bytes(value)
        if len(data) != cls.LENGTH:
            raise SSZValueError(
                f"{cls.__name__} expects exactly {cls.LENGTH} bytes, got {len(data)}"
            )
        return super().__new__(cls, data)

    @classmethod
    def zero(cls) -> Self:
        return cls(bytes(cls.LENGTH))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any) -> BaseBytes:
            if isinstance(value, cls):
                return value
            try:
                return cls(value)
            except SSZTypeError as exc:
                raise SSZValueError(exc.message) from exc

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                lambda value, info: to_hex(value) if info.mode_is_json() else bytes(value),
                info_arg=True,
            ),
        )

    @classmethod
    def is_fixed_size(cls) -> bool:
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.LENGTH

    def encode_bytes(self) -> bytes:
        return bytes(self)

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        return cls(data)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({bytes(self).hex()})"

    def __hash__(self) -> int:
        return hash((type(self), bytes(self)))


class Bytes4(BaseBytes):
    """Fork version."""

    LENGTH = 4


class Bytes20(BaseBytes):
    """Execution-layer address."""

    LENGTH = 20


class Bytes32(BaseBytes):
    """Roots and hashes."""

    LENGTH = 32


class Bytes48(BaseBytes):
    """BLS public key, KZG commitment or KZG proof."""

    LENGTH = 48


class Bytes96(BaseBytes):
    """BLS signature."""

    LENGTH = 96


class Bytes256(BaseBytes):
    """Execution logs bloom."""

    LENGTH = 256


ZERO_HASH = Bytes32.zero()
"""The all-zero 32-byte root."""


class BaseByteList(SSZModel):
    """A byte string of at most `LIMIT` bytes. Its encoding is its contents."""

    LIMIT: ClassVar[int]

    data: bytes = Field(default=b"")

    @field_validator("data", mode="before")
    @classmethod
    def _check_limit(cls, value: Any) -> bytes:
        if not hasattr(cls, "LIMIT"):
            raise SSZTypeError(f"{cls.__name__} must define LIMIT")
        data = _as_bytes(value)
        if len(data) > cls.LIMIT:
            raise SSZValueError(f"{cls.__name__} length {len(data)} exceeds limit {cls.LIMIT}")
        return data

    @model_serializer(mode="plain")
    def _to_hex(self) -> str:
        return to_hex(self.data)

    @classmethod
    def is_fixed_size(cls) -> bool:
        return False

    @classmethod
    def get_byte_length(cls) -> int:
        raise SSZTypeError(f"{cls.__name__} is variable-size")

    def encode_bytes(self) -> bytes:
        return self.data

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        if len(data) > cls.LIMIT:
            raise SSZDecodeError(cls.__name__, f"length {len(data)} exceeds limit {cls.LIMIT}")
        return cls(data=data)

    def __bytes__(self) -> bytes:
        return self.data

    def hex(self) -> str:
        return self.data.hex()
