"""Fixed-width unsigned integers."""

from __future__ import annotations

from typing import Any, ClassVar, SupportsInt

from pydantic import GetCoreSchemaHandler, GetJsonSchemaHandler
from pydantic.json_schema import JsonSchemaValue
from pydantic_core import core_schema
from typing_extensions import Self

from .exceptions import SSZDecodeError
from .ssz_base import SSZType


class BaseUint(int, SSZType):
    """
    An `int` limited to `BITS` bits, encoded little-endian.

    The Beacon API writes every integer as a decimal string (a uint64
    does not survive a JSON double), so Pydantic validation takes an
    `int` or such a string, and JSON output is a string.
    """

    BITS: ClassVar[int]

    def __new__(cls, value: SupportsInt) -> Self:
        """
        Raises:
            TypeError: For bool, float, str or bytes input. Use `from_decimal` for strings.
            OverflowError: If `value` does not fit in `BITS` unsigned bits.
        """
        if isinstance(value, (bool, float, str, bytes)):
            raise TypeError(f"Expected int, got {type(value).__name__}")
        number = int(value)
        if number < 0 or number.bit_length() > cls.BITS:
            raise OverflowError(f"{number} is out of range for {cls.__name__}")
        return super().__new__(cls, number)

    @classmethod
    def from_decimal(cls, value: str) -> Self:
        """Parse the Beacon-API form: ASCII digits only, no sign or prefix."""
        if not (value.isascii() and value.isdigit()):
            raise ValueError(f"{cls.__name__} expects a decimal string, got {value!r}")
        return cls(int(value))

    @classmethod
    def __get_pydantic_core_schema__(
        cls, source_type: Any, handler: GetCoreSchemaHandler
    ) -> core_schema.CoreSchema:
        def validate(value: Any) -> BaseUint:
            try:
                return cls.from_decimal(value) if isinstance(value, str) else cls(value)
            except (OverflowError, TypeError) as exc:
                raise ValueError(str(exc)) from exc

        def serialize(value: BaseUint, info: core_schema.SerializationInfo) -> int | str:
            return str(int(value)) if info.mode_is_json() else int(value)

        return core_schema.no_info_plain_validator_function(
            validate,
            serialization=core_schema.plain_serializer_function_ser_schema(
                serialize, info_arg=True
            ),
        )

    @classmethod
    def __get_pydantic_json_schema__(
        cls, schema: core_schema.CoreSchema, handler: GetJsonSchemaHandler
    ) -> JsonSchemaValue:
        return {"type": "string", "pattern": "^[0-9]+$", "format": f"uint{cls.BITS}"}

    @classmethod
    def is_fixed_size(cls) -> bool:
        return True

    @classmethod
    def get_byte_length(cls) -> int:
        return cls.BITS // 8

    def encode_bytes(self) -> bytes:
        return int(self).to_bytes(self.get_byte_length(), "little")

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        if len(data) != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected exactly {cls.get_byte_length()} bytes, got {len(data)}"
            )
        return cls(int.from_bytes(data, "little"))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({int(self)})"

    def __str__(self) -> str:
        return str(int(self))


class Uint64(BaseUint):
    """uint64: slots, epochs, indices, amounts and gas."""

    BITS = 64


class Uint256(BaseUint):
    """uint256: the execution base fee per gas."""

    BITS = 256
