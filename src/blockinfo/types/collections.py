"""
Homogeneous sequences: fixed-length `SSZVector` and bounded `SSZList`.

Subclasses name the element type and the length or limit:

    class Transactions(SSZList[Transaction]):
        ELEMENT_TYPE = Transaction
        LIMIT = MAX_TRANSACTIONS_PER_PAYLOAD

The generic parameter types element access for checkers; `ELEMENT_TYPE`
drives validation and decoding at runtime. Fixed-size elements encode
back-to-back, variable-size ones behind an offset table.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, ClassVar, Generic, Iterable, Iterator, Sequence, TypeVar, overload

from pydantic import (
    Field,
    SerializerFunctionWrapHandler,
    TypeAdapter,
    field_validator,
    model_serializer,
)
from typing_extensions import Self

from .exceptions import SSZDecodeError, SSZTypeError, SSZValueError
from .layout import OFFSET_BYTE_LENGTH, decode_offset, encode_parts, slice_variable, split_uniform
from .ssz_base import SSZModel, SSZType

T = TypeVar("T", bound=SSZType)


@lru_cache(maxsize=None)
def _adapter(element_type: type[SSZType]) -> TypeAdapter[Any]:
    return TypeAdapter(element_type)


class _Sequence(SSZModel, Generic[T]):
    ELEMENT_TYPE: ClassVar[type[SSZType]]

    data: Sequence[T] = Field(default_factory=tuple)

    @model_serializer(mode="wrap")
    def _as_array(self, handler: SerializerFunctionWrapHandler) -> list[Any]:
        return handler(self)["data"]

    @classmethod
    def _typed(cls, value: Any) -> tuple[SSZType, ...]:
        """Convert input elements, JSON forms included, to `ELEMENT_TYPE`."""
        if isinstance(value, (str, bytes)) or not isinstance(value, Iterable):
            raise SSZTypeError(f"Expected iterable, got {type(value).__name__}")
        elements = []
        for element in value:
            if not isinstance(element, cls.ELEMENT_TYPE):
                try:
                    element = _adapter(cls.ELEMENT_TYPE).validate_python(element)
                except (TypeError, ValueError) as exc:
                    raise SSZTypeError(
                        f"Expected {cls.ELEMENT_TYPE.__name__}, got {type(element).__name__}"
                    ) from exc
            elements.append(element)
        return tuple(elements)

    def encode_bytes(self) -> bytes:
        fixed = self.ELEMENT_TYPE.is_fixed_size()
        return encode_parts([(fixed, element.encode_bytes()) for element in self.data])

    @classmethod
    def _decode_variable(cls, data: bytes, count: int) -> list[SSZType]:
        """Decode `count` variable-size elements located by the offset table."""
        table = data[: count * OFFSET_BYTE_LENGTH]
        offsets = [
            (f"[{i}]", decode_offset(table[i * OFFSET_BYTE_LENGTH : (i + 1) * OFFSET_BYTE_LENGTH]))
            for i in range(count)
        ]
        pieces = slice_variable(cls.__name__, data, len(table), offsets)
        return [cls.ELEMENT_TYPE.decode_bytes(piece) for piece in pieces]

    def __iter__(self) -> Iterator[T]:  # type: ignore[override]
        return iter(self.data)

    @overload
    def __getitem__(self, index: int) -> T: ...
    @overload
    def __getitem__(self, index: slice) -> Sequence[T]: ...

    def __getitem__(self, index: int | slice) -> T | Sequence[T]:
        return self.data[index]

    @property
    def elements(self) -> list[T]:
        return list(self.data)


class SSZVector(_Sequence[T]):
    """Exactly `LENGTH` elements."""

    LENGTH: ClassVar[int]

    @field_validator("data", mode="before")
    @classmethod
    def _check_length(cls, value: Any) -> tuple[SSZType, ...]:
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LENGTH"):
            raise SSZTypeError(f"{cls.__name__} must define ELEMENT_TYPE and LENGTH")
        elements = cls._typed(value)
        if len(elements) != cls.LENGTH:
            raise SSZValueError(
                f"{cls.__name__} requires exactly {cls.LENGTH} elements, got {len(elements)}"
            )
        return elements

    @classmethod
    def is_fixed_size(cls) -> bool:
        return cls.ELEMENT_TYPE.is_fixed_size()

    @classmethod
    def get_byte_length(cls) -> int:
        if not cls.is_fixed_size():
            raise SSZTypeError(f"{cls.__name__} is variable-size")
        return cls.ELEMENT_TYPE.get_byte_length() * cls.LENGTH

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        if not cls.is_fixed_size():
            return cls(data=cls._decode_variable(data, cls.LENGTH))
        if len(data) != cls.get_byte_length():
            raise SSZDecodeError(
                cls.__name__, f"expected {cls.get_byte_length()} bytes, got {len(data)}"
            )
        pieces = split_uniform(cls.__name__, data, cls.ELEMENT_TYPE.get_byte_length())
        return cls(data=[cls.ELEMENT_TYPE.decode_bytes(piece) for piece in pieces])


class SSZList(_Sequence[T]):
    """At most `LIMIT` elements. The root mixes in the actual count."""

    LIMIT: ClassVar[int]

    @field_validator("data", mode="before")
    @classmethod
    def _check_limit(cls, value: Any) -> tuple[SSZType, ...]:
        if not hasattr(cls, "ELEMENT_TYPE") or not hasattr(cls, "LIMIT"):
            raise SSZTypeError(f"{cls.__name__} must define ELEMENT_TYPE and LIMIT")
        elements = cls._typed(value)
        if len(elements) > cls.LIMIT:
            raise SSZValueError(f"{cls.__name__} exceeds limit of {cls.LIMIT}, got {len(elements)}")
        return elements

    @classmethod
    def is_fixed_size(cls) -> bool:
        return False

    @classmethod
    def get_byte_length(cls) -> int:
        raise SSZTypeError(f"{cls.__name__} is variable-size")

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Raises:
            SSZDecodeError: If the bytes are misaligned or the offsets are invalid.
            SSZValueError: If the element count exceeds `LIMIT`.
        """
        if cls.ELEMENT_TYPE.is_fixed_size():
            pieces = split_uniform(cls.__name__, data, cls.ELEMENT_TYPE.get_byte_length())
            cls._check_count(len(pieces))
            return cls(data=[cls.ELEMENT_TYPE.decode_bytes(piece) for piece in pieces])

        if not data:
            return cls(data=[])
        # The first offset is the size of the offset table, which gives the count.
        first = decode_offset(data[:OFFSET_BYTE_LENGTH])
        misaligned = first % OFFSET_BYTE_LENGTH != 0
        if len(data) < OFFSET_BYTE_LENGTH or misaligned or not 0 < first <= len(data):
            raise SSZDecodeError(cls.__name__, f"invalid offset {first}")
        count = first // OFFSET_BYTE_LENGTH
        cls._check_count(count)
        return cls(data=cls._decode_variable(data, count))

    @classmethod
    def _check_count(cls, count: int) -> None:
        if count > cls.LIMIT:
            raise SSZValueError(f"{cls.__name__} exceeds limit of {cls.LIMIT}, got {count}")
