"""The SSZ type interface and the base model for single-field SSZ collections."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Iterator

from pydantic import model_validator
from typing_extensions import Self

from .base import StrictBaseModel


class SSZType(ABC):
    """
    What every value inside a beacon block can do.

    Sizes are known per type; encoding and decoding work on whole byte
    strings, since a block is always fetched and printed in one piece.
    """

    @classmethod
    @abstractmethod
    def is_fixed_size(cls) -> bool:
        """Whether every value of the type encodes to the same number of bytes."""

    @classmethod
    @abstractmethod
    def get_byte_length(cls) -> int:
        """
        Encoded size of a fixed-size type.

        Raises:
            TypeError: If the type is variable-size.
        """

    @abstractmethod
    def encode_bytes(self) -> bytes:
        """The SSZ encoding of the value."""

    @classmethod
    @abstractmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Parse exactly `data` as a value of the type.

        Raises:
            ValueError: If `data` is not a valid encoding.
        """


class SSZModel(StrictBaseModel, SSZType):
    """
    A Pydantic model whose only field, `data`, holds the collection contents.

    The Beacon API never shows the wrapper: lists are JSON arrays, and
    byte lists and bitfields are hex strings. Validation therefore
    accepts the bare JSON value, and subclasses emit it again with a
    model serializer.
    """

    @model_validator(mode="before")
    @classmethod
    def _wrap_bare_value(cls, value: Any) -> Any:
        if isinstance(value, (dict, cls)):
            return value
        return {"data": cls._from_json_value(value)}

    @classmethod
    def _from_json_value(cls, value: Any) -> Any:
        """Turn the bare JSON value into `data` input. Identity unless overridden."""
        return value

    def __len__(self) -> int:
        return len(self.data)  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[Any]:  # type: ignore[override]
        return iter(self.data)  # type: ignore[attr-defined]

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.data!r})"  # type: ignore[attr-defined]
