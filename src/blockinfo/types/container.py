"""
SSZ containers: the named-field records every beacon block is built from.

Declaration order is SSZ order, and field names are the Beacon-API JSON
keys, so one class definition serves both the node's JSON and the SSZ
encoding.
"""

from __future__ import annotations

from typing import Any, cast

from typing_extensions import Self

from .base import StrictBaseModel
from .exceptions import SSZDecodeError, SSZTypeError
from .layout import OFFSET_BYTE_LENGTH, decode_offset, encode_parts, slice_variable, split_fixed
from .ssz_base import SSZType


class Container(StrictBaseModel, SSZType):
    """
    A record of SSZ-typed fields.

        class Checkpoint(Container):
            epoch: Uint64
            root: Bytes32

    Subclasses that add fields keep the parent's fields first, which is
    how each fork extends the previous fork's block body.
    """

    @classmethod
    def field_types(cls) -> list[tuple[str, type[SSZType]]]:
        """Field names with their SSZ types, in declaration order."""
        return [
            (name, cast(type[SSZType], info.annotation)) for name, info in cls.model_fields.items()
        ]

    @classmethod
    def is_fixed_size(cls) -> bool:
        return all(field_type.is_fixed_size() for _, field_type in cls.field_types())

    @classmethod
    def get_byte_length(cls) -> int:
        if not cls.is_fixed_size():
            raise SSZTypeError(f"{cls.__name__} is variable-size")
        return sum(field_type.get_byte_length() for _, field_type in cls.field_types())

    def encode_bytes(self) -> bytes:
        return encode_parts(
            [
                (field_type.is_fixed_size(), getattr(self, name).encode_bytes())
                for name, field_type in self.field_types()
            ]
        )

    @classmethod
    def decode_bytes(cls, data: bytes) -> Self:
        """
        Raises:
            SSZTruncatedError: If `data` ends inside the fixed part.
            SSZOffsetError: If a variable-size field's offset is invalid.
            SSZDecodeError: If a fixed-size container has trailing bytes.
        """
        layout = cls.field_types()
        sizes = [
            field_type.get_byte_length() if field_type.is_fixed_size() else OFFSET_BYTE_LENGTH
            for _, field_type in layout
        ]
        pieces, fixed_end = split_fixed(cls.__name__, data, sizes)

        values: dict[str, Any] = {}
        offsets: list[tuple[str, int]] = []
        for (name, field_type), piece in zip(layout, pieces):
            if field_type.is_fixed_size():
                values[name] = field_type.decode_bytes(piece)
            else:
                offsets.append((name, decode_offset(piece)))

        if not offsets and fixed_end != len(data):
            raise SSZDecodeError(cls.__name__, f"expected {fixed_end} bytes, got {len(data)}")

        field_types = dict(layout)
        variable = slice_variable(cls.__name__, data, fixed_end, offsets)
        for (name, _), piece in zip(offsets, variable):
            values[name] = field_types[name].decode_bytes(piece)

        return cls(**values)
