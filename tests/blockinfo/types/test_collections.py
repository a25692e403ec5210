"""Tests for the SSZ Vector and List types."""

import pytest
from pydantic import ValidationError

from blockinfo.containers.bellatrix import Transaction, Transactions
from blockinfo.types import (
    Bytes4,
    SSZDecodeError,
    SSZList,
    SSZTypeError,
    SSZValueError,
    SSZVector,
    Uint64,
)

# Errors raised directly by SSZ validation or wrapped by Pydantic.
ValueOrValidationError = (SSZValueError, ValidationError)


class Uint64List4(SSZList[Uint64]):
    """A list of up to 4 Uint64 values."""

    ELEMENT_TYPE = Uint64
    LIMIT = 4


class Bytes4Vector2(SSZVector[Bytes4]):
    """A vector of exactly 2 Bytes4 values."""

    ELEMENT_TYPE = Bytes4
    LENGTH = 2


class TestList:
    """Tests for the variable-length List type."""

    def test_validates_json_elements(self) -> None:
        """Decimal strings become typed elements."""
        values = Uint64List4.model_validate(["1", "2"])

        assert values.elements == [Uint64(1), Uint64(2)]
        assert all(isinstance(value, Uint64) for value in values)

    def test_serializes_as_json_array(self) -> None:
        """A list is a plain JSON array of its elements' JSON forms."""
        values = Uint64List4(data=[Uint64(1), Uint64(2)])

        assert values.model_dump(mode="json") == ["1", "2"]
        assert values.model_dump_json() == '["1","2"]'

    def test_exceeding_limit_raises(self) -> None:
        """More than LIMIT elements is rejected."""
        with pytest.raises(ValueOrValidationError):
            Uint64List4(data=[Uint64(0)] * 5)

    def test_invalid_element_raises(self) -> None:
        """An element that cannot become the element type is rejected."""
        with pytest.raises(SSZTypeError, match="Expected Uint64"):
            Uint64List4.model_validate(["not a number"])

    def test_fixed_size_elements_encode_back_to_back(self) -> None:
        """Fixed-size elements have no offsets."""
        values = Uint64List4(data=[Uint64(1), Uint64(2)])
        encoded = values.encode_bytes()

        assert encoded == Uint64(1).encode_bytes() + Uint64(2).encode_bytes()
        assert Uint64List4.decode_bytes(encoded) == values

    def test_decode_partial_element_raises(self) -> None:
        """The scope must be a whole number of elements."""
        with pytest.raises(SSZDecodeError, match="not divisible"):
            Uint64List4.decode_bytes(b"\x00" * 12)

    def test_sequence_protocol(self) -> None:
        """Length, iteration and indexing go through to the elements."""
        values = Uint64List4(data=[Uint64(7), Uint64(8), Uint64(9)])

        assert len(values) == 3
        assert list(values) == [7, 8, 9]
        assert values[1] == Uint64(8)
        assert list(values[1:]) == [Uint64(8), Uint64(9)]


class TestVariableSizeList:
    """Tests for lists of variable-size elements."""

    def test_encoding_uses_offsets(self) -> None:
        """Each element is located by a 4-byte offset ahead of the data."""
        transactions = Transactions(
            data=[Transaction(data=b"\x01"), Transaction(data=b"\x02\x03")]
        )

        assert transactions.encode_bytes() == bytes.fromhex("08000000" "09000000" "01" "0203")

    def test_decode_recovers_elements(self) -> None:
        """Decoding follows the offsets back to each element."""
        decoded = Transactions.decode_bytes(bytes.fromhex("08000000" "09000000" "01" "0203"))

        assert [bytes(tx) for tx in decoded] == [b"\x01", b"\x02\x03"]

    def test_decode_empty(self) -> None:
        """Zero bytes decode to an empty list."""
        assert len(Transactions.decode_bytes(b"")) == 0

    def test_decode_misaligned_offset_raises(self) -> None:
        """The first offset must be a whole number of offsets."""
        with pytest.raises(SSZDecodeError, match="invalid offset"):
            Transactions.decode_bytes(b"\x03\x00\x00\x00")

    def test_json_is_array_of_hex(self) -> None:
        """Byte-list elements serialize as hex strings inside the array."""
        transactions = Transactions.model_validate(["0x01", "0x0203"])

        assert transactions.model_dump(mode="json") == ["0x01", "0x0203"]


class TestVector:
    """Tests for the fixed-length Vector type."""

    def test_wrong_length_raises(self) -> None:
        """Exactly LENGTH elements are required."""
        with pytest.raises(ValueOrValidationError):
            Bytes4Vector2(data=[Bytes4(b"\x00" * 4)])

    def test_json_round_trip(self) -> None:
        """A vector of byte arrays is an array of hex strings."""
        vector = Bytes4Vector2.model_validate(["0x01020304", "0x05060708"])

        assert vector.model_dump(mode="json") == ["0x01020304", "0x05060708"]
        assert vector[0] == Bytes4(b"\x01\x02\x03\x04")

    def test_fixed_size_encoding(self) -> None:
        """A vector of fixed-size elements is their concatenation."""
        vector = Bytes4Vector2(data=[Bytes4(b"\x01" * 4), Bytes4(b"\x02" * 4)])

        assert Bytes4Vector2.get_byte_length() == 8
        assert vector.encode_bytes() == b"\x01" * 4 + b"\x02" * 4
        assert Bytes4Vector2.decode_bytes(vector.encode_bytes()) == vector

    def test_decode_wrong_scope_raises(self) -> None:
        """The scope must equal the vector's byte length."""
        with pytest.raises(SSZDecodeError, match="expected 8 bytes"):
            Bytes4Vector2.decode_bytes(b"\x00" * 7)
