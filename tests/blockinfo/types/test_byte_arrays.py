"""Tests for fixed-length byte arrays and variable-length byte lists."""

from typing import Any

import pytest
from pydantic import ValidationError, create_model

from blockinfo.types import BaseByteList, Bytes4, Bytes32, ZERO_HASH, to_hex


class ByteList8(BaseByteList):
    """A byte list with up to 8 bytes."""

    LIMIT = 8


class TestBytes:
    """Tests for fixed-length byte arrays."""

    @pytest.mark.parametrize("value", ["0xdeadbeef", "deadbeef", b"\xde\xad\xbe\xef"])
    def test_accepts_hex_and_bytes(self, value: Any) -> None:
        """Hex strings with or without the prefix and raw bytes are accepted."""
        assert bytes(Bytes4(value)) == b"\xde\xad\xbe\xef"

    def test_wrong_length_raises(self) -> None:
        """The length must match exactly."""
        with pytest.raises(ValueError, match="exactly 4 bytes"):
            Bytes4(b"\x00" * 3)

    def test_zero(self) -> None:
        """zero() is all zero bytes, and ZERO_HASH is the zero root."""
        assert Bytes32.zero() == b"\x00" * 32
        assert ZERO_HASH == Bytes32.zero()

    def test_json_is_prefixed_hex(self) -> None:
        """JSON mode emits lowercase 0x-hex, python mode the bytes."""
        model = create_model("Model", value=(Bytes4, ...))
        instance: Any = model(value="0xDEADBEEF")

        assert instance.model_dump_json() == '{"value":"0xdeadbeef"}'
        assert instance.model_dump()["value"] == b"\xde\xad\xbe\xef"

    def test_pydantic_rejects_non_bytes(self) -> None:
        """Integers are not coerced to bytes."""
        model = create_model("Model", value=(Bytes4, ...))
        with pytest.raises(ValidationError):
            model(value=1234)

    def test_to_hex(self) -> None:
        """to_hex produces the Beacon-API form."""
        assert to_hex(b"\x00\xab") == "0x00ab"
        assert to_hex(b"") == "0x"


class TestByteList:
    """Tests for variable-length byte lists."""

    def test_validate_from_hex_string(self) -> None:
        """The bare JSON hex string validates to a byte list."""
        value = ByteList8.model_validate("0x0102")
        assert value.data == b"\x01\x02"
        assert bytes(value) == b"\x01\x02"

    def test_serializes_as_hex(self) -> None:
        """A byte list serializes as the hex of its contents."""
        assert ByteList8(data=b"\x01\x02").model_dump_json() == '"0x0102"'
        assert ByteList8(data=b"").model_dump(mode="json") == "0x"

    def test_exceeding_limit_raises(self) -> None:
        """More than LIMIT bytes fails validation."""
        with pytest.raises(ValidationError):
            ByteList8(data=b"\x00" * 9)

    def test_encoding_is_raw_bytes(self) -> None:
        """The SSZ encoding of a byte list is its contents."""
        value = ByteList8(data=b"\xaa\xbb")
        assert value.encode_bytes() == b"\xaa\xbb"
        assert ByteList8.decode_bytes(b"\xaa\xbb") == value

    def test_decode_exceeding_limit_raises(self) -> None:
        """Decoding more than LIMIT bytes is rejected."""
        with pytest.raises(ValueError, match="exceeds limit"):
            ByteList8.decode_bytes(b"\x00" * 9)

    def test_equality_is_by_type_and_content(self) -> None:
        """Byte lists compare equal only with the same type and contents."""

        class OtherByteList8(BaseByteList):
            LIMIT = 8

        assert ByteList8(data=b"\x01") == ByteList8(data=b"\x01")
        assert ByteList8(data=b"\x01") != OtherByteList8(data=b"\x01")
