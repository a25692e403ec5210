"""Tests for the SSZ Container type."""

import pytest
from pydantic import ValidationError

from blockinfo.containers.phase0 import (
    AttestingIndices,
    Checkpoint,
    IndexedAttestation,
)
from blockinfo.types import Bytes32, SSZTypeError, Uint64
from blockinfo.types.exceptions import SSZOffsetError, SSZTruncatedError
from tests.blockinfo.helpers import make_attestation, make_bytes32


def _indexed_attestation(indices: list[int]) -> IndexedAttestation:
    attestation = make_attestation(slot=5, index=1)
    return IndexedAttestation(
        attesting_indices=AttestingIndices(data=[Uint64(i) for i in indices]),
        data=attestation.data,
        signature=attestation.signature,
    )


class TestFixedSizeContainer:
    """Tests for containers of fixed-size fields only."""

    def test_size(self) -> None:
        """The byte length is the sum of the field lengths."""
        assert Checkpoint.is_fixed_size()
        assert Checkpoint.get_byte_length() == 8 + 32

    def test_encoding_is_field_concatenation(self) -> None:
        """Fields are written in declaration order."""
        checkpoint = Checkpoint(epoch=Uint64(3), root=make_bytes32(7))

        assert checkpoint.encode_bytes() == Uint64(3).encode_bytes() + b"\x07" * 32
        assert Checkpoint.decode_bytes(checkpoint.encode_bytes()) == checkpoint

    def test_truncated_input_raises(self) -> None:
        """Running out of bytes names the expected and actual counts."""
        with pytest.raises(SSZTruncatedError) as exc_info:
            Checkpoint.decode_bytes(b"\x00" * 10)

        assert exc_info.value.expected_bytes == 32
        assert exc_info.value.actual_bytes == 2


class TestVariableSizeContainer:
    """Tests for containers with variable-size fields."""

    def test_variable_size(self) -> None:
        """A container with a list field has no fixed length."""
        assert not IndexedAttestation.is_fixed_size()
        with pytest.raises(SSZTypeError, match="variable-size"):
            IndexedAttestation.get_byte_length()

    def test_offset_points_past_fixed_part(self) -> None:
        """The list's offset is the length of the fixed part."""
        encoded = _indexed_attestation([1, 2]).encode_bytes()

        # offset + AttestationData (128) + signature (96)
        assert int.from_bytes(encoded[:4], "little") == 4 + 128 + 96
        assert len(encoded) == 4 + 128 + 96 + 2 * 8

    def test_decode_recovers_value(self) -> None:
        """Decoding an encoding gives back an equal container."""
        value = _indexed_attestation([4, 5, 6])
        assert IndexedAttestation.decode_bytes(value.encode_bytes()) == value

    @pytest.mark.parametrize("offset", [0, 10_000])
    def test_bad_offset_raises(self, offset: int) -> None:
        """Offsets inside the fixed part or past the end are rejected."""
        encoded = bytearray(_indexed_attestation([1]).encode_bytes())
        encoded[:4] = offset.to_bytes(4, "little")

        with pytest.raises(SSZOffsetError) as exc_info:
            IndexedAttestation.decode_bytes(bytes(encoded))

        assert exc_info.value.field_name == "attesting_indices"


class TestModelBehaviour:
    """Tests for the Pydantic side of containers."""

    def test_json_uses_api_conventions(self) -> None:
        """Keys are snake_case; integers are decimal strings; bytes are hex."""
        checkpoint = Checkpoint(epoch=Uint64(3), root=Bytes32.zero())

        assert checkpoint.model_dump(mode="json") == {"epoch": "3", "root": "0x" + "00" * 32}

    def test_validates_api_json(self) -> None:
        """The API's JSON form validates back to the container."""
        checkpoint = Checkpoint.model_validate({"epoch": "3", "root": "0x" + "07" * 32})
        assert checkpoint == Checkpoint(epoch=Uint64(3), root=make_bytes32(7))

    def test_unknown_field_rejected(self) -> None:
        """Unknown keys fail validation."""
        with pytest.raises(ValidationError):
            Checkpoint.model_validate({"epoch": "3", "root": "0x" + "00" * 32, "extra": "1"})

    def test_frozen(self) -> None:
        """Containers are immutable."""
        checkpoint = Checkpoint(epoch=Uint64(3), root=Bytes32.zero())
        with pytest.raises(ValidationError):
            checkpoint.epoch = Uint64(4)  # type: ignore[misc]
