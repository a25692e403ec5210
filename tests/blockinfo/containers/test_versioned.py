"""Tests for version-tagged blocks."""

import pytest
from pydantic import ValidationError

from blockinfo.containers import (
    AltairBlock,
    CapellaBlock,
    DataVersion,
    DenebBlock,
    Phase0Block,
    altair,
    capella,
    deneb,
    parse_versioned_block,
    phase0,
    versioned_block,
)
from blockinfo.errors import UnknownSchemaVersion
from tests.blockinfo.helpers import make_signed_block


class TestDataVersion:
    """Tests for the version enumeration."""

    @pytest.mark.parametrize(
        "name, version",
        [
            ("phase0", DataVersion.PHASE0),
            ("altair", DataVersion.ALTAIR),
            ("bellatrix", DataVersion.BELLATRIX),
            ("capella", DataVersion.CAPELLA),
            ("DENEB", DataVersion.DENEB),
        ],
    )
    def test_from_name(self, name: str, version: DataVersion) -> None:
        """API names map to versions, case-insensitively."""
        assert DataVersion.from_name(name) is version

    def test_unknown_name_raises(self) -> None:
        """A fork this tool does not know is reported by name."""
        with pytest.raises(UnknownSchemaVersion) as exc_info:
            DataVersion.from_name("electra")

        assert exc_info.value.version == "electra"

    def test_block_types(self) -> None:
        """Each version carries its fork's signed block type."""
        assert DataVersion.PHASE0.block_type is phase0.SignedBeaconBlock
        assert DataVersion.DENEB.block_type is deneb.SignedBeaconBlock


class TestVariants:
    """Tests for wrapping signed blocks in their variants."""

    def test_wraps_in_matching_variant(self) -> None:
        """versioned_block picks the variant of the version."""
        signed = make_signed_block(DataVersion.CAPELLA)
        block = versioned_block(DataVersion.CAPELLA, signed)

        assert isinstance(block, CapellaBlock)
        assert block.block is signed
        assert block.version is DataVersion.CAPELLA

    def test_later_fork_block_is_rejected(self) -> None:
        """A later fork's block is not accepted as an earlier fork's."""
        # Later forks subclass earlier ones, so this needs an exact type check.
        assert issubclass(altair.SignedBeaconBlock, phase0.SignedBeaconBlock)

        with pytest.raises(TypeError, match="phase0 expects SignedBeaconBlock"):
            versioned_block(DataVersion.PHASE0, make_signed_block(DataVersion.ALTAIR))

    def test_deneb_sidecars_default_empty(self) -> None:
        """A Deneb block carries no sidecars until they are attached."""
        block = versioned_block(DataVersion.DENEB, make_signed_block(DataVersion.DENEB))

        assert isinstance(block, DenebBlock)
        assert block.blob_sidecars == ()

    def test_variants_are_frozen(self) -> None:
        """Variants cannot be modified after construction."""
        block = Phase0Block(make_signed_block())
        with pytest.raises(AttributeError):
            block.block = make_signed_block(slot=2)  # type: ignore[misc]

    def test_match_dispatch(self) -> None:
        """Variants destructure positionally in match statements."""
        block = AltairBlock(make_signed_block(DataVersion.ALTAIR, sync_participants=3))

        match block:
            case AltairBlock(signed):
                assert signed.message.body.sync_aggregate.sync_committee_bits.count_set() == 3
            case _:
                pytest.fail("AltairBlock did not match its own pattern")


class TestParse:
    """Tests for parsing Beacon-API block responses."""

    @pytest.mark.parametrize("version", list(DataVersion))
    def test_parses_api_json(self, version: DataVersion) -> None:
        """The JSON a node serves for a block parses back to an equal block."""
        signed = make_signed_block(version, slot=9)

        block = parse_versioned_block(version.value, signed.model_dump(mode="json"))

        assert block.version is version
        assert type(block.block) is version.block_type
        assert block.block == signed

    def test_parses_json_with_operations(self) -> None:
        """Nested lists, bitfields and byte lists all parse from their API forms."""
        signed = make_signed_block(
            DataVersion.DENEB,
            transactions=[b"\x02\xf8", b"\x01"],
            blob_commitments=[],
        )
        data = signed.model_dump(mode="json")

        assert data["message"]["body"]["execution_payload"]["transactions"] == ["0x02f8", "0x01"]
        assert data["message"]["slot"] == "1"
        assert parse_versioned_block("deneb", data).block == signed

    def test_earlier_fork_json_does_not_parse_as_later_fork(self) -> None:
        """A Capella body lacks the fields Deneb requires."""
        data = make_signed_block(DataVersion.CAPELLA).model_dump(mode="json")

        with pytest.raises(ValidationError):
            parse_versioned_block("deneb", data)

    def test_later_fork_json_does_not_parse_as_earlier_fork(self) -> None:
        """Unknown fields are rejected, so a Deneb body is not a valid Capella body."""
        data = make_signed_block(DataVersion.DENEB).model_dump(mode="json")

        with pytest.raises(ValidationError):
            parse_versioned_block("capella", data)

    def test_unknown_version_raises(self) -> None:
        """An unknown version name is reported before the data is looked at."""
        with pytest.raises(UnknownSchemaVersion):
            parse_versioned_block("fulu", {})


class TestForkLayout:
    """Tests for the fork-by-fork growth of the block body."""

    def test_new_fields_append_in_order(self) -> None:
        """Each fork appends its body fields after the previous fork's."""
        phase0_fields = list(phase0.BeaconBlockBody.model_fields)
        capella_fields = list(capella.BeaconBlockBody.model_fields)
        deneb_fields = list(deneb.BeaconBlockBody.model_fields)

        assert capella_fields[: len(phase0_fields)] == phase0_fields
        assert capella_fields[-3:] == [
            "sync_aggregate",
            "execution_payload",
            "bls_to_execution_changes",
        ]
        assert deneb_fields == capella_fields + ["blob_kzg_commitments"]

    def test_overridden_payload_keeps_position(self) -> None:
        """Redeclaring the payload in a later fork keeps its SSZ position."""
        deneb_payload = list(deneb.ExecutionPayload.model_fields)

        assert deneb_payload[-3:] == ["withdrawals", "blob_gas_used", "excess_blob_gas"]
        assert deneb_payload.index("transactions") == 13
