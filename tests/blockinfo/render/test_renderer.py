"""Tests for block rendering dispatch."""

import json

import pytest

from blockinfo.containers import DataVersion, DenebBlock, parse_versioned_block
from blockinfo.errors import UnknownSchemaVersion, UnsupportedCombination
from blockinfo.render import BlockRenderer, OutputMode, format_text
from tests.blockinfo.helpers import (
    make_blob_sidecar,
    make_bytes48,
    make_signed_block,
    make_timing,
    make_versioned_block,
)

TIMING = make_timing()

LATER_FORKS = [v for v in DataVersion if v is not DataVersion.PHASE0]


@pytest.fixture
def renderer() -> BlockRenderer:
    """Renderer over mainnet timing with a zero genesis."""
    return BlockRenderer(TIMING)


class TestOutputMode:
    """Tests for output mode selection."""

    @pytest.mark.parametrize(
        "json_output, ssz_output, mode",
        [
            (False, False, OutputMode.TEXT),
            (True, False, OutputMode.JSON),
            (False, True, OutputMode.SSZ),
            (True, True, OutputMode.JSON),
        ],
    )
    def test_from_flags(self, json_output: bool, ssz_output: bool, mode: OutputMode) -> None:
        """JSON wins over SSZ, and text is the default."""
        assert OutputMode.from_flags(json_output, ssz_output) is mode

    def test_only_text_separates_events(self) -> None:
        """Only the text report is followed by a blank line when streaming."""
        assert OutputMode.TEXT.separates_events
        assert not OutputMode.JSON.separates_events
        assert not OutputMode.SSZ.separates_events


class TestJsonOutput:
    """Tests for JSON rendering."""

    @pytest.mark.parametrize("version", list(DataVersion))
    def test_single_line_that_parses_back(
        self, renderer: BlockRenderer, version: DataVersion
    ) -> None:
        """JSON output is one line that parses back to the same block."""
        block = make_versioned_block(version, slot=77)

        output = renderer.render(block, OutputMode.JSON)

        assert output.endswith("\n")
        assert output.count("\n") == 1
        parsed = parse_versioned_block(version.value, json.loads(output))
        assert parsed.block == block.block

    def test_uses_api_conventions(self, renderer: BlockRenderer) -> None:
        """Integers are decimal strings and bytes are hex."""
        output = renderer.render(make_versioned_block(slot=77), OutputMode.JSON)
        data = json.loads(output)

        assert data["message"]["slot"] == "77"
        assert data["signature"] == "0x" + "99" * 96
        assert data["message"]["body"]["attestations"] == []


class TestSszOutput:
    """Tests for SSZ rendering."""

    @pytest.mark.parametrize("version", LATER_FORKS)
    def test_hex_line_decodes_to_block(
        self, renderer: BlockRenderer, version: DataVersion
    ) -> None:
        """SSZ output is the unprefixed hex of the signed block's encoding."""
        block = make_versioned_block(version)

        output = renderer.render(block, OutputMode.SSZ)

        assert output.endswith("\n")
        assert not output.startswith("0x")
        decoded = version.block_type.decode_bytes(bytes.fromhex(output.strip()))
        assert decoded == block.block

    def test_phase0_is_unsupported(self, renderer: BlockRenderer) -> None:
        """Phase0 blocks offer no SSZ output."""
        with pytest.raises(UnsupportedCombination) as exc_info:
            renderer.render(make_versioned_block(DataVersion.PHASE0), OutputMode.SSZ)

        assert exc_info.value.version == "phase0"
        assert exc_info.value.mode == "ssz"


class TestTextOutput:
    """Tests for text rendering."""

    @pytest.mark.parametrize("version", list(DataVersion))
    def test_matches_report(self, renderer: BlockRenderer, version: DataVersion) -> None:
        """Text output is the report for the signed block."""
        block = make_versioned_block(version)
        assert renderer.render(block, OutputMode.TEXT) == format_text(block.block, TIMING)

    def test_verbose_flag_passed_through(self) -> None:
        """A verbose renderer produces the verbose report."""
        block = make_versioned_block()
        output = BlockRenderer(TIMING, verbose=True).render(block, OutputMode.TEXT)

        assert output == format_text(block.block, TIMING, verbose=True)
        assert "Signature: " in output

    def test_deneb_sidecars_reach_report(self, renderer: BlockRenderer) -> None:
        """Attached sidecars are counted in the report."""
        commitments = [make_bytes48(1), make_bytes48(2), make_bytes48(3)]
        signed = make_signed_block(DataVersion.DENEB, blob_commitments=commitments)
        sidecars = tuple(make_blob_sidecar(i, c) for i, c in enumerate(commitments))

        output = renderer.render(DenebBlock(signed, sidecars), OutputMode.TEXT)

        assert "Blob sidecars: 3" in output.splitlines()

    def test_sidecars_do_not_change_json(self, renderer: BlockRenderer) -> None:
        """Sidecars only feed the text report."""
        signed = make_signed_block(DataVersion.DENEB, blob_commitments=[make_bytes48(1)])
        with_sidecars = DenebBlock(signed, (make_blob_sidecar(0, make_bytes48(1)),))

        assert renderer.render(with_sidecars, OutputMode.JSON) == renderer.render(
            DenebBlock(signed), OutputMode.JSON
        )


class TestUnknownVariant:
    """Tests for values outside the known variants."""

    @pytest.mark.parametrize("mode", list(OutputMode))
    def test_raises(self, renderer: BlockRenderer, mode: OutputMode) -> None:
        """An unknown variant renders nothing."""
        with pytest.raises(UnknownSchemaVersion):
            renderer.render(make_signed_block(), mode)  # type: ignore[arg-type]
