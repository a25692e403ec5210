"""
Human-readable block reports.

The report grows fork by fork in the same way the block body does, so
each section applies to a body of its fork or any later one.
"""

from __future__ import annotations

from typing import Sequence

from blockinfo.chain import ChainTime, NetworkTiming
from blockinfo.containers import altair, bellatrix, capella, deneb, phase0
from blockinfo.ssz import hash_tree_root
from blockinfo.types import to_hex


def _graffiti(raw: bytes) -> str:
    return raw.rstrip(b"\x00").decode("utf-8", errors="replace")


def _phase0_lines(
    block: phase0.BeaconBlock, chain_time: ChainTime, verbose: bool
) -> list[str]:
    body = block.body
    slot = int(block.slot)
    lines = [
        f"Slot: {slot}",
        f"Epoch: {chain_time.slot_to_epoch(slot)}",
        f"Timestamp: {chain_time.slot_start(slot):%Y-%m-%d %H:%M:%S}",
        f"Block root: {to_hex(hash_tree_root(block))}",
        f"Parent root: {to_hex(block.parent_root)}",
        f"State root: {to_hex(block.state_root)}",
        f"Proposer index: {int(block.proposer_index)}",
    ]
    if graffiti := _graffiti(body.graffiti):
        lines.append(f"Graffiti: {graffiti}")

    if verbose:
        lines += [
            f"RANDAO reveal: {to_hex(body.randao_reveal)}",
            f"Eth1 deposit count: {int(body.eth1_data.deposit_count)}",
            f"Eth1 deposit root: {to_hex(body.eth1_data.deposit_root)}",
            f"Eth1 block hash: {to_hex(body.eth1_data.block_hash)}",
        ]

    lines.append(f"Attestations: {len(body.attestations)}")
    if verbose:
        for i, attestation in enumerate(body.attestations):
            bits = attestation.aggregation_bits
            lines.append(
                f"  {i}: slot {int(attestation.data.slot)}, "
                f"committee {int(attestation.data.index)}, "
                f"{bits.count_set()}/{len(bits)} participated, "
                f"beacon block root {to_hex(attestation.data.beacon_block_root)}"
            )

    lines += [
        f"Attester slashings: {len(body.attester_slashings)}",
        f"Proposer slashings: {len(body.proposer_slashings)}",
        f"Deposits: {len(body.deposits)}",
        f"Voluntary exits: {len(body.voluntary_exits)}",
    ]
    if verbose:
        for signed_exit in body.voluntary_exits:
            lines.append(
                f"  Validator {int(signed_exit.message.validator_index)} "
                f"exits at epoch {int(signed_exit.message.epoch)}"
            )
    return lines


def _altair_lines(body: altair.BeaconBlockBody, verbose: bool) -> list[str]:
    bits = body.sync_aggregate.sync_committee_bits
    lines = [f"Sync committee participation: {bits.count_set()}/{len(bits)}"]
    if verbose:
        lines.append(
            f"Sync committee signature: {to_hex(body.sync_aggregate.sync_committee_signature)}"
        )
    return lines


def _bellatrix_lines(body: bellatrix.BeaconBlockBody, verbose: bool) -> list[str]:
    payload = body.execution_payload
    lines = [
        f"Execution block number: {int(payload.block_number)}",
        f"Execution block hash: {to_hex(payload.block_hash)}",
    ]
    if verbose:
        lines += [
            f"Execution parent hash: {to_hex(payload.parent_hash)}",
            f"Execution extra data: {to_hex(bytes(payload.extra_data))}",
        ]
    lines += [
        f"Execution fee recipient: {to_hex(payload.fee_recipient)}",
        f"Gas used: {int(payload.gas_used)} / {int(payload.gas_limit)}",
        f"Base fee per gas: {int(payload.base_fee_per_gas)}",
        f"Transactions: {len(payload.transactions)}",
    ]
    return lines


def _capella_lines(body: capella.BeaconBlockBody, verbose: bool) -> list[str]:
    withdrawals = body.execution_payload.withdrawals
    lines = [f"Withdrawals: {len(withdrawals)}"]
    if verbose:
        for withdrawal in withdrawals:
            lines.append(
                f"  {int(withdrawal.index)}: validator {int(withdrawal.validator_index)} "
                f"-> {to_hex(withdrawal.address)}, {int(withdrawal.amount)} Gwei"
            )

    lines.append(f"BLS to execution changes: {len(body.bls_to_execution_changes)}")
    if verbose:
        for change in body.bls_to_execution_changes:
            lines.append(
                f"  Validator {int(change.message.validator_index)} "
                f"-> {to_hex(change.message.to_execution_address)}"
            )
    return lines


def _deneb_lines(
    body: deneb.BeaconBlockBody, blob_sidecars: Sequence[deneb.BlobSidecar], verbose: bool
) -> list[str]:
    payload = body.execution_payload
    lines = [f"Blob KZG commitments: {len(body.blob_kzg_commitments)}"]
    if verbose:
        for i, commitment in enumerate(body.blob_kzg_commitments):
            lines.append(f"  {i}: {to_hex(commitment)}")

    lines.append(f"Blob sidecars: {len(blob_sidecars)}")
    if verbose:
        for sidecar in blob_sidecars:
            lines.append(f"  {int(sidecar.index)}: {to_hex(sidecar.kzg_commitment)}")

    lines += [
        f"Blob gas used: {int(payload.blob_gas_used)}",
        f"Excess blob gas: {int(payload.excess_blob_gas)}",
    ]
    return lines


def format_text(
    signed_block: phase0.SignedBeaconBlock,
    timing: NetworkTiming,
    *,
    verbose: bool = False,
    blob_sidecars: Sequence[deneb.BlobSidecar] = (),
) -> str:
    """
    Describe a signed block of any fork.

    Returns:
        The report, one item per line, ending in a newline.
    """
    block = signed_block.message
    body = block.body

    lines = _phase0_lines(block, ChainTime(timing), verbose)
    if isinstance(body, altair.BeaconBlockBody):
        lines += _altair_lines(body, verbose)
    if isinstance(body, bellatrix.BeaconBlockBody):
        lines += _bellatrix_lines(body, verbose)
    if isinstance(body, capella.BeaconBlockBody):
        lines += _capella_lines(body, verbose)
    if isinstance(body, deneb.BeaconBlockBody):
        lines += _deneb_lines(body, blob_sidecars, verbose)
    if verbose:
        lines.append(f"Signature: {to_hex(signed_block.signature)}")

    return "\n".join(lines) + "\n"
