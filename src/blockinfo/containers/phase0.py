"""
Phase0 beacon block containers.

The genesis fork schema. Later forks extend the body defined here and
reuse the operation containers unchanged.
"""

from blockinfo.types import (
    BaseBitlist,
    Bytes32,
    Bytes48,
    Bytes96,
    Container,
    SSZList,
    SSZVector,
    Uint64,
)

from .presets import (
    DEPOSIT_CONTRACT_TREE_DEPTH,
    MAX_ATTESTATIONS,
    MAX_ATTESTER_SLASHINGS,
    MAX_DEPOSITS,
    MAX_PROPOSER_SLASHINGS,
    MAX_VALIDATORS_PER_COMMITTEE,
    MAX_VOLUNTARY_EXITS,
)

Slot = Uint64
Epoch = Uint64
ValidatorIndex = Uint64
CommitteeIndex = Uint64
Gwei = Uint64
Root = Bytes32
BLSPubkey = Bytes48
BLSSignature = Bytes96


class Checkpoint(Container):
    """An epoch boundary and the block root at that boundary."""

    epoch: Epoch
    root: Root


class AttestationData(Container):
    """What an attestation votes for."""

    slot: Slot
    index: CommitteeIndex

    beacon_block_root: Root
    """LMD GHOST vote."""

    source: Checkpoint
    """FFG vote source."""

    target: Checkpoint
    """FFG vote target."""


class AggregationBits(BaseBitlist):
    """Which committee members took part in an aggregate attestation."""

    LIMIT = MAX_VALIDATORS_PER_COMMITTEE


class Attestation(Container):
    aggregation_bits: AggregationBits
    data: AttestationData
    signature: BLSSignature


class AttestingIndices(SSZList[ValidatorIndex]):
    ELEMENT_TYPE = ValidatorIndex
    LIMIT = MAX_VALIDATORS_PER_COMMITTEE


class IndexedAttestation(Container):
    """An attestation with its participants spelled out as validator indices."""

    attesting_indices: AttestingIndices
    data: AttestationData
    signature: BLSSignature


class BeaconBlockHeader(Container):
    """A block summary where the body is replaced by its root."""

    slot: Slot
    proposer_index: ValidatorIndex
    parent_root: Root
    state_root: Root
    body_root: Root


class SignedBeaconBlockHeader(Container):
    message: BeaconBlockHeader
    signature: BLSSignature


class ProposerSlashing(Container):
    """Two conflicting headers signed by the same proposer for the same slot."""

    signed_header_1: SignedBeaconBlockHeader
    signed_header_2: SignedBeaconBlockHeader


class AttesterSlashing(Container):
    """Two conflicting attestations with overlapping participants."""

    attestation_1: IndexedAttestation
    attestation_2: IndexedAttestation


class Eth1Data(Container):
    """The proposer's view of the deposit contract."""

    deposit_root: Root
    deposit_count: Uint64
    block_hash: Bytes32


class DepositData(Container):
    pubkey: BLSPubkey
    withdrawal_credentials: Bytes32
    amount: Gwei
    signature: BLSSignature


class DepositProof(SSZVector[Bytes32]):
    """Merkle branch of a deposit, plus the mixed-in deposit count."""

    ELEMENT_TYPE = Bytes32
    LENGTH = DEPOSIT_CONTRACT_TREE_DEPTH + 1


class Deposit(Container):
    proof: DepositProof
    data: DepositData


class VoluntaryExit(Container):
    epoch: Epoch
    """Earliest epoch at which the exit can be processed."""

    validator_index: ValidatorIndex


class SignedVoluntaryExit(Container):
    message: VoluntaryExit
    signature: BLSSignature


class ProposerSlashings(SSZList[ProposerSlashing]):
    ELEMENT_TYPE = ProposerSlashing
    LIMIT = MAX_PROPOSER_SLASHINGS


class AttesterSlashings(SSZList[AttesterSlashing]):
    ELEMENT_TYPE = AttesterSlashing
    LIMIT = MAX_ATTESTER_SLASHINGS


class Attestations(SSZList[Attestation]):
    ELEMENT_TYPE = Attestation
    LIMIT = MAX_ATTESTATIONS


class Deposits(SSZList[Deposit]):
    ELEMENT_TYPE = Deposit
    LIMIT = MAX_DEPOSITS


class VoluntaryExits(SSZList[SignedVoluntaryExit]):
    ELEMENT_TYPE = SignedVoluntaryExit
    LIMIT = MAX_VOLUNTARY_EXITS


class BeaconBlockBody(Container):
    """The operations a proposer packs into a block."""

    randao_reveal: BLSSignature
    eth1_data: Eth1Data

    graffiti: Bytes32
    """Arbitrary proposer data, often UTF-8 text padded with NULs."""

    proposer_slashings: ProposerSlashings
    attester_slashings: AttesterSlashings
    attestations: Attestations
    deposits: Deposits
    voluntary_exits: VoluntaryExits


class BeaconBlock(Container):
    slot: Slot
    proposer_index: ValidatorIndex
    parent_root: Root
    state_root: Root
    body: BeaconBlockBody


class SignedBeaconBlock(Container):
    """A beacon block with the proposer's signature over it."""

    message: BeaconBlock
    signature: BLSSignature
