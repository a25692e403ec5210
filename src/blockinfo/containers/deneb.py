"""
Deneb beacon block containers.

The body commits to blobs through KZG commitments. The blobs themselves
travel separately as sidecars.
"""

from blockinfo.types import BaseBytes, Bytes32, Bytes48, Container, SSZList, SSZVector, Uint64

from . import capella
from .phase0 import SignedBeaconBlockHeader
from .presets import (
    BYTES_PER_FIELD_ELEMENT,
    FIELD_ELEMENTS_PER_BLOB,
    KZG_COMMITMENT_INCLUSION_PROOF_DEPTH,
    MAX_BLOB_COMMITMENTS_PER_BLOCK,
)

KZGCommitment = Bytes48
KZGProof = Bytes48
BlobIndex = Uint64


class ExecutionPayload(capella.ExecutionPayload):
    blob_gas_used: Uint64
    excess_blob_gas: Uint64


class BlobKzgCommitments(SSZList[KZGCommitment]):
    ELEMENT_TYPE = KZGCommitment
    LIMIT = MAX_BLOB_COMMITMENTS_PER_BLOCK


class BeaconBlockBody(capella.BeaconBlockBody):
    execution_payload: ExecutionPayload  # type: ignore[assignment]
    blob_kzg_commitments: BlobKzgCommitments


class BeaconBlock(capella.BeaconBlock):
    body: BeaconBlockBody  # type: ignore[assignment]


class SignedBeaconBlock(capella.SignedBeaconBlock):
    message: BeaconBlock  # type: ignore[assignment]


class Blob(BaseBytes):
    LENGTH = FIELD_ELEMENTS_PER_BLOB * BYTES_PER_FIELD_ELEMENT


class KzgCommitmentInclusionProof(SSZVector[Bytes32]):
    """Branch proving the commitment against the header's body root."""

    ELEMENT_TYPE = Bytes32
    LENGTH = KZG_COMMITMENT_INCLUSION_PROOF_DEPTH


class BlobSidecar(Container):
    """A blob with the commitment, proof and header that tie it to its block."""

    index: BlobIndex
    blob: Blob
    kzg_commitment: KZGCommitment
    kzg_proof: KZGProof
    signed_block_header: SignedBeaconBlockHeader
    kzg_commitment_inclusion_proof: KzgCommitmentInclusionProof
