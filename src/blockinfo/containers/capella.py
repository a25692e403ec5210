"""
Capella beacon block containers.

The execution payload gains withdrawals, and the body gains signed
BLS-to-execution credential changes.
"""

from blockinfo.types import Bytes20, Container, SSZList, Uint64

from . import bellatrix
from .phase0 import BLSPubkey, BLSSignature, Gwei, ValidatorIndex
from .presets import MAX_BLS_TO_EXECUTION_CHANGES, MAX_WITHDRAWALS_PER_PAYLOAD


class Withdrawal(Container):
    index: Uint64
    validator_index: ValidatorIndex
    address: Bytes20
    amount: Gwei


class Withdrawals(SSZList[Withdrawal]):
    ELEMENT_TYPE = Withdrawal
    LIMIT = MAX_WITHDRAWALS_PER_PAYLOAD


class ExecutionPayload(bellatrix.ExecutionPayload):
    withdrawals: Withdrawals


class BLSToExecutionChange(Container):
    validator_index: ValidatorIndex
    from_bls_pubkey: BLSPubkey
    to_execution_address: Bytes20


class SignedBLSToExecutionChange(Container):
    message: BLSToExecutionChange
    signature: BLSSignature


class BLSToExecutionChanges(SSZList[SignedBLSToExecutionChange]):
    ELEMENT_TYPE = SignedBLSToExecutionChange
    LIMIT = MAX_BLS_TO_EXECUTION_CHANGES


class BeaconBlockBody(bellatrix.BeaconBlockBody):
    execution_payload: ExecutionPayload  # type: ignore[assignment]
    bls_to_execution_changes: BLSToExecutionChanges


class BeaconBlock(bellatrix.BeaconBlock):
    body: BeaconBlockBody  # type: ignore[assignment]


class SignedBeaconBlock(bellatrix.SignedBeaconBlock):
    message: BeaconBlock  # type: ignore[assignment]
