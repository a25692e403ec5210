"""Bellatrix beacon block containers: the body embeds an execution payload."""

from blockinfo.types import (
    BaseByteList,
    Bytes20,
    Bytes32,
    Bytes256,
    Container,
    SSZList,
    Uint64,
    Uint256,
)

from . import altair
from .presets import (
    MAX_BYTES_PER_TRANSACTION,
    MAX_EXTRA_DATA_BYTES,
    MAX_TRANSACTIONS_PER_PAYLOAD,
)


class Transaction(BaseByteList):
    """An opaque RLP-encoded execution transaction."""

    LIMIT = MAX_BYTES_PER_TRANSACTION


class Transactions(SSZList[Transaction]):
    ELEMENT_TYPE = Transaction
    LIMIT = MAX_TRANSACTIONS_PER_PAYLOAD


class ExtraData(BaseByteList):
    LIMIT = MAX_EXTRA_DATA_BYTES


class ExecutionPayload(Container):
    """The execution-layer block carried inside the beacon block body."""

    parent_hash: Bytes32
    fee_recipient: Bytes20
    state_root: Bytes32
    receipts_root: Bytes32
    logs_bloom: Bytes256
    prev_randao: Bytes32
    block_number: Uint64
    gas_limit: Uint64
    gas_used: Uint64
    timestamp: Uint64
    extra_data: ExtraData
    base_fee_per_gas: Uint256
    block_hash: Bytes32
    transactions: Transactions


class BeaconBlockBody(altair.BeaconBlockBody):
    execution_payload: ExecutionPayload


class BeaconBlock(altair.BeaconBlock):
    body: BeaconBlockBody  # type: ignore[assignment]


class SignedBeaconBlock(altair.SignedBeaconBlock):
    message: BeaconBlock  # type: ignore[assignment]
