"""
Mainnet preset limits that shape the beacon block schemas.

These are compile-time constants of the SSZ types: every list, bitlist
and byte list in a block carries one of them as its LIMIT.
"""

from typing import Final

MAX_PROPOSER_SLASHINGS: Final = 16
MAX_ATTESTER_SLASHINGS: Final = 2
MAX_ATTESTATIONS: Final = 128
MAX_DEPOSITS: Final = 16
MAX_VOLUNTARY_EXITS: Final = 16

MAX_VALIDATORS_PER_COMMITTEE: Final = 2048
"""Bound on aggregation bits and attesting indices."""

DEPOSIT_CONTRACT_TREE_DEPTH: Final = 32
"""The deposit proof carries one extra node for the mixed-in deposit count."""

SYNC_COMMITTEE_SIZE: Final = 512

BYTES_PER_LOGS_BLOOM: Final = 256
MAX_EXTRA_DATA_BYTES: Final = 32
MAX_BYTES_PER_TRANSACTION: Final = 2**30
MAX_TRANSACTIONS_PER_PAYLOAD: Final = 2**20

MAX_WITHDRAWALS_PER_PAYLOAD: Final = 16
MAX_BLS_TO_EXECUTION_CHANGES: Final = 16

MAX_BLOB_COMMITMENTS_PER_BLOCK: Final = 4096
FIELD_ELEMENTS_PER_BLOB: Final = 4096
BYTES_PER_FIELD_ELEMENT: Final = 32
KZG_COMMITMENT_INCLUSION_PROOF_DEPTH: Final = 17
