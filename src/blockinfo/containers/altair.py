"""Altair beacon block containers: the body gains a sync aggregate."""

from blockinfo.types import BaseBitvector, Container

from . import phase0
from .phase0 import BLSSignature
from .presets import SYNC_COMMITTEE_SIZE


class SyncCommitteeBits(BaseBitvector):
    LENGTH = SYNC_COMMITTEE_SIZE


class SyncAggregate(Container):
    """Sync committee participation in the previous slot's block root."""

    sync_committee_bits: SyncCommitteeBits
    sync_committee_signature: BLSSignature


class BeaconBlockBody(phase0.BeaconBlockBody):
    sync_aggregate: SyncAggregate


class BeaconBlock(phase0.BeaconBlock):
    body: BeaconBlockBody  # type: ignore[assignment]


class SignedBeaconBlock(phase0.SignedBeaconBlock):
    message: BeaconBlock  # type: ignore[assignment]
