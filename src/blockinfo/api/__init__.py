"""Beacon node API: capability protocols, HTTP client and event stream."""

from .client import BeaconApiClient
from .events import HEAD_TOPIC, BeaconEvent, HeadEvent, parse_sse_stream
from .providers import (
    BeaconNode,
    BlobSidecarsProvider,
    EventsProvider,
    GenesisProvider,
    SignedBlockProvider,
    SpecProvider,
)

__all__ = [
    "BeaconApiClient",
    "BeaconEvent",
    "HeadEvent",
    "HEAD_TOPIC",
    "parse_sse_stream",
    "BeaconNode",
    "SpecProvider",
    "GenesisProvider",
    "SignedBlockProvider",
    "BlobSidecarsProvider",
    "EventsProvider",
]
