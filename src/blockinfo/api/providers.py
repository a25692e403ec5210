"""
Beacon node capabilities consumed by the block info service.

Each capability is a small protocol so that the service can run against
the HTTP client or against in-memory fakes.
"""

from __future__ import annotations

from typing import Any, AsyncIterator, Mapping, Protocol, Sequence, runtime_checkable

from blockinfo.containers import VersionedBlock
from blockinfo.containers.deneb import BlobSidecar

from .events import BeaconEvent


@runtime_checkable
class SpecProvider(Protocol):
    async def spec(self) -> Mapping[str, Any]:
        """Network configuration, including `SECONDS_PER_SLOT` and `SLOTS_PER_EPOCH`."""
        ...


@runtime_checkable
class GenesisProvider(Protocol):
    async def genesis(self) -> Mapping[str, Any]:
        """Genesis information, including `genesis_time`."""
        ...


@runtime_checkable
class SignedBlockProvider(Protocol):
    async def signed_beacon_block(self, block_id: str) -> VersionedBlock | None:
        """
        Fetch a signed block by identifier.

        Returns None when no block exists at `block_id`.

        Raises:
            FetchError: If the request fails.
        """
        ...


@runtime_checkable
class BlobSidecarsProvider(Protocol):
    async def blob_sidecars(self, block_id: str) -> Sequence[BlobSidecar]:
        """Fetch the blob sidecars of a Deneb block."""
        ...


@runtime_checkable
class EventsProvider(Protocol):
    def events(self, topics: Sequence[str]) -> AsyncIterator[BeaconEvent]:
        """
        Subscribe to event topics.

        Yields events in arrival order until the subscription ends.
        """
        ...


@runtime_checkable
class BeaconNode(
    SpecProvider,
    GenesisProvider,
    SignedBlockProvider,
    BlobSidecarsProvider,
    EventsProvider,
    Protocol,
):
    """Everything the block info service needs from one beacon node."""
