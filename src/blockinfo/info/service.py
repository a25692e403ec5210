"""
Block info service.

Runs one request against a beacon node:

1. Read network timing (once per run).
2. Resolve a block time to a slot, if a time was given.
3. Fetch the block.
4. Quiet requests stop here and report whether the block exists.
5. Attach blob sidecars to a Deneb block and render it once.
6. Streaming requests then render the block of every new head event
   until the event source ends or the service is stopped.

Inside the stream a failed event is handled by an explicit policy. The
default logs the failure and moves on to the next event.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import TextIO

from pydantic import ValidationError

from blockinfo.api import HEAD_TOPIC, BeaconEvent, BeaconNode, HeadEvent
from blockinfo.chain import NetworkTiming, SlotResolver
from blockinfo.containers import DenebBlock, VersionedBlock
from blockinfo.errors import BlockInfoError, ConfigError, EmptyBlockError, FetchError, UsageError

from .request import BlockInfoRequest, BlockInfoSession

logger = logging.getLogger(__name__)


class EventErrorPolicy(Enum):
    """What the stream does when handling one head event fails."""

    LOG_AND_CONTINUE = "log_and_continue"
    """Log the failure and wait for the next event."""

    RAISE = "raise"
    """End the stream with the failure."""


class Outcome(Enum):
    """How a successful run ended."""

    RENDERED = "rendered"
    """The block was rendered (and streaming, if requested, has ended)."""

    EXISTS = "exists"
    """Quiet request: the block exists."""

    ABSENT = "absent"
    """Quiet request: no block at the identifier."""


@dataclass(slots=True)
class BlockInfoService:
    """Fetches and renders blocks from one beacon node."""

    node: BeaconNode
    """Source of configuration, blocks, sidecars and head events."""

    on_event_error: EventErrorPolicy = EventErrorPolicy.LOG_AND_CONTINUE
    """Failure policy inside the stream."""

    _running: bool = field(default=False, repr=False)
    """Whether the head event loop is running."""

    _events_rendered: int = field(default=0, repr=False)
    """Head events rendered since creation."""

    async def load_timing(self) -> NetworkTiming:
        """
        Read genesis time, slot duration and epoch length from the node.

        Raises:
            ConfigError: If either request fails or lacks a required value.
        """
        try:
            spec = await self.node.spec()
        except FetchError as exc:
            raise ConfigError(
                f"failed to connect to obtain configuration information: {exc.message}"
            ) from exc
        try:
            genesis = await self.node.genesis()
        except FetchError as exc:
            raise ConfigError(
                f"failed to connect to obtain genesis information: {exc.message}"
            ) from exc
        return NetworkTiming.from_api(spec, genesis)

    async def open_session(
        self, request: BlockInfoRequest, output: TextIO | None = None
    ) -> BlockInfoSession:
        """Bind `request` to the node's timing, resolving a block time to a slot."""
        timing = await self.load_timing()
        if request.block_time:
            block_id = SlotResolver(timing).resolve(request.block_time)
        elif request.block_id:
            block_id = request.block_id
        else:
            raise UsageError("no block ID or block time")
        if output is None:
            return BlockInfoSession(request=request, timing=timing, block_id=block_id)
        return BlockInfoSession(request=request, timing=timing, block_id=block_id, output=output)

    async def fetch(self, block_id: str, *, with_sidecars: bool = True) -> VersionedBlock | None:
        """
        Fetch a block, attaching blob sidecars to Deneb blocks.

        Returns None when no block exists at `block_id`. With
        `with_sidecars` false the sidecar endpoint is not called.
        """
        block = await self.node.signed_beacon_block(block_id)
        if not with_sidecars:
            return block
        match block:
            case DenebBlock(signed):
                try:
                    sidecars = await self.node.blob_sidecars(block_id)
                except FetchError as exc:
                    raise FetchError(f"failed to obtain blobs: {exc.message}") from exc
                return DenebBlock(signed, tuple(sidecars))
            case _:
                return block

    def _write(self, session: BlockInfoSession, block: VersionedBlock) -> None:
        # Render fully before writing so that a failure leaves no partial output.
        text = session.renderer.render(block, session.mode)
        session.output.write(text)
        session.output.flush()

    async def run(self, request: BlockInfoRequest, output: TextIO | None = None) -> Outcome:
        """
        Execute `request`.

        Raises:
            EmptyBlockError: No block exists and the request is not quiet.
            BlockInfoError: Any other failure before or during the first render.
        """
        session = await self.open_session(request, output)

        block = await self.fetch(session.block_id, with_sidecars=not request.quiet)
        if request.quiet:
            return Outcome.ABSENT if block is None else Outcome.EXISTS
        if block is None:
            raise EmptyBlockError(session.block_id)

        self._write(session, block)

        if request.stream:
            if session.mode.separates_events:
                session.output.write("\n")
            await self.stream(session)

        return Outcome.RENDERED

    async def stream(self, session: BlockInfoSession) -> None:
        """
        Render the block of every head event until stopped or the source ends.

        Events on other topics are ignored. The stop flag is checked after
        each event arrives, so a render in progress always completes.
        """
        self._running = True
        try:
            async for event in self.node.events([HEAD_TOPIC]):
                if not self._running:
                    break
                if event.topic != HEAD_TOPIC:
                    continue

                try:
                    await self._handle_head(session, event)
                except BlockInfoError as exc:
                    if self.on_event_error is EventErrorPolicy.RAISE:
                        raise
                    logger.warning(f"Failed to output block: {exc.message}")
                    continue

                self._events_rendered += 1
        finally:
            self._running = False

    async def _handle_head(self, session: BlockInfoSession, event: BeaconEvent) -> None:
        try:
            head = HeadEvent.model_validate(event.data)
        except ValidationError as exc:
            raise FetchError(f"invalid head event: {exc}") from exc

        logger.debug(f"Head event for slot {head.slot}: {head.block_id}")
        block = await self.fetch(head.block_id)
        if block is None:
            raise EmptyBlockError(head.block_id)

        self._write(session, block)
        if session.mode.separates_events:
            session.output.write("\n")
            session.output.flush()

    def stop(self) -> None:
        """
        Signal the stream to stop.

        The loop exits when the next event arrives, before handling it.
        """
        self._running = False

    @property
    def is_running(self) -> bool:
        """Check if the head event loop is currently running."""
        return self._running

    @property
    def events_rendered(self) -> int:
        """Total head events rendered since creation."""
        return self._events_rendered
