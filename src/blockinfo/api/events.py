"""
Beacon node events.

The event stream (`/eth/v1/events`) is Server-Sent Events: frames of
`field: value` lines separated by a blank line. Each frame carries an
`event:` topic and a JSON `data:` payload. Lines starting with `:` are
keepalive comments.
"""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any, AsyncIterable, AsyncIterator, Final

from blockinfo.types import ApiModel, Bytes32, Uint64, to_hex

logger = logging.getLogger(__name__)

HEAD_TOPIC: Final = "head"
"""Topic announcing a new canonical head block."""


@dataclass(frozen=True, slots=True)
class BeaconEvent:
    """One event delivered by the beacon node."""

    topic: str
    """The SSE `event:` field (e.g. "head")."""

    data: Any
    """The decoded JSON payload."""


class HeadEvent(ApiModel):
    """Payload of a `head` event."""

    slot: Uint64
    block: Bytes32
    """Root of the new head block."""

    state: Bytes32
    epoch_transition: bool = False

    @property
    def block_id(self) -> str:
        """Identifier that fetches the head block: its root as lowercase 0x-hex."""
        return to_hex(self.block)


def parse_sse_frame(lines: list[str]) -> BeaconEvent | None:
    """
    Parse the lines of one SSE frame.

    Returns None for frames without data, and for frames whose data is
    not JSON (logged and skipped).
    """
    topic = "message"
    data_lines: list[str] = []

    for line in lines:
        if not line or line.startswith(":"):
            continue
        name, _, value = line.partition(":")
        value = value.removeprefix(" ")
        if name == "event":
            topic = value
        elif name == "data":
            data_lines.append(value)

    if not data_lines:
        return None

    data = "\n".join(data_lines)
    try:
        return BeaconEvent(topic=topic, data=json.loads(data))
    except json.JSONDecodeError:
        logger.warning(f"Failed to parse SSE data: {data}")
        return None


async def parse_sse_stream(lines: AsyncIterable[str]) -> AsyncIterator[BeaconEvent]:
    """Group a stream of text lines into events, dispatching on blank lines."""
    frame: list[str] = []

    async for line in lines:
        line = line.rstrip("\r")
        if line:
            frame.append(line)
            continue
        if frame and (event := parse_sse_frame(frame)) is not None:
            yield event
        frame = []

    # A final frame may be unterminated when the server closes the stream.
    if frame and (event := parse_sse_frame(frame)) is not None:
        yield event
