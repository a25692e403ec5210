"""
HTTP client for the standard beacon node API.

One `BeaconApiClient` provides every capability the block info service
consumes: chain configuration, genesis, signed blocks, blob sidecars and
the head event stream. Transport and status failures are wrapped as
`FetchError`. A 404 on a block or sidecar lookup means the block does
not exist and is not an error.
"""

from __future__ import annotations

import logging
from typing import Any, AsyncIterator, Final, Mapping, Sequence

import httpx
from pydantic import TypeAdapter, ValidationError

from blockinfo.containers import VersionedBlock, parse_versioned_block
from blockinfo.containers.deneb import BlobSidecar
from blockinfo.errors import FetchError
from blockinfo.types import SSZError

from .events import BeaconEvent, parse_sse_stream

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT: Final = 30.0
"""HTTP request timeout in seconds."""

SPEC_ENDPOINT: Final = "/eth/v1/config/spec"
GENESIS_ENDPOINT: Final = "/eth/v1/beacon/genesis"
BLOCK_ENDPOINT: Final = "/eth/v2/beacon/blocks/{block_id}"
BLOB_SIDECARS_ENDPOINT: Final = "/eth/v1/beacon/blob_sidecars/{block_id}"
EVENTS_ENDPOINT: Final = "/eth/v1/events"

_BLOB_SIDECARS: Final = TypeAdapter(list[BlobSidecar])


class BeaconApiClient:
    """
    Async client for one beacon node.

    Use as an async context manager, or call `aclose()` when done:

        async with BeaconApiClient("http://localhost:5052") as client:
            block = await client.signed_beacon_block("head")
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """
        Args:
            base_url: Root URL of the node API (e.g., "http://localhost:5052").
            timeout: Per-request timeout in seconds. The event stream has no read timeout.
            transport: Optional transport override, used by tests.
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._client = httpx.AsyncClient(
            base_url=self.base_url,
            timeout=timeout,
            transport=transport,
            headers={"Accept": "application/json"},
        )

    async def __aenter__(self) -> BeaconApiClient:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _get_json(self, path: str, *, allow_absent: bool = False) -> Any | None:
        """
        GET `path` and decode the JSON body.

        Returns None on 404 when `allow_absent` is set.

        Raises:
            FetchError: On transport errors, non-2xx statuses or a non-JSON body.
        """
        logger.debug(f"GET {self.base_url}{path}")
        try:
            response = await self._client.get(path)
            if allow_absent and response.status_code == httpx.codes.NOT_FOUND:
                logger.debug(f"GET {path}: not found")
                return None
            response.raise_for_status()
            return response.json()
        except httpx.RequestError as exc:
            raise FetchError(f"Network error while connecting to {exc.request.url}: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            raise FetchError(
                f"HTTP error {exc.response.status_code}: {exc.response.text[:200]}"
            ) from exc
        except ValueError as exc:
            raise FetchError(f"Invalid JSON from {path}: {exc}") from exc

    @staticmethod
    def _data(body: Any, path: str) -> Any:
        if not isinstance(body, Mapping) or "data" not in body:
            raise FetchError(f"Response from {path} has no data field")
        return body["data"]

    async def spec(self) -> Mapping[str, Any]:
        """Fetch the network configuration map."""
        return self._data(await self._get_json(SPEC_ENDPOINT), SPEC_ENDPOINT)

    async def genesis(self) -> Mapping[str, Any]:
        """Fetch genesis information."""
        return self._data(await self._get_json(GENESIS_ENDPOINT), GENESIS_ENDPOINT)

    async def signed_beacon_block(self, block_id: str) -> VersionedBlock | None:
        """
        Fetch a signed block, tagged by the response's `version` field.

        Returns None when the node has no block at `block_id`.

        Raises:
            FetchError: If the request fails or the block does not match its schema.
            UnknownSchemaVersion: If the response names a fork this tool does not know.
        """
        path = BLOCK_ENDPOINT.format(block_id=block_id)
        body = await self._get_json(path, allow_absent=True)
        if body is None:
            return None

        data = self._data(body, path)
        version = body.get("version")
        if not isinstance(version, str):
            raise FetchError(f"Response from {path} has no version field")

        try:
            block = parse_versioned_block(version, data)
        except (ValidationError, SSZError) as exc:
            raise FetchError(f"Invalid {version} block from {path}: {exc}") from exc
        logger.debug(f"Fetched {version} block {block_id}")
        return block

    async def blob_sidecars(self, block_id: str) -> Sequence[BlobSidecar]:
        """Fetch the blob sidecars of a block. A missing block has none."""
        path = BLOB_SIDECARS_ENDPOINT.format(block_id=block_id)
        body = await self._get_json(path, allow_absent=True)
        if body is None:
            return []
        try:
            sidecars = _BLOB_SIDECARS.validate_python(self._data(body, path))
        except (ValidationError, SSZError) as exc:
            raise FetchError(f"Invalid blob sidecars from {path}: {exc}") from exc
        logger.debug(f"Fetched {len(sidecars)} blob sidecars for {block_id}")
        return sidecars

    async def events(self, topics: Sequence[str]) -> AsyncIterator[BeaconEvent]:
        """
        Subscribe to `topics` on the event stream.

        Yields events until the node closes the stream.

        Raises:
            FetchError: If the subscription cannot be established or breaks.
        """
        params = {"topics": ",".join(topics)}
        headers = {"Accept": "text/event-stream"}
        # Events may be minutes apart, so reads never time out.
        timeout = httpx.Timeout(self.timeout, read=None)

        logger.debug(f"Subscribing to {params['topics']} events at {self.base_url}")
        try:
            async with self._client.stream(
                "GET", EVENTS_ENDPOINT, params=params, headers=headers, timeout=timeout
            ) as response:
                if response.is_error:
                    raise FetchError(
                        f"HTTP error {response.status_code} subscribing to {params['topics']}"
                    )
                async for event in parse_sse_stream(response.aiter_lines()):
                    yield event
        except httpx.HTTPError as exc:
            raise FetchError(f"Event stream failed: {exc}") from exc
