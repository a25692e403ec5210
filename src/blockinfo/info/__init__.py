"""Block info requests, sessions and the fetch-render service."""

from .request import BlockInfoRequest, BlockInfoSession
from .service import BlockInfoService, EventErrorPolicy, Outcome

__all__ = [
    "BlockInfoRequest",
    "BlockInfoSession",
    "BlockInfoService",
    "EventErrorPolicy",
    "Outcome",
]
