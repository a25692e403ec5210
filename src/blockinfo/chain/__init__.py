"""Network timing, chain-time arithmetic and time-to-slot resolution."""

from .clock import ChainTime
from .config import NetworkTiming
from .resolver import SlotResolver, parse_time_expression

__all__ = [
    "ChainTime",
    "NetworkTiming",
    "SlotResolver",
    "parse_time_expression",
]
