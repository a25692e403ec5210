"""
Chain time.

Slot, epoch and timestamp arithmetic over a fixed `NetworkTiming`.
Slots are plain integers here: a time before genesis yields a negative
slot rather than an error or a clamp to zero.
"""

from dataclasses import dataclass
from datetime import datetime

from .config import NetworkTiming


@dataclass(frozen=True, slots=True)
class ChainTime:
    """Converts between Unix timestamps, slots and epochs."""

    timing: NetworkTiming

    def timestamp_to_slot(self, timestamp: int) -> int:
        """Slot containing `timestamp`, rounding down (negative before genesis)."""
        return (timestamp - int(self.timing.genesis_time)) // int(self.timing.seconds_per_slot)

    def slot_to_epoch(self, slot: int) -> int:
        """Epoch containing `slot`."""
        return slot // int(self.timing.slots_per_epoch)

    def slot_to_timestamp(self, slot: int) -> int:
        """Unix timestamp at which `slot` starts."""
        return int(self.timing.genesis_time) + slot * int(self.timing.seconds_per_slot)

    def slot_start(self, slot: int) -> datetime:
        """Local wall-clock time at which `slot` starts."""
        return datetime.fromtimestamp(self.slot_to_timestamp(slot))
