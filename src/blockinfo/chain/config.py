"""
Network timing.

The three chain parameters that map slots to wall-clock time. They are
read once per run from the beacon node's spec and genesis endpoints and
are never refreshed, even across a long-lived stream.
"""

from __future__ import annotations

from typing import Any, Final, Mapping

from pydantic import ValidationError, field_validator

from blockinfo.errors import ConfigError
from blockinfo.types import StrictBaseModel, Uint64

SECONDS_PER_SLOT_KEY: Final = "SECONDS_PER_SLOT"
"""Spec key holding the slot duration in seconds."""

SLOTS_PER_EPOCH_KEY: Final = "SLOTS_PER_EPOCH"
"""Spec key holding the number of slots per epoch."""

GENESIS_TIME_KEY: Final = "genesis_time"
"""Genesis response key holding the genesis Unix timestamp."""


class NetworkTiming(StrictBaseModel):
    """Genesis time, slot duration and epoch length of one network."""

    genesis_time: Uint64
    """Unix timestamp (seconds) when slot 0 began."""

    seconds_per_slot: Uint64
    """The fixed duration of a single slot in seconds."""

    slots_per_epoch: Uint64
    """The number of slots in an epoch."""

    @field_validator("seconds_per_slot", "slots_per_epoch")
    @classmethod
    def _must_be_positive(cls, value: Uint64) -> Uint64:
        if value == 0:
            raise ValueError("must be positive")
        return value

    @classmethod
    def from_api(cls, spec: Mapping[str, Any], genesis: Mapping[str, Any]) -> NetworkTiming:
        """
        Build timing from the `data` objects of the spec and genesis responses.

        Raises:
            ConfigError: If a required key is missing or holds an invalid value.
        """
        try:
            return cls(
                genesis_time=genesis[GENESIS_TIME_KEY],
                seconds_per_slot=spec[SECONDS_PER_SLOT_KEY],
                slots_per_epoch=spec[SLOTS_PER_EPOCH_KEY],
            )
        except KeyError as exc:
            raise ConfigError(f"beacon node configuration lacks {exc.args[0]}") from exc
        except ValidationError as exc:
            raise ConfigError(f"invalid beacon node configuration: {exc}") from exc
