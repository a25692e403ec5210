"""
Slot resolution.

Turns a caller-supplied time expression into a block identifier. Three
literal forms are accepted, classified in this order:

- `0x` prefix: hexadecimal Unix seconds (e.g. "0x5f5e100")
- no `:` character: decimal Unix seconds (e.g. "100000000")
- anything else: a `YYYY-MM-DDTHH:MM:SS` datetime in the local time zone

The result is the slot number as a decimal string, the form the beacon
API accepts as a block identifier.
"""

from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from datetime import datetime
from typing import Final

from blockinfo.errors import ParseError

from .clock import ChainTime
from .config import NetworkTiming

logger = logging.getLogger(__name__)

DATETIME_FORMAT: Final = "%Y-%m-%dT%H:%M:%S"
"""Layout of the datetime form. Carries no zone; it is read as local time."""

_HEX_DIGITS: Final = re.compile(r"[+-]?[0-9a-fA-F]+")
_DECIMAL_DIGITS: Final = re.compile(r"[+-]?[0-9]+")
_DATETIME_SHAPE: Final = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}T[0-9]{2}:[0-9]{2}:[0-9]{2}")

TIMESTAMP_BITS: Final = 64
"""Unix seconds must fit a signed integer of this width."""


def _parse_int(digits: str, pattern: re.Pattern[str], base: int, form: str, expression: str) -> int:
    # Plain ASCII digits with an optional sign only.
    if pattern.fullmatch(digits) is None:
        raise ParseError(form, expression)
    value = int(digits, base)
    if not -(2 ** (TIMESTAMP_BITS - 1)) <= value < 2 ** (TIMESTAMP_BITS - 1):
        raise ParseError(form, expression)
    return value


def parse_time_expression(expression: str) -> int:
    """
    Parse a time expression to integer Unix seconds.

    Raises:
        ParseError: Naming the form that was attempted.
    """
    if expression.startswith("0x"):
        digits = expression.removeprefix("0x")
        return _parse_int(digits, _HEX_DIGITS, 16, "hex string", expression)

    if ":" not in expression:
        return _parse_int(expression, _DECIMAL_DIGITS, 10, "decimal string", expression)

    if _DATETIME_SHAPE.fullmatch(expression) is None:
        raise ParseError("datetime", expression)
    try:
        # A naive datetime converts through the local zone.
        return int(datetime.strptime(expression, DATETIME_FORMAT).timestamp())
    except ValueError as exc:
        raise ParseError("datetime", expression) from exc


@dataclass(frozen=True, slots=True)
class SlotResolver:
    """Resolves time expressions against one network's timing."""

    timing: NetworkTiming

    def resolve(self, expression: str) -> str:
        """
        Resolve `expression` to a slot number in decimal string form.

        Raises:
            ParseError: If the expression matches none of the accepted forms.
        """
        timestamp = parse_time_expression(expression)
        slot = ChainTime(self.timing).timestamp_to_slot(timestamp)
        if slot < 0:
            logger.warning(f"Time {expression} is before genesis; resolved to slot {slot}")
        logger.debug(f"Resolved time {expression} ({timestamp}) to slot {slot}")
        return str(slot)
