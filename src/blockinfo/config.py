"""
Global configuration for the block info tool.

Defaults for the beacon node connection, read from the environment at
import time. Command-line flags override them.
"""

import os

BEACON_NODE_URL = os.environ.get("BLOCKINFO_BEACON_NODE_URL", "http://localhost:5052")
"""Base URL of the beacon node API."""

if not BEACON_NODE_URL.startswith(("http://", "https://")):
    raise ValueError(
        f"Invalid BLOCKINFO_BEACON_NODE_URL environment variable: '{BEACON_NODE_URL}'. "
        "Expected an http:// or https:// URL"
    )

_TIMEOUT_SETTING = os.environ.get("BLOCKINFO_TIMEOUT", "30")

try:
    TIMEOUT = float(_TIMEOUT_SETTING)
except ValueError as exc:
    raise ValueError(
        f"Invalid BLOCKINFO_TIMEOUT environment variable: '{_TIMEOUT_SETTING}'. "
        "Expected a number of seconds"
    ) from exc

if TIMEOUT <= 0:
    raise ValueError(
        f"Invalid BLOCKINFO_TIMEOUT environment variable: '{_TIMEOUT_SETTING}'. "
        "Expected a positive number of seconds"
    )
