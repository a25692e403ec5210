"""Pytest configuration and shared fixtures."""

import os

from hypothesis import settings

if "BLOCKINFO_BEACON_NODE_URL" not in os.environ:
    os.environ["BLOCKINFO_BEACON_NODE_URL"] = "http://localhost:5052"

# Create a profile named "no_deadline" with deadline disabled.
settings.register_profile("no_deadline", deadline=None)
settings.load_profile("no_deadline")
