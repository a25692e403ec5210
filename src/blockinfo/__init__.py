"""Beacon block info: fetch a block by identifier or time and print it."""
