"""Block output: mode selection, per-variant dispatch and text reports."""

from .modes import OutputMode
from .renderer import BlockRenderer
from .text import format_text

__all__ = [
    "BlockRenderer",
    "OutputMode",
    "format_text",
]
