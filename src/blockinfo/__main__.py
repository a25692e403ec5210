"""
Beacon block info CLI entry point.

Fetch one beacon block by identifier or by time and print it.

Usage::

    python -m blockinfo --blockid head
    python -m blockinfo --blockid 0x6b9c...e2 --json
    python -m blockinfo --time 2023-06-01T12:00:00 --verbose
    python -m blockinfo --blockid head --stream
    python -m blockinfo --blockid 7000000 --quiet; echo $?

Options:
    --blockid     Block identifier: slot, root, "head", "genesis", "finalized"
    --time        Block time: 0x-hex or decimal Unix seconds, or YYYY-MM-DDTHH:MM:SS local time
    --json        Print the block as one line of JSON
    --ssz         Print the block as one line of SSZ hex (not available for phase0 blocks)
    --stream      Keep printing each new head block
    --quiet       Print nothing; exit 0 if the block exists, 1 if it does not
    --verbose     Add per-operation detail to the text report
    --connection  Beacon node URL (default: $BLOCKINFO_BEACON_NODE_URL or http://localhost:5052)

Exit status:
    0  success, or the block exists (--quiet)
    1  no block at the identifier
    2  any other error
"""

from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from typing import Sequence

from blockinfo import config
from blockinfo.api import BeaconApiClient
from blockinfo.errors import BlockInfoError, EmptyBlockError
from blockinfo.info import BlockInfoRequest, BlockInfoService, Outcome

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_ABSENT = 1
EXIT_ERROR = 2


class ColoredFormatter(logging.Formatter):
    """Colors the timestamp, level and logger name of each record."""

    # ANSI color codes
    GREY = "\x1b[38;5;244m"
    BLUE = "\x1b[38;5;39m"
    GREEN = "\x1b[38;5;40m"
    YELLOW = "\x1b[38;5;220m"
    RED = "\x1b[38;5;196m"
    BOLD_RED = "\x1b[38;5;196;1m"
    CYAN = "\x1b[38;5;51m"
    RESET = "\x1b[0m"

    LEVEL_COLORS = {
        logging.DEBUG: GREY,
        logging.INFO: GREEN,
        logging.WARNING: YELLOW,
        logging.ERROR: RED,
        logging.CRITICAL: BOLD_RED,
    }

    def format(self, record: logging.LogRecord) -> str:
        """Render `record` on one line with ANSI colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(debug: bool = False, no_color: bool = False, quiet: bool = False) -> None:
    """
    Send log records to standard error, leaving standard output for blocks.

    `debug` shows HTTP requests and resolution steps. `quiet` hides
    everything below errors.
    """
    if debug:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.INFO

    handler = logging.StreamHandler(sys.stderr)
    handler.setLevel(level)

    if no_color:
        formatter = logging.Formatter(
            "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = ColoredFormatter(datefmt="%Y-%m-%d %H:%M:%S")

    handler.setFormatter(formatter)

    root = logging.getLogger()
    root.setLevel(level)
    root.addHandler(handler)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="blockinfo",
        description="Obtain information about a beacon block",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--blockid", default=None, help="Block identifier (slot, root or name)")
    parser.add_argument("--time", dest="block_time", default=None, help="Block time")
    parser.add_argument("--json", action="store_true", help="Print the block as JSON")
    parser.add_argument("--ssz", action="store_true", help="Print the block as SSZ hex")
    parser.add_argument("--stream", action="store_true", help="Print each new head block")
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Print nothing; the exit status tells whether the block exists",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Add per-operation detail to the text report",
    )
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--connection",
        default=config.BEACON_NODE_URL,
        help=f"Beacon node URL (default: {config.BEACON_NODE_URL})",
    )
    parser.add_argument(
        "--timeout",
        type=float,
        default=config.TIMEOUT,
        help=f"HTTP timeout in seconds (default: {config.TIMEOUT:g})",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    return parser


async def run(args: argparse.Namespace) -> Outcome:
    """Run one request against the beacon node named by `args.connection`."""
    request = BlockInfoRequest(
        block_id=args.blockid,
        block_time=args.block_time,
        json_output=args.json,
        ssz_output=args.ssz,
        stream=args.stream,
        quiet=args.quiet,
        verbose=args.verbose,
    )
    async with BeaconApiClient(args.connection, timeout=args.timeout) as client:
        return await BlockInfoService(client).run(request)


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    setup_logging(args.debug, args.no_color, args.quiet)

    try:
        outcome = asyncio.run(run(args))
    except EmptyBlockError as exc:
        if not args.quiet:
            print(exc.message, file=sys.stderr)
        return EXIT_ABSENT
    except BlockInfoError as exc:
        if not args.quiet:
            print(exc.message, file=sys.stderr)
        return EXIT_ERROR
    except KeyboardInterrupt:
        # asyncio.run() cancels the stream; stopping it this way is a normal exit.
        logger.info("Shutting down...")
        return EXIT_OK
    finally:
        sys.stdout.flush()

    return EXIT_ABSENT if outcome is Outcome.ABSENT else EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
