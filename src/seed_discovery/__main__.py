"""
Seed peer listing entry point.

Print the embedded seed peers of a network, one `host:port` per line.

Usage::

    python -m seed_discovery
    python -m seed_discovery --network testnet
    python -m seed_discovery --limit 8 --verbose

Options:
    --network    Network whose default port is used (default: $SEED_NETWORK or mainnet)
    --limit      Print at most this many peers, in table order
    -v           Enable debug logging
    --no-color   Disable colored logging output
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from seed_discovery import config
from seed_discovery.discovery import PeerAddress, PeerDiscovery, PeerDiscoveryError, SeedPeers
from seed_discovery.params import NETWORKS, get_network

logger = logging.getLogger(__name__)


class ColoredFormatter(logging.Formatter):
    """Logging formatter with ANSI colors for better readability."""

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
        """Format log record with colors."""
        color = self.LEVEL_COLORS.get(record.levelno, self.RESET)
        timestamp = f"{self.CYAN}{self.formatTime(record, self.datefmt)}{self.RESET}"
        levelname = f"{color}{record.levelname:8}{self.RESET}"
        name = f"{self.BLUE}{record.name}{self.RESET}"
        return f"{timestamp} {levelname} {name}: {record.getMessage()}"


def setup_logging(verbose: bool = False, no_color: bool = False) -> None:
    """Configure logging on stderr, keeping stdout for the peer list."""
    level = logging.DEBUG if verbose else logging.INFO

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


def collect_peers(provider: PeerDiscovery, limit: int | None = None) -> list[PeerAddress]:
    """
    Gather peers from a discovery provider.

    Without a limit the provider's full set is used. With one, peers are
    pulled one at a time so the provider stops after `limit` entries.

    Raises:
        PeerDiscoveryError: Propagated from the provider.
    """
    if limit is None:
        return provider.get_peers()

    peers: list[PeerAddress] = []
    while len(peers) < limit and (peer := provider.get_peer()) is not None:
        peers.append(peer)
    return peers


def _non_negative(value: str) -> int:
    """Parse a non-negative integer argument for argparse."""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    """Create the command line parser."""
    parser = argparse.ArgumentParser(
        prog="seed-discovery",
        description="List the embedded seed peers of a network",
    )
    parser.add_argument(
        "--network",
        choices=sorted(NETWORKS),
        default=config.SEED_NETWORK,
        help=f"Network to list seed peers for (default: {config.SEED_NETWORK})",
    )
    parser.add_argument(
        "--limit",
        type=_non_negative,
        default=None,
        help="Print at most this many peers",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored logging output",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point. Returns the process exit status."""
    args = build_parser().parse_args(argv)

    setup_logging(args.verbose, args.no_color)

    params = get_network(args.network)
    provider = SeedPeers(params)
    try:
        peers = collect_peers(provider, args.limit)
    except PeerDiscoveryError as e:
        logger.error("Seed discovery failed: %s", e)
        return 1
    finally:
        provider.shutdown()

    for peer in peers:
        print(peer)

    logger.info("Listed %d of %d seed peers for %s", len(peers), len(provider), params.id)
    return 0


if __name__ == "__main__":
    sys.exit(main())
