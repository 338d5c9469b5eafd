"""
Command-line entry point.
"""

import argparse
import sys

from dualdns import __version__
from dualdns.core.config import settings
from dualdns.core.exceptions import ResolverError
from dualdns.core.logging import get_logger, setup_logging
from dualdns.services.batch import BatchResolver
from dualdns.services.dns import AddressResolver

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="dualdns",
        description="Resolve host:port addresses, preferring IPv6.",
    )
    parser.add_argument("addrs", nargs="+", metavar="ADDR", help="ip:port, [v6]:port or domain:port")
    parser.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Resolve addresses given on the command line and print them in order."""
    args = build_parser().parse_args(argv)
    setup_logging("DEBUG" if args.verbose else None)

    batch = BatchResolver(AddressResolver.from_settings(settings))
    try:
        results = batch.resolve_all(args.addrs)
    except ResolverError as e:
        logger.error(f"Resolution failed: {e}")
        return 1

    for result in results:
        sys.stdout.write(f"{result}\n")
    return 0
