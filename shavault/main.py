"""
SHAVault - Main Entry Point

Hashes a message with the from-scratch SHA-256 and prints the hex digest.

Usage:
    python -m shavault ["message"] [--encoding utf-8] [--self-test] [--log-level DEBUG]

Environment Variables:
    SHAVAULT_LOG_LEVEL      Log level (default: WARNING)
"""

import argparse
import logging
import os
import sys
from typing import Optional, Sequence

from .core_crypto.sha256 import padded_block_count, sha256_hex
from .core_crypto.reference import run_self_test


DEFAULT_MESSAGE = "Hello, Rust!"

# Exit codes
EXIT_SUCCESS = 0
EXIT_USAGE_ERROR = 1
EXIT_SELF_TEST_FAILED = 2

logger = logging.getLogger(__name__)


def setup_logging(level: str = "WARNING") -> None:
    """Configure logging for the CLI."""
    log_level = getattr(logging, level.upper(), logging.WARNING)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(sys.stderr)],
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="shavault",
        description="Compute the SHA-256 digest of a message (FIPS 180-4, from scratch).",
    )
    parser.add_argument(
        "message",
        nargs="?",
        default=DEFAULT_MESSAGE,
        help=f"Text to hash (default: {DEFAULT_MESSAGE!r})",
    )
    parser.add_argument(
        "--encoding",
        default="utf-8",
        help="Encoding used to turn the message into bytes (default: utf-8)",
    )
    parser.add_argument(
        "--self-test",
        action="store_true",
        help="Run the known-answer self test against the reference SHA-256",
    )
    parser.add_argument(
        "--log-level",
        default=os.environ.get("SHAVAULT_LOG_LEVEL", "WARNING"),
        help="Log level (default: $SHAVAULT_LOG_LEVEL or WARNING)",
    )
    return parser


def cmd_self_test(message: bytes) -> int:
    """Print a PASS/FAIL line per vector and return the exit code."""
    results = run_self_test(extra=[message])

    print("SHA-256 Implementation Test")
    print("=" * 60)
    for result in results:
        print(result)
    print("=" * 60)

    failed = [r for r in results if not r.passed]
    if failed:
        print(f"Overall: {len(failed)} of {len(results)} checks failed!")
        return EXIT_SELF_TEST_FAILED

    print(f"Overall: all {len(results)} checks passed!")
    return EXIT_SUCCESS


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for SHAVault."""
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    try:
        data = args.message.encode(args.encoding)
    except LookupError:
        print(f"Error: unknown encoding {args.encoding!r}", file=sys.stderr)
        return EXIT_USAGE_ERROR
    except UnicodeEncodeError as exc:
        print(f"Error: cannot encode message as {args.encoding}: {exc}", file=sys.stderr)
        return EXIT_USAGE_ERROR

    logger.debug(
        "Hashing %d bytes (%d blocks after padding)",
        len(data), padded_block_count(len(data)),
    )

    if args.self_test:
        return cmd_self_test(data)

    print(f"Input data: {args.message}")
    print(f"SHA-256 hash: {sha256_hex(data)}")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
