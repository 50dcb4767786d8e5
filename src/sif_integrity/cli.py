# SPDX-License-Identifier: Apache-2.0
# Copyright (C) 2024-2026 The Birthmark Standard Foundation

"""
Command line interface for computing and checking SIF integrity digests.

Usage:
    sif-digest compute [-a sha256] <path>
    sif-digest verify <alg:hex> <path>
    sif-digest legacy <sha256|sha384|sha512> <blob-path>

A path of ``-`` reads from standard input.
"""

import argparse
import logging
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import BinaryIO, Iterator, Optional, Sequence

from .algorithms import Algorithm, lookup
from .codec import decode, encode
from .config import settings
from .errors import IntegrityError
from .hash_type import HashType
from .hashing import compute
from .legacy import extract_legacy
from .matcher import matches

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MISMATCH = 1
EXIT_ERROR = 2


@contextmanager
def _open_input(path: str) -> Iterator[BinaryIO]:
    if path == "-":
        yield sys.stdin.buffer
        return
    with open(Path(path), "rb") as f:
        yield f


def cmd_compute(args: argparse.Namespace) -> int:
    algorithm = lookup(args.algorithm)
    with _open_input(args.path) as f:
        digest = compute(algorithm, f, args.chunk_size)
    print(encode(digest))
    return EXIT_OK


def cmd_verify(args: argparse.Namespace) -> int:
    digest = decode(args.digest)
    with _open_input(args.path) as f:
        matched = matches(digest, f, args.chunk_size)

    if matched:
        print(f"OK {encode(digest)}")
        return EXIT_OK
    print(f"MISMATCH {encode(digest)}")
    return EXIT_MISMATCH


def cmd_legacy(args: argparse.Namespace) -> int:
    hash_type = HashType[args.hash_type.upper()]
    with _open_input(args.path) as f:
        blob = f.read()
    print(encode(extract_legacy(hash_type, blob)))
    return EXIT_OK


def _positive_int(text: str) -> int:
    value = int(text)
    if value <= 0:
        raise argparse.ArgumentTypeError(f"must be positive, got {value}")
    return value


LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _log_level(text: str) -> str:
    level = text.strip().upper()
    if level not in LOG_LEVELS:
        raise argparse.ArgumentTypeError(
            f"invalid level {text!r} (choose from {', '.join(LOG_LEVELS)})"
        )
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sif-digest",
        description="Compute and verify SIF integrity digests",
    )
    parser.add_argument(
        "--chunk-size",
        type=_positive_int,
        default=None,
        help=f"bytes per read (default: {settings.chunk_size})",
    )
    parser.add_argument(
        "--log-level",
        type=_log_level,
        default=settings.log_level,
        help=f"logging level (default: {settings.log_level})",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_compute = sub.add_parser("compute", help="print the digest of a file")
    p_compute.add_argument(
        "-a", "--algorithm",
        default=Algorithm.SHA256.canonical_name,
        choices=[alg.canonical_name for alg in Algorithm],
    )
    p_compute.add_argument("path")
    p_compute.set_defaults(func=cmd_compute)

    p_verify = sub.add_parser("verify", help="check a file against a digest")
    p_verify.add_argument("digest", help="digest in <algorithm>:<hex> form")
    p_verify.add_argument("path")
    p_verify.set_defaults(func=cmd_verify)

    p_legacy = sub.add_parser("legacy", help="decode a legacy SIFHASH payload")
    p_legacy.add_argument(
        "hash_type",
        choices=[ht.name.lower() for ht in HashType],
    )
    p_legacy.add_argument("path")
    p_legacy.set_defaults(func=cmd_legacy)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level,
        format=settings.log_format,
    )

    try:
        return args.func(args)
    except IntegrityError as e:
        logger.debug(f"{args.command} failed", exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR
    except OSError as e:
        print(f"Error: {e}", file=sys.stderr)
        return EXIT_ERROR


if __name__ == "__main__":
    sys.exit(main())
