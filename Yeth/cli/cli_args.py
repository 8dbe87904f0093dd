from __future__ import annotations

import argparse
from typing import Any, Optional, Sequence

from ..core.utils import positive_int_type


def add_discovery_args(parser: Any) -> argparse.ArgumentParser:
    parser.add_argument("-r", "--root", type=str, default=".", help="Root directory to search for applications")
    parser.add_argument(
        "-a",
        "--app",
        type=str,
        default=None,
        help="Name of a specific application to output the hash for (defaults to all)",
    )
    return parser


def add_output_args(parser: Any, *, short_hash_length_default: int = 10) -> argparse.ArgumentParser:
    parser.add_argument(
        "-H",
        "--hash-only",
        action="store_true",
        default=False,
        help="Show only the hash without the application name (requires --app)",
    )
    parser.add_argument("-g", "--show-graph", action="store_true", default=False, help="Show the dependency graph")
    parser.add_argument(
        "-w",
        "--write-versions",
        action="store_true",
        default=False,
        help="Save each application's hash to yeth.version next to its yeth.toml",
    )
    parser.add_argument("-s", "--short-hash", action="store_true", default=False)
    parser.add_argument(
        "-l",
        "--short-hash-length",
        type=positive_int_type("short-hash-length"),
        default=int(short_hash_length_default),
    )
    return parser


def add_diagnostics_args(parser: Any) -> argparse.ArgumentParser:
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Show execution time statistics")
    parser.add_argument(
        "--bench",
        type=positive_int_type("bench"),
        default=None,
        help="Run the full pipeline N times and report timing statistics.",
    )
    parser.add_argument("--log-dir", type=str, default=None, help="Also append logs to <log-dir>/yeth_logs.log")
    return parser


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="yeth",
        description="A utility for building dependency graphs between applications and hashing them.",
    )
    add_discovery_args(parser)
    add_output_args(parser)
    add_diagnostics_args(parser)
    return parser


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.hash_only and not args.app:
        parser.error("--hash-only requires --app")
    return args
