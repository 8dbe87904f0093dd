"""yeth command line: print (and optionally persist) application hashes."""

from __future__ import annotations

import logging
import time
from typing import Optional, Sequence

from ..core.config import YethConfig
from ..core.errors import YethError
from ..core.utils import setup_logging, shorten_hash
from ..engine import YethEngine
from .benchmark import format_benchmark, format_seconds, run_benchmark
from .cli_args import parse_args
from .graph_view import format_dependency_graph
from .versions import write_versions


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    logger = setup_logging(
        "yeth",
        "cli",
        log_dir=args.log_dir,
        level=logging.DEBUG if args.verbose else logging.INFO,
    )
    config = YethConfig.from_args(args)
    logger.debug(f"Configuration: {config.to_json_dict()}")

    try:
        if args.bench is not None:
            print(f"Running benchmark with {args.bench} iterations...")
            print()
            result = run_benchmark(config, args.bench, app=args.app)
            print(format_benchmark(result))
            return 0

        start = time.perf_counter()
        engine = YethEngine(config)
        applications = engine.discover_apps()

        if args.show_graph:
            print(format_dependency_graph(applications))
            return 0

        # Validates the whole graph even when only one application is hashed.
        order = engine.topological_sort(applications)
        if args.app:
            hashes = engine.compute_hashes_for_app(args.app, applications)
        else:
            hashes = engine.compute_hashes(order, applications)

        short_length = config.short_hash_length if args.short_hash else None

        if args.write_versions:
            write_versions(
                hashes,
                applications,
                file_name=config.version_file_name,
                short_length=short_length,
            )

        if args.app:
            formatted = shorten_hash(hashes[args.app], short_length)
            print(formatted if args.hash_only else f"{formatted} {args.app}")
        else:
            for name in sorted(hashes):
                print(f"{shorten_hash(hashes[name], short_length)} {name}")

        if args.verbose:
            print()
            print(f"Execution time: {format_seconds(time.perf_counter() - start)}")
            print(f"Applications processed: {len(hashes)}")
    except YethError as exc:
        logger.error(str(exc))
        return 1

    return 0
