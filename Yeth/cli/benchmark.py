"""Repeated full runs with timing statistics.

Each iteration re-discovers, re-sorts and re-hashes from scratch; nothing is
shared between iterations except the configuration.
"""

from __future__ import annotations

import logging
import time
from dataclasses import asdict, dataclass
from typing import Any, Dict, List, Optional

import numpy as np

from ..core.config import YethConfig
from ..engine import YethEngine

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class BenchmarkResult:
    iterations: int
    apps_count: int
    durations: List[float]
    mean: float
    median: float
    min: float
    max: float
    std: float
    total: float

    def to_json_dict(self) -> Dict[str, Any]:
        return asdict(self)


def summarize_durations(durations: List[float], *, apps_count: int) -> BenchmarkResult:
    arr = np.asarray(durations, dtype=float)
    if arr.size == 0:
        raise ValueError("Cannot summarize an empty benchmark")
    return BenchmarkResult(
        iterations=int(arr.size),
        apps_count=int(apps_count),
        durations=[float(d) for d in arr],
        mean=float(np.mean(arr)),
        median=float(np.median(arr)),
        min=float(np.min(arr)),
        max=float(np.max(arr)),
        std=float(np.std(arr)) if arr.size > 1 else 0.0,
        total=float(np.sum(arr)),
    )


def run_benchmark(config: YethConfig, iterations: int, *, app: Optional[str] = None) -> BenchmarkResult:
    iterations = max(1, int(iterations))
    durations: List[float] = []
    apps_count = 0

    for i in range(1, iterations + 1):
        start = time.perf_counter()
        engine = YethEngine(config)
        applications = engine.discover_apps()
        order = engine.topological_sort(applications)
        if app is not None:
            engine.compute_hashes_for_app(app, applications)
        else:
            engine.compute_hashes(order, applications)
        elapsed = time.perf_counter() - start

        if i == 1:
            apps_count = len(applications)
        durations.append(elapsed)
        logger.debug(f"Iteration {i}: {format_seconds(elapsed)}")

    return summarize_durations(durations, apps_count=apps_count)


def format_seconds(seconds: float) -> str:
    if seconds >= 1.0:
        return f"{seconds:.2f}s"
    if seconds >= 1e-3:
        return f"{seconds * 1e3:.2f}ms"
    return f"{seconds * 1e6:.2f}µs"


def format_benchmark(result: BenchmarkResult) -> str:
    return "\n".join(
        [
            "Benchmark results:",
            f"  Iterations: {result.iterations}",
            f"  Applications processed: {result.apps_count}",
            f"  Average time: {format_seconds(result.mean)}",
            f"  Median time: {format_seconds(result.median)}",
            f"  Min time: {format_seconds(result.min)}",
            f"  Max time: {format_seconds(result.max)}",
            f"  Standard deviation: {format_seconds(result.std)}",
            f"  Total time: {format_seconds(result.total)}",
        ]
    )
