"""Command-line surface: argument parsing, graph view, benchmark, version sidecars."""

from .benchmark import BenchmarkResult, format_benchmark, run_benchmark, summarize_durations
from .cli_args import build_parser, parse_args
from .graph_view import format_dependency_graph
from .run import main
from .versions import write_versions

__all__ = [
	"BenchmarkResult",
	"build_parser",
	"format_benchmark",
	"format_dependency_graph",
	"main",
	"parse_args",
	"run_benchmark",
	"summarize_durations",
	"write_versions",
]
