"""Dependency ordering: batch topological sort and single-target resolution."""

from .resolve import resolve_order
from .topo import build_dependency_graph, topological_sort

__all__ = ["build_dependency_graph", "resolve_order", "topological_sort"]
