from __future__ import annotations

import logging
from collections import deque
from typing import Dict, List, Mapping, Tuple

from ..core.errors import CircularDependency, DependencyNotFound, PathDependencyNotFound
from ..core.models import AppRef, Application, PathRef

logger = logging.getLogger(__name__)


def build_dependency_graph(
    applications: Mapping[str, Application],
) -> Tuple[Dict[str, List[str]], Dict[str, int]]:
    """Return (dependents, in_degree) over AppRef edges only.

    `dependents[dep]` lists the applications that depend on `dep`. PathRef
    dependencies add nothing to the in-degree but their targets must exist.
    """
    dependents: Dict[str, List[str]] = {name: [] for name in applications}
    in_degree: Dict[str, int] = {}

    for app_name in sorted(applications):
        app = applications[app_name]
        app_deps = 0
        for dep in app.dependencies:
            if isinstance(dep, AppRef):
                if dep.name not in applications:
                    raise DependencyNotFound(dep.name, app_name)
                dependents[dep.name].append(app_name)
                app_deps += 1
            elif isinstance(dep, PathRef):
                if not dep.path.exists():
                    raise PathDependencyNotFound(dep.path, app_name)
            else:
                raise TypeError(f"Unknown dependency kind: {dep!r}")
        in_degree[app_name] = app_deps

    return dependents, in_degree


def topological_sort(applications: Mapping[str, Application]) -> List[str]:
    """Order every application so that dependencies come before dependents.

    Kahn's algorithm. Ready applications are taken in name order, so the result
    is reproducible for a given mapping.
    """
    dependents, in_degree = build_dependency_graph(applications)

    queue = deque(sorted(name for name, deg in in_degree.items() if deg == 0))
    order: List[str] = []

    while queue:
        name = queue.popleft()
        order.append(name)
        for dependent in sorted(dependents[name]):
            in_degree[dependent] -= 1
            if in_degree[dependent] == 0:
                queue.append(dependent)

    if len(order) != len(applications):
        remaining = set(applications) - set(order)
        raise CircularDependency(remaining)

    logger.debug(f"Topological order: {order}")
    return order
