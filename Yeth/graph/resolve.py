from __future__ import annotations

import logging
from typing import Iterator, List, Mapping, Set, Tuple

from ..core.errors import AppNotFound, CircularDependency, DependencyNotFound
from ..core.models import Application

logger = logging.getLogger(__name__)


def resolve_order(
    target: str,
    applications: Mapping[str, Application],
    *,
    strict: bool = False,
) -> List[str]:
    """Return `target` and its transitive AppRef dependencies, dependencies first.

    Depth-first post-order; PathRef dependencies end their branch. Reaching an
    application that is still on the traversal stack abandons that branch
    without an error, so a cycle is truncated instead of reported (the batch
    sorter raises for the same graph). `strict=True` raises CircularDependency
    there instead.
    """
    if target not in applications:
        raise AppNotFound(target)

    resolved: Set[str] = set()
    on_stack: Set[str] = {target}
    order: List[str] = []
    stack: List[Tuple[str, Iterator[str]]] = [(target, iter(applications[target].app_dependencies()))]

    while stack:
        name, deps = stack[-1]
        descended = False
        for dep_name in deps:
            if dep_name in on_stack:
                if strict:
                    names = [n for n, _ in stack]
                    raise CircularDependency(names[names.index(dep_name):])
                logger.debug(f"Cycle {name} -> {dep_name} truncated while resolving '{target}'")
                continue
            if dep_name in resolved:
                continue
            if dep_name not in applications:
                raise DependencyNotFound(dep_name, name)
            on_stack.add(dep_name)
            stack.append((dep_name, iter(applications[dep_name].app_dependencies())))
            descended = True
            break
        if descended:
            continue
        stack.pop()
        on_stack.discard(name)
        resolved.add(name)
        order.append(name)

    return order
