from __future__ import annotations

import logging
from typing import AbstractSet, Dict, Iterable, List, Mapping, Optional

from .core.config import DEFAULT_IGNORED_NAMES, YethConfig
from .core.errors import AppNotFound, IncorrectOrder, NoApplicationsFound
from .core.models import AppRef, Application, PathRef
from .discovery import discover_apps
from .graph import resolve_order, topological_sort
from .hashing import compute_final_hash, hash_directory, hash_path

logger = logging.getLogger(__name__)


def compute_hashes(
    order: Iterable[str],
    applications: Mapping[str, Application],
    *,
    ignored_names: AbstractSet[str] = DEFAULT_IGNORED_NAMES,
) -> Dict[str, str]:
    """Final hash per application, processing `order` strictly left to right.

    AppRef dependencies reuse hashes computed earlier in `order`; PathRef
    dependencies are hashed afresh with the owner's exclusions.
    """
    hashes: Dict[str, str] = {}
    for app_name in order:
        app = applications.get(app_name)
        if app is None:
            raise AppNotFound(app_name)

        own_hash = hash_directory(app.dir, app.exclude_patterns, ignored_names=ignored_names)

        dep_hashes: List[str] = []
        for dep in app.dependencies:
            if isinstance(dep, AppRef):
                if dep.name not in hashes:
                    raise IncorrectOrder(app_name, dep.name)
                dep_hashes.append(hashes[dep.name])
            elif isinstance(dep, PathRef):
                dep_hashes.append(hash_path(dep.path, app.exclude_patterns, ignored_names=ignored_names))
            else:
                raise TypeError(f"Unknown dependency kind: {dep!r}")

        hashes[app_name] = compute_final_hash(own_hash, dep_hashes)
        logger.debug(f"{app_name}: own={own_hash} deps={len(dep_hashes)} final={hashes[app_name]}")
    return hashes


def compute_hashes_for_app(
    name: str,
    applications: Mapping[str, Application],
    *,
    ignored_names: AbstractSet[str] = DEFAULT_IGNORED_NAMES,
) -> Dict[str, str]:
    """Hash exactly `name` and its transitive AppRef closure."""
    return compute_hashes(resolve_order(name, applications), applications, ignored_names=ignored_names)


class YethEngine:
    """Discovery + ordering + hashing bound to one configuration."""

    def __init__(self, config: Optional[YethConfig] = None):
        self.config = config or YethConfig()

    def discover_apps(self) -> Dict[str, Application]:
        root = self.config.resolved_root()
        applications = discover_apps(root, config_file_name=self.config.config_file_name)
        if not applications:
            raise NoApplicationsFound(root)
        return applications

    def topological_sort(self, applications: Mapping[str, Application]) -> List[str]:
        return topological_sort(applications)

    def resolve_order(self, name: str, applications: Mapping[str, Application]) -> List[str]:
        return resolve_order(name, applications)

    def compute_hashes(self, order: Iterable[str], applications: Mapping[str, Application]) -> Dict[str, str]:
        return compute_hashes(order, applications, ignored_names=self.config.ignored_names)

    def compute_hashes_for_app(self, name: str, applications: Mapping[str, Application]) -> Dict[str, str]:
        return self.compute_hashes(self.resolve_order(name, applications), applications)

    def run(self, app: Optional[str] = None) -> Dict[str, str]:
        """One full pass: discover, validate the whole graph, then hash.

        The batch sort always runs, so a cycle anywhere fails the run even when
        only `app` is hashed.
        """
        applications = self.discover_apps()
        order = self.topological_sort(applications)
        if app is not None:
            return self.compute_hashes_for_app(app, applications)
        return self.compute_hashes(order, applications)
