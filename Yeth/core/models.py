from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Tuple, Union


@dataclass(frozen=True)
class AppRef:
    """Edge to another application of the same run."""

    name: str

    def to_json_dict(self) -> Dict[str, Any]:
        return {"kind": "app", "name": self.name}


@dataclass(frozen=True)
class PathRef:
    """Edge to a file or directory that is not an application."""

    path: Path

    def to_json_dict(self) -> Dict[str, Any]:
        return {"kind": "path", "path": str(self.path)}


Dependency = Union[AppRef, PathRef]


@dataclass(frozen=True)
class NamePattern:
    """Excludes every entry with a path component equal to ``name``."""

    name: str

    def to_json_dict(self) -> Dict[str, Any]:
        return {"kind": "name", "name": self.name}


@dataclass(frozen=True)
class AbsolutePathPattern:
    """Excludes one canonical file or directory and everything below it."""

    path: Path

    def to_json_dict(self) -> Dict[str, Any]:
        return {"kind": "absolute_path", "path": str(self.path)}


ExcludePattern = Union[NamePattern, AbsolutePathPattern]


def looks_like_path(text: str) -> bool:
    """Declarations with a separator or a leading dot are paths, the rest are names."""
    if text.startswith("."):
        return True
    if "/" in text:
        return True
    return os.sep in text


def parse_dependency(text: str, app_dir: Path) -> Dependency:
    if looks_like_path(text):
        return PathRef(path=Path(app_dir) / text)
    return AppRef(name=text)


def parse_exclude_pattern(text: str, app_dir: Path) -> ExcludePattern:
    if looks_like_path(text):
        joined = Path(app_dir) / text
        try:
            canonical = joined.resolve(strict=True)
        except OSError:
            canonical = joined
        return AbsolutePathPattern(path=canonical)
    return NamePattern(name=text)


def dependency_to_json(dep: Dependency) -> Dict[str, Any]:
    if isinstance(dep, (AppRef, PathRef)):
        return dep.to_json_dict()
    raise TypeError(f"Unknown dependency kind: {dep!r}")


@dataclass(frozen=True)
class Application:
    name: str
    dir: Path
    dependencies: Tuple[Dependency, ...] = field(default_factory=tuple)
    exclude_patterns: Tuple[ExcludePattern, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        # Accept any iterable from callers but keep the record immutable.
        object.__setattr__(self, "dir", Path(self.dir))
        object.__setattr__(self, "dependencies", tuple(self.dependencies))
        object.__setattr__(self, "exclude_patterns", tuple(self.exclude_patterns))

    @staticmethod
    def from_declarations(
        name: str,
        app_dir: Path,
        *,
        dependencies: Iterable[str] = (),
        exclude: Iterable[str] = (),
    ) -> "Application":
        app_dir = Path(app_dir)
        return Application(
            name=name,
            dir=app_dir,
            dependencies=tuple(parse_dependency(d, app_dir) for d in dependencies),
            exclude_patterns=tuple(parse_exclude_pattern(p, app_dir) for p in exclude),
        )

    def app_dependencies(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self.dependencies if isinstance(d, AppRef))

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "name": self.name,
            "dir": str(self.dir),
            "dependencies": [dependency_to_json(d) for d in self.dependencies],
            "exclude_patterns": [p.to_json_dict() for p in self.exclude_patterns],
        }
