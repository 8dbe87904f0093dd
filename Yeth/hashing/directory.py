from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, List, Optional, Sequence

from ..core.config import DEFAULT_IGNORED_NAMES
from ..core.errors import NotFileOrDirectory
from ..core.models import AbsolutePathPattern, ExcludePattern, NamePattern
from .fingerprints import hash_file, new_hasher, update_from_file

logger = logging.getLogger(__name__)


def _canonical(path: Path) -> Path:
    try:
        return path.resolve()
    except (OSError, RuntimeError):
        return path


def _relative_to(path: Path, base_dir: Path) -> Optional[Path]:
    try:
        return path.relative_to(base_dir)
    except ValueError:
        return None


def should_exclude(path: Path, base_dir: Path, exclude_patterns: Sequence[ExcludePattern]) -> bool:
    """Return True when ``path`` (found under ``base_dir``) matches any exclusion.

    Matching rules:
    1) NamePattern: some component of the path below ``base_dir`` equals the name.
    2) AbsolutePathPattern: the canonical path equals the pattern or lies under it.
    3) NamePattern, relative form: the path relative to ``base_dir`` starts with the name.

    Pure function of its arguments; nothing is cached between calls.
    """
    if not exclude_patterns:
        return False

    path = Path(path)
    rel = _relative_to(path, Path(base_dir))
    components = rel.parts if rel is not None else path.parts
    canonical = _canonical(path)

    for pattern in exclude_patterns:
        if isinstance(pattern, NamePattern):
            if pattern.name in components:
                return True
        elif isinstance(pattern, AbsolutePathPattern):
            if canonical == pattern.path or pattern.path in canonical.parents:
                return True
        else:
            raise TypeError(f"Unknown exclude pattern kind: {pattern!r}")

    if rel is not None:
        rel_text = str(rel)
        for pattern in exclude_patterns:
            if isinstance(pattern, NamePattern) and rel_text.startswith(pattern.name):
                return True

    return False


def _is_ignored(path: Path, base_dir: Path, ignored_names: AbstractSet[str]) -> bool:
    """Every component below ``base_dir`` is checked, not just the base name.

    A file inside an ignored directory (e.g. ``.git/objects/..``) is ignored too,
    unlike base-name matching which would only skip the directory entry itself.
    """
    rel = _relative_to(path, base_dir)
    parts = rel.parts if rel is not None else (path.name,)
    return any(part in ignored_names for part in parts)


def iter_hashable_files(
    root: Path,
    exclude_patterns: Sequence[ExcludePattern] = (),
    *,
    ignored_names: AbstractSet[str] = DEFAULT_IGNORED_NAMES,
) -> List[Path]:
    """Regular files under ``root`` that take part in its content hash, in hashing order.

    Symlinks are neither followed nor hashed. Excluded or ignored directories are
    pruned; that never changes the result because every file below them would
    match the same rule.
    """
    root = Path(root)
    if not root.is_dir():
        raise NotFileOrDirectory(root)
    files: List[Path] = []

    stack = [root]
    while stack:
        cur = stack.pop()
        try:
            children = list(cur.iterdir())
        except OSError as exc:
            logger.warning(f"Skipping unreadable directory {cur}: {exc}")
            continue
        for child in children:
            if child.is_symlink():
                continue
            if _is_ignored(child, root, ignored_names):
                continue
            if should_exclude(child, root, exclude_patterns):
                continue
            if child.is_dir():
                stack.append(child)
            elif child.is_file():
                files.append(child)

    # Enumeration order is filesystem-defined; the sort is what makes hashes stable.
    return sorted(files)


def hash_directory(
    path: Path,
    exclude_patterns: Sequence[ExcludePattern] = (),
    *,
    ignored_names: AbstractSet[str] = DEFAULT_IGNORED_NAMES,
) -> str:
    h = new_hasher()
    files = iter_hashable_files(path, exclude_patterns, ignored_names=ignored_names)
    for file in files:
        update_from_file(h, file)
    digest = h.hexdigest()
    logger.debug(f"Hashed {len(files)} files under {path}: {digest}")
    return digest


def hash_path(
    path: Path,
    exclude_patterns: Sequence[ExcludePattern] = (),
    *,
    ignored_names: AbstractSet[str] = DEFAULT_IGNORED_NAMES,
) -> str:
    """Hash a file or a directory tree; anything else is rejected."""
    path = Path(path)
    if path.is_file():
        return hash_file(path)
    if path.is_dir():
        return hash_directory(path, exclude_patterns, ignored_names=ignored_names)
    raise NotFileOrDirectory(path)

