from __future__ import annotations

from pathlib import Path

from Yeth.core.models import AbsolutePathPattern, NamePattern
from Yeth.hashing import hash_directory, should_exclude


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_no_patterns_never_excludes(tmp_path: Path):
    assert should_exclude(tmp_path / "node_modules" / "x.js", tmp_path, []) is False


def test_name_pattern_matches_whole_components_only(tmp_path: Path):
    candidate = tmp_path / "web" / "node_modules" / "x.js"
    assert should_exclude(candidate, tmp_path, [NamePattern("node_modules")]) is True
    assert should_exclude(candidate, tmp_path, [NamePattern("modules")]) is False


def test_name_pattern_ignores_components_above_base_dir(tmp_path: Path):
    base = tmp_path / "build" / "app"
    candidate = base / "src" / "main.py"
    assert should_exclude(candidate, base, [NamePattern("build")]) is False


def test_name_pattern_relative_prefix_form(tmp_path: Path):
    # Relative text matching: "build" also covers "build.log" at the top level.
    assert should_exclude(tmp_path / "build.log", tmp_path, [NamePattern("build")]) is True
    assert should_exclude(tmp_path / "src" / "build.log", tmp_path, [NamePattern("build")]) is False


def test_relative_prefix_form_is_applied_while_hashing(tmp_path: Path):
    _write(tmp_path / "a.txt", "a")
    baseline = hash_directory(tmp_path)

    _write(tmp_path / "build.log", "log")
    assert hash_directory(tmp_path, [NamePattern("build")]) == baseline


def test_absolute_path_pattern_matches_itself_and_descendants(tmp_path: Path):
    root = tmp_path.resolve()
    (root / "dist" / "js").mkdir(parents=True)
    (root / "distro").mkdir()
    pattern = AbsolutePathPattern(root / "dist")

    assert should_exclude(root / "dist", root, [pattern]) is True
    assert should_exclude(root / "dist" / "js" / "app.js", root, [pattern]) is True
    assert should_exclude(root / "distro" / "app.js", root, [pattern]) is False


def test_absolute_path_pattern_compares_canonical_paths(tmp_path: Path):
    root = tmp_path.resolve()
    (root / "app" / "dist").mkdir(parents=True)
    pattern = AbsolutePathPattern(root / "app" / "dist")

    candidate = root / "app" / ".." / "app" / "dist" / "bundle.js"
    assert should_exclude(candidate, root, [pattern]) is True
