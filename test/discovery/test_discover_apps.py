from __future__ import annotations

from pathlib import Path

import pytest

from Yeth.core.errors import ConfigParseError, ConfigReadError, DuplicateApplication
from Yeth.core.models import AbsolutePathPattern, AppRef, NamePattern, PathRef
from Yeth.discovery import discover_apps, load_application


def _write(path: Path, content: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")


def test_discovers_three_applications(tmp_path: Path):
    app1 = tmp_path / "app1"
    app2 = tmp_path / "app2"
    app3 = tmp_path / "nested" / "app3"
    (app2 / "dist").mkdir(parents=True)
    _write(app1 / "yeth.toml", '[app]\ndependencies = []\nexclude = ["node_modules"]\n')
    _write(app2 / "yeth.toml", '[app]\ndependencies = ["app1"]\nexclude = ["node_modules", "./dist"]\n')
    _write(app3 / "yeth.toml", '[app]\ndependencies = ["../shared/lib"]\n')

    apps = discover_apps(tmp_path)

    assert sorted(apps) == ["app1", "app2", "app3"]
    assert apps["app1"].dir == app1
    assert apps["app1"].dependencies == ()
    assert apps["app1"].exclude_patterns == (NamePattern("node_modules"),)

    assert apps["app2"].dependencies == (AppRef("app1"),)
    assert apps["app2"].exclude_patterns == (
        NamePattern("node_modules"),
        AbsolutePathPattern((app2 / "dist").resolve()),
    )

    assert apps["app3"].dependencies == (PathRef(app3 / "../shared/lib"),)
    assert apps["app3"].exclude_patterns == ()


def test_empty_or_missing_root_finds_nothing(tmp_path: Path):
    assert discover_apps(tmp_path) == {}
    assert discover_apps(tmp_path / "missing") == {}


def test_custom_config_file_name(tmp_path: Path):
    _write(tmp_path / "svc" / "build.toml", "[app]\ndependencies = []\n")
    _write(tmp_path / "other" / "yeth.toml", "[app]\ndependencies = []\n")

    assert sorted(discover_apps(tmp_path, config_file_name="build.toml")) == ["svc"]


def test_symlinked_directories_are_not_followed(tmp_path: Path):
    _write(tmp_path / "real" / "app" / "yeth.toml", "[app]\ndependencies = []\n")
    (tmp_path / "link").symlink_to(tmp_path / "real", target_is_directory=True)

    apps = discover_apps(tmp_path)
    assert list(apps) == ["app"]
    assert apps["app"].dir == tmp_path / "real" / "app"


def test_invalid_toml_is_a_parse_error(tmp_path: Path):
    _write(tmp_path / "broken" / "yeth.toml", "[app\ndependencies = [")

    with pytest.raises(ConfigParseError) as excinfo:
        discover_apps(tmp_path)
    assert excinfo.value.path == tmp_path / "broken" / "yeth.toml"


@pytest.mark.parametrize(
    "content",
    [
        "dependencies = []\n",
        "[app]\nexclude = []\n",
        '[app]\ndependencies = "app1"\n',
        "[app]\ndependencies = [1, 2]\n",
        '[app]\ndependencies = []\nexclude = "dist"\n',
    ],
)
def test_malformed_app_table_is_a_parse_error(tmp_path: Path, content: str):
    config_path = tmp_path / "svc" / "yeth.toml"
    _write(config_path, content)

    with pytest.raises(ConfigParseError):
        load_application(config_path)


def test_unknown_keys_are_ignored(tmp_path: Path):
    config_path = tmp_path / "svc" / "yeth.toml"
    _write(config_path, '[app]\ndependencies = []\nowner = "team"\n\n[build]\ncmd = "make"\n')

    app = load_application(config_path)
    assert app.name == "svc"
    assert app.dependencies == ()


def test_duplicate_names_are_rejected(tmp_path: Path):
    _write(tmp_path / "a" / "api" / "yeth.toml", "[app]\ndependencies = []\n")
    _write(tmp_path / "b" / "api" / "yeth.toml", "[app]\ndependencies = []\n")

    with pytest.raises(DuplicateApplication) as excinfo:
        discover_apps(tmp_path)
    assert excinfo.value.name == "api"


def test_unreadable_config_is_a_read_error(tmp_path: Path, monkeypatch):
    config_path = tmp_path / "svc" / "yeth.toml"
    _write(config_path, "[app]\ndependencies = []\n")
    real_read_text = Path.read_text

    def _read_text(self, *args, **kwargs):
        if self.name == "yeth.toml":
            raise PermissionError(13, "Permission denied", str(self))
        return real_read_text(self, *args, **kwargs)

    monkeypatch.setattr(Path, "read_text", _read_text)

    with pytest.raises(ConfigReadError) as excinfo:
        discover_apps(tmp_path)
    assert excinfo.value.path == config_path
    assert isinstance(excinfo.value.__cause__, OSError)
