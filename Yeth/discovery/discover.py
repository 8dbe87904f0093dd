from __future__ import annotations

import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Iterable, List

from ..core.config import CONFIG_FILE
from ..core.errors import ConfigParseError, ConfigReadError, DuplicateApplication
from ..core.models import Application

logger = logging.getLogger(__name__)


def discover_apps(root: str | Path, *, config_file_name: str = CONFIG_FILE) -> Dict[str, Application]:
    """Find every directory under `root` holding a config file and load it.

    The application name is the base name of that directory. One unreadable or
    malformed config aborts the whole pass.
    """
    applications: Dict[str, Application] = {}
    for config_path in _iter_config_files(Path(root), config_file_name):
        app = load_application(config_path)
        previous = applications.get(app.name)
        if previous is not None:
            raise DuplicateApplication(app.name, previous.dir, app.dir)
        applications[app.name] = app
        logger.debug(f"Discovered application '{app.name}' at {app.dir}")
    return applications


def load_application(config_path: Path) -> Application:
    app_dir = config_path.parent
    if not app_dir.name:
        raise ConfigParseError(config_path, "application directory has no name")

    try:
        text = config_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigReadError(config_path, exc.strerror or str(exc)) from exc

    try:
        payload = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigParseError(config_path, str(exc)) from exc

    app_table = payload.get("app")
    if not isinstance(app_table, dict):
        raise ConfigParseError(config_path, "missing [app] table")
    if "dependencies" not in app_table:
        raise ConfigParseError(config_path, "missing field `dependencies` in [app]")

    dependencies = _string_list(app_table["dependencies"], field="dependencies", config_path=config_path)
    exclude = _string_list(app_table.get("exclude", []), field="exclude", config_path=config_path)

    return Application.from_declarations(
        app_dir.name,
        app_dir,
        dependencies=dependencies,
        exclude=exclude,
    )


def _string_list(value: Any, *, field: str, config_path: Path) -> List[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise ConfigParseError(config_path, f"`{field}` must be a list of strings")
    return list(value)


def _iter_config_files(root: Path, config_file_name: str) -> Iterable[Path]:
    if not root.exists() or not root.is_dir():
        return

    stack = [root]
    while stack:
        cur = stack.pop()
        try:
            children = sorted(cur.iterdir())
        except OSError as exc:
            logger.warning(f"Skipping unreadable directory {cur}: {exc}")
            continue
        # Reversed so the stack pops directories in name order.
        for child in reversed(children):
            if child.is_symlink():
                continue
            if child.is_dir():
                stack.append(child)
            elif child.name == config_file_name and child.is_file():
                yield child
