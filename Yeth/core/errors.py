from __future__ import annotations

from pathlib import Path
from typing import Iterable, List


class YethError(RuntimeError):
    pass


class AppNotFound(YethError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Application '{name}' not found")


class DependencyNotFound(YethError):
    def __init__(self, dependency: str, owner: str):
        self.dependency = dependency
        self.owner = owner
        super().__init__(f"Application dependency '{dependency}' for '{owner}' not found")


class PathDependencyNotFound(YethError):
    def __init__(self, path: Path, owner: str):
        self.path = Path(path)
        self.owner = owner
        super().__init__(f"Path dependency '{path}' for '{owner}' not found")


class CircularDependency(YethError):
    def __init__(self, remaining: Iterable[str] = ()):
        self.remaining: List[str] = sorted(remaining)
        if self.remaining:
            super().__init__(f"Circular dependency detected involving: {', '.join(self.remaining)}")
        else:
            super().__init__("Circular dependency detected")


class IncorrectOrder(YethError):
    """Raised when an application is hashed before one of its AppRef dependencies."""

    def __init__(self, app: str, dependency: str):
        self.app = app
        self.dependency = dependency
        super().__init__(
            f"Dependency not processed in correct order: '{dependency}' must be hashed before '{app}'"
        )


class NotFileOrDirectory(YethError):
    def __init__(self, path: Path):
        self.path = Path(path)
        super().__init__(f"Path '{path}' is neither a file nor a directory")


class FileReadError(YethError):
    """A file selected for hashing could not be opened or read.

    The underlying ``OSError`` is kept as ``__cause__``.
    """

    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        self.reason = reason
        detail = f": {reason}" if reason else ""
        super().__init__(f"Failed to read '{path}'{detail}")


class ConfigReadError(YethError):
    def __init__(self, path: Path, reason: str = ""):
        self.path = Path(path)
        super().__init__(f"Failed to read config file '{path}': {reason}")


class ConfigParseError(YethError):
    def __init__(self, path: Path, reason: str):
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse config file '{path}': {reason}")


class DuplicateApplication(YethError):
    def __init__(self, name: str, first_dir: Path, second_dir: Path):
        self.name = name
        self.first_dir = Path(first_dir)
        self.second_dir = Path(second_dir)
        super().__init__(f"Application name '{name}' is declared twice: {first_dir} and {second_dir}")


class NoApplicationsFound(YethError):
    def __init__(self, root: Path):
        self.root = Path(root)
        super().__init__(f"No applications found under {root}")
