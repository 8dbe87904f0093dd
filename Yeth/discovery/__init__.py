"""Application discovery from per-directory yeth.toml files."""

from .discover import discover_apps, load_application

__all__ = ["discover_apps", "load_application"]
