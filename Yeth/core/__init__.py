"""
Core data model, errors and configuration shared by every Yeth layer.
"""

from .config import CONFIG_FILE, DEFAULT_IGNORED_NAMES, VERSION_FILE, YethConfig
from .errors import (
    AppNotFound,
    CircularDependency,
    ConfigParseError,
    ConfigReadError,
    DependencyNotFound,
    DuplicateApplication,
    FileReadError,
    IncorrectOrder,
    NoApplicationsFound,
    NotFileOrDirectory,
    PathDependencyNotFound,
    YethError,
)
from .models import (
    AbsolutePathPattern,
    AppRef,
    Application,
    Dependency,
    ExcludePattern,
    NamePattern,
    PathRef,
    parse_dependency,
    parse_exclude_pattern,
)

__all__ = [
    'CONFIG_FILE', 'DEFAULT_IGNORED_NAMES', 'VERSION_FILE', 'YethConfig',
    'YethError', 'AppNotFound', 'DependencyNotFound', 'PathDependencyNotFound',
    'CircularDependency', 'IncorrectOrder', 'NotFileOrDirectory', 'FileReadError',
    'ConfigReadError', 'ConfigParseError', 'DuplicateApplication', 'NoApplicationsFound',
    'AppRef', 'PathRef', 'Dependency', 'NamePattern', 'AbsolutePathPattern', 'ExcludePattern',
    'Application', 'parse_dependency', 'parse_exclude_pattern',
]
