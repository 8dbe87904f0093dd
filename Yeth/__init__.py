"""
Yeth: dependency-aware content fingerprints for applications sharing one source tree.

An application's final hash covers its own files and, in declaration order, the
hashes of everything it depends on, so a change anywhere in its closure changes
its fingerprint.
"""

from .core import AppRef, Application, NamePattern, AbsolutePathPattern, PathRef, YethConfig, YethError
from .discovery import discover_apps
from .engine import YethEngine, compute_hashes, compute_hashes_for_app
from .graph import resolve_order, topological_sort
from .hashing import compute_final_hash, hash_directory, hash_file, hash_path

__version__ = "0.1.0"
__all__ = [
    'AppRef', 'PathRef', 'NamePattern', 'AbsolutePathPattern', 'Application',
    'YethConfig', 'YethError', 'YethEngine',
    'discover_apps', 'topological_sort', 'resolve_order',
    'compute_hashes', 'compute_hashes_for_app', 'compute_final_hash',
    'hash_file', 'hash_directory', 'hash_path',
    '__version__'
]
