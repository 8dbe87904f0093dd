"""Content hashing (file, directory tree, final composition)."""

from .compose import compute_final_hash
from .directory import hash_directory, hash_path, iter_hashable_files, should_exclude
from .fingerprints import hash_bytes, hash_file

__all__ = [
	"compute_final_hash",
	"hash_bytes",
	"hash_directory",
	"hash_file",
	"hash_path",
	"iter_hashable_files",
	"should_exclude",
]
