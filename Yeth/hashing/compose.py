from __future__ import annotations

from typing import Sequence

from .fingerprints import hash_bytes


def compute_final_hash(own_hash: str, dep_hashes: Sequence[str]) -> str:
    """Combine an application's own hash with its dependency hashes.

    The inputs are fed in the given order, so the same dependency set in a
    different declaration order yields a different final hash.
    """
    return hash_bytes(own_hash.encode("ascii"), *(d.encode("ascii") for d in dep_hashes))
