from __future__ import annotations

import hashlib
from pathlib import Path

from ..core.errors import FileReadError

CHUNK_SIZE = 1024 * 1024


def new_hasher() -> "hashlib._Hash":
    return hashlib.sha256()


def update_from_file(h: "hashlib._Hash", path: Path) -> None:
    """Stream ``path`` into ``h`` in fixed-size chunks."""
    try:
        with Path(path).open("rb") as f:
            for chunk in iter(lambda: f.read(CHUNK_SIZE), b""):
                h.update(chunk)
    except OSError as exc:
        raise FileReadError(path, exc.strerror or str(exc)) from exc


def hash_file(path: Path) -> str:
    h = new_hasher()
    update_from_file(h, path)
    return h.hexdigest()


def hash_bytes(*parts: bytes) -> str:
    h = new_hasher()
    for part in parts:
        h.update(part)
    return h.hexdigest()
