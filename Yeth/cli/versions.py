from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Mapping, Optional

from ..core.config import VERSION_FILE
from ..core.errors import AppNotFound
from ..core.models import Application
from ..core.utils import shorten_hash

logger = logging.getLogger(__name__)


def write_text(path: Path, text: str) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")


def write_versions(
    hashes: Mapping[str, str],
    applications: Mapping[str, Application],
    *,
    file_name: str = VERSION_FILE,
    short_length: Optional[int] = None,
) -> List[Path]:
    """Write each hash next to its application's config; returns the files written.

    `file_name` is in the hasher's ignore set, so the sidecars never feed back
    into later hashes.
    """
    written: List[Path] = []
    for name in sorted(hashes):
        app = applications.get(name)
        if app is None:
            raise AppNotFound(name)
        target = app.dir / file_name
        write_text(target, shorten_hash(hashes[name], short_length))
        logger.debug(f"Wrote {target}")
        written.append(target)
    return written
