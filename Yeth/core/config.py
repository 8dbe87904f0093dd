from __future__ import annotations

from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, FrozenSet

CONFIG_FILE = "yeth.toml"
VERSION_FILE = "yeth.version"

# Version-control metadata, OS metadata and our own sidecar output.
DEFAULT_IGNORED_NAMES: FrozenSet[str] = frozenset({".git", ".DS_Store", VERSION_FILE})


@dataclass(frozen=True)
class YethConfig:
    """Configuration surface for one discovery + hashing run.

    Notes:
    - `root` stays as given; `resolved_root()` is what discovery walks.
    - `short_hash_length` is only applied by output layers, never to stored hashes.
    """

    root: str = "."
    config_file_name: str = CONFIG_FILE
    version_file_name: str = VERSION_FILE
    ignored_names: FrozenSet[str] = field(default_factory=lambda: DEFAULT_IGNORED_NAMES)
    short_hash_length: int = 10

    def to_json_dict(self) -> Dict[str, Any]:
        payload = asdict(self)
        payload["ignored_names"] = sorted(self.ignored_names)
        return payload

    def resolved_root(self) -> Path:
        return Path(self.root).expanduser().resolve()

    @staticmethod
    def from_args(args: Any) -> "YethConfig":
        return YethConfig(
            root=str(getattr(args, "root", ".") or "."),
            short_hash_length=int(getattr(args, "short_hash_length", 10) or 10),
        )
