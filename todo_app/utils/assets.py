from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Dict, FrozenSet

from todo_app.core.errors import NotFound

# Allow-list des fichiers servis sous /static
ALLOWED_ASSETS: FrozenSet[str] = frozenset({
    "todo.css",
    "plus.svg",
    "check.svg",
    "circle.svg",
    "trash.svg",
})

MEDIA_TYPES: Dict[str, str] = {
    ".css": "text/css",
    ".svg": "image/svg+xml",
}


@dataclass(frozen=True)
class Asset:
    content: bytes
    media_type: str


class AssetStore:
    """Assets embarqués : lus une fois depuis le disque puis gardés en mémoire."""

    def __init__(self, static_dir: Path, allowed: FrozenSet[str] = ALLOWED_ASSETS):
        self.static_dir = static_dir
        self.allowed = allowed
        self._load = lru_cache(maxsize=None)(self._read)

    def lookup(self, file_name: str) -> Asset:
        if file_name not in self.allowed:
            raise NotFound(f"Unknown asset: {file_name}")
        media_type = MEDIA_TYPES.get(Path(file_name).suffix.lower())
        if media_type is None:
            raise NotFound(f"Unsupported asset type: {file_name}")
        return Asset(content=self._load(file_name), media_type=media_type)

    def _read(self, file_name: str) -> bytes:
        path = self.static_dir / file_name
        try:
            return path.read_bytes()
        except FileNotFoundError as e:
            raise NotFound(f"Asset missing on disk: {file_name}") from e
