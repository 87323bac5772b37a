from __future__ import annotations

from pathlib import Path, PurePath
from typing import Protocol

class FileAccess(Protocol):
    """What the loader needs from a filesystem.

    Both methods raise ``OSError`` subclasses on failure.
    """

    def read_bytes(self, path: Path) -> bytes:
        ...

    def list_dir(self, path: Path) -> list[Path]:
        ...

class LocalFileAccess:
    def read_bytes(self, path: Path) -> bytes:
        return Path(path).read_bytes()

    def list_dir(self, path: Path) -> list[Path]:
        return sorted(Path(path).iterdir())

class MemoryFileAccess:
    """In-memory files keyed by path. Directories exist implicitly."""

    def __init__(self, files: dict[str | PurePath, bytes | str] | None = None) -> None:
        self.files: dict[Path, bytes] = {}
        for path, content in (files or {}).items():
            self.add(path, content)

    def add(self, path: str | PurePath, content: bytes | str) -> Path:
        p = Path(path)
        self.files[p] = content.encode("utf-8") if isinstance(content, str) else content
        return p

    def _is_dir(self, path: Path) -> bool:
        return any(path in f.parents for f in self.files)

    def read_bytes(self, path: Path) -> bytes:
        p = Path(path)
        if p in self.files:
            return self.files[p]
        if self._is_dir(p):
            raise IsADirectoryError(str(p))
        raise FileNotFoundError(str(p))

    def list_dir(self, path: Path) -> list[Path]:
        p = Path(path)
        if p in self.files:
            raise NotADirectoryError(str(p))
        if not self._is_dir(p):
            raise FileNotFoundError(str(p))
        children = {p / f.relative_to(p).parts[0] for f in self.files if p in f.parents}
        return sorted(children)
