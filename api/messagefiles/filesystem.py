"""Filesystem access used by the loader.

Kept behind a small class so tests can swap in failing or in-memory
implementations. Relative paths resolve against ``base_dir`` (the project
root), the same way the rest of the project resolves ``BASE_DIR``-relative
settings.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Callable

from .errors import FilesystemFailure
from .properties import read_properties_text


class LocalFileSystem:
    def __init__(self, base_dir: str | os.PathLike | None = None):
        self.base_dir = Path(base_dir) if base_dir is not None else Path.cwd()

    def resolve(self, path: str | os.PathLike) -> Path:
        p = Path(path).expanduser()
        return p if p.is_absolute() else self.base_dir / p

    def child(self, directory: Path, name: str) -> Path:
        return directory / name

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def list_files(self, directory: Path, accept: Callable[[str], bool]) -> list[Path]:
        """Files directly inside ``directory`` whose name passes ``accept``, sorted by name.

        Raises ``FilesystemFailure`` when the directory cannot be enumerated.
        """
        try:
            with os.scandir(directory) as it:
                names = [entry.name for entry in it if accept(entry.name) and entry.is_file()]
        except OSError as exc:
            raise FilesystemFailure(directory, exc) from exc
        return [directory / name for name in sorted(names)]

    def mtime(self, path: Path) -> float:
        try:
            return path.stat().st_mtime
        except OSError as exc:
            raise FilesystemFailure(path, exc) from exc

    def read_text(self, path: Path) -> str:
        return read_properties_text(path)


__all__ = ['LocalFileSystem']
