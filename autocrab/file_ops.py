"""Sandboxed file operations restricted to a set of allowed root directories."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable


class AccessDeniedError(PermissionError):
    """Raised when a path lies outside every allowed root."""


@dataclass(frozen=True)
class FileEntry:
    """One entry of a directory listing."""

    name: str
    path: str
    is_dir: bool
    size: int


def _canonical(path: Path) -> Path:
    try:
        return path.resolve(strict=True)
    except (OSError, RuntimeError):
        return path


class FileOps:
    """Reads, writes, lists and deletes files inside allowed roots.

    With no allowed roots, every path is accessible.
    """

    def __init__(self, allowed_roots: Iterable[str | os.PathLike[str]] = ()) -> None:
        self.allowed_roots = [Path(root) for root in allowed_roots]

    def _check_access(self, path: Path) -> Path:
        canonical = _canonical(path)
        if not self.allowed_roots:
            return canonical
        for root in self.allowed_roots:
            if canonical.is_relative_to(_canonical(root)):
                return canonical
        roots = [str(root) for root in self.allowed_roots]
        raise AccessDeniedError(
            f"Access denied: '{path}' is outside allowed directories: {roots}"
        )

    @staticmethod
    def expand_path(path: str) -> Path:
        """Expand a leading ``~`` to the user's home directory."""
        return Path(os.path.expanduser(path))

    def read_file(self, path: str) -> str:
        """Return the UTF-8 text content of a file."""
        target = self._check_access(self.expand_path(path))
        return target.read_text(encoding="utf-8")

    def write_file(self, path: str, content: str) -> None:
        """Write text to a file, creating parent directories as needed."""
        target = self._check_access(self.expand_path(path))
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(content, encoding="utf-8")

    def list_directory(self, path: str) -> list[FileEntry]:
        """List a directory: directories first, then by name."""
        target = self._check_access(self.expand_path(path))
        entries = []
        with os.scandir(target) as it:
            for entry in it:
                info = entry.stat(follow_symlinks=False)
                entries.append(
                    FileEntry(
                        name=entry.name,
                        path=entry.path,
                        is_dir=entry.is_dir(follow_symlinks=False),
                        size=info.st_size,
                    )
                )
        entries.sort(key=lambda e: (not e.is_dir, e.name))
        return entries

    def delete_file(self, path: str) -> None:
        """Remove a single file."""
        target = self._check_access(self.expand_path(path))
        target.unlink()