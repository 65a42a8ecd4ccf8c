"""Filesystem access used during asset collection.

Collection only needs three operations. Hosts that keep sources
somewhere other than the local disk (an editor's unsaved buffers, an
in-memory fixture) can supply their own implementation.
"""

import stat
from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class FileSystem(Protocol):
    """Protocol for the filesystem capability used by the collector.

    Every method raises OSError when the file is missing or unreadable.
    """

    def stat_size(self, path: str) -> int:
        """Return the size in bytes of an existing file."""
        ...

    def read_text(self, path: str) -> str:
        """Read a file as UTF-8 text."""
        ...

    def read_bytes(self, path: str) -> bytes:
        """Read a file's raw bytes."""
        ...


class LocalFileSystem:
    """FileSystem implementation backed by the local disk."""

    def stat_size(self, path: str) -> int:
        stat_info = Path(path).stat()
        if stat.S_ISDIR(stat_info.st_mode):
            raise IsADirectoryError(f"Not a file: {path}")
        return stat_info.st_size

    def read_text(self, path: str) -> str:
        return Path(path).read_text(encoding="utf-8")

    def read_bytes(self, path: str) -> bytes:
        return Path(path).read_bytes()
