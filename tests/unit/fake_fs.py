"""
Test doubles for the filesystem port.

ScriptedFS behaves like LocalFS on a real temporary directory but can be told
to fail specific calls or to shorten reads and writes, which a real
filesystem will not do on demand.
"""

import sys
from pathlib import Path
from typing import Dict, List, Optional, Tuple

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from fileio_core.adapters.local_fs import LocalFS
from fileio_core.adapters.platform_time import PosixTime
from fileio_core.domain.enums import FSErrorKind
from fileio_core.ports.fs_port import FSError


class ShortWriter:
    """Raw file wrapper that accepts at most `limit` bytes per write."""

    def __init__(self, handle, limit: int):
        self._handle = handle
        self._limit = limit

    def write(self, data: bytes) -> int:
        return self._handle.write(data[:self._limit])

    def close(self):
        self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class TrackingReader:
    """File wrapper that records reads and can drop trailing bytes."""

    def __init__(self, handle, drop: int = 0, error: Optional[BaseException] = None):
        self._handle = handle
        self._drop = drop
        self._error = error
        self.reads: List[int] = []

    def seek(self, *args):
        return self._handle.seek(*args)

    def read(self, size: int = -1) -> bytes:
        self.reads.append(size)
        if self._error is not None:
            raise self._error
        data = self._handle.read(size)
        return data[:len(data) - self._drop] if self._drop else data

    def close(self):
        self._handle.close()

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()


class ScriptedFS(LocalFS):
    """LocalFS with scripted failures and a call log."""

    def __init__(self, symlinks: bool = True):
        super().__init__(platform_time=PosixTime(), symlinks=symlinks)
        self.calls: List[Tuple[str, str]] = []
        self._failures: Dict[str, List[FSErrorKind]] = {}
        self.short_write: Optional[int] = None
        self.read_drop = 0
        self.read_error: Optional[BaseException] = None
        self.readers: List[TrackingReader] = []

    def fail_next(self, op: str, kind: FSErrorKind, times: int = 1):
        """Make the next `times` calls of op raise FSError(kind)."""
        self._failures.setdefault(op, []).extend([kind] * times)

    def _enter(self, op: str, path: str):
        self.calls.append((op, path))
        pending = self._failures.get(op)
        if pending:
            raise FSError(pending.pop(0), path)

    def count(self, op: str) -> int:
        return sum(1 for name, _ in self.calls if name == op)

    def stat(self, path):
        self._enter("stat", path)
        return super().stat(path)

    def open_read(self, path):
        self._enter("open_read", path)
        reader = TrackingReader(super().open_read(path), drop=self.read_drop,
                                error=self.read_error)
        self.readers.append(reader)
        return reader

    def open_write(self, path):
        self._enter("open_write", path)
        handle = super().open_write(path)
        if self.short_write is not None:
            return ShortWriter(handle, self.short_write)
        return handle

    def mkdir(self, path, mode):
        self._enter("mkdir", path)
        super().mkdir(path, mode)

    def chmod(self, path, mode):
        self._enter("chmod", path)
        super().chmod(path, mode)

    def symlink(self, src, dst):
        self._enter("symlink", dst)
        super().symlink(src, dst)

    def set_mtime(self, path, mtime):
        self._enter("set_mtime", path)
        super().set_mtime(path, mtime)
