"""
FileIO Service - the callable surface handed to the SQL evaluator.

Each operation takes the raw argument tuple of one SQL call, checks its
arity, coerces the values the way SQLite's value accessors do and delegates
to the component services. Results are always OperationResult; nothing is
raised for filesystem failures.
"""

import math
import os
import re
from typing import Any, Optional

from ..config import FileIOConfig
from ..domain.enums import FailureKind
from ..domain.models import OperationResult
from ..ports.fs_port import FSPort
from .directories import DirectoryEnsurer, DirectoryMaker
from .mode_format import format_mode
from .reader import FileReader
from .symlinks import SymlinkMaker
from .writer import FileWriter


# Leading integer of a text value, as sqlite3_value_int() reads it
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")

# Bits mode_t can carry: permissions plus setuid/setgid/sticky
_MODE_BITS = 0o7777

# Range of sqlite3_value_int64(); out-of-range reals clamp to these
INT64_MIN = -2 ** 63
INT64_MAX = 2 ** 63 - 1


def as_path(value: Any) -> Optional[str]:
    """Text form of a path argument; None stays None."""
    if value is None:
        return None
    if isinstance(value, (bytes, bytearray, memoryview)):
        return os.fsdecode(bytes(value))
    return str(value)


def as_blob(value: Any) -> bytes:
    """Blob form of a data argument; NULL is an empty payload."""
    if value is None:
        return b""
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    if isinstance(value, str):
        return value.encode("utf-8")
    return str(value).encode("utf-8")


def as_int(value: Any, default: Optional[int] = None) -> Optional[int]:
    """Integer form of a numeric argument; NULL yields default."""
    if value is None:
        return default
    if isinstance(value, int):
        return int(value)
    if isinstance(value, float):
        if math.isnan(value):
            return 0
        if value >= INT64_MAX:
            return INT64_MAX
        if value <= INT64_MIN:
            return INT64_MIN
        return int(value)
    if isinstance(value, (bytes, bytearray, memoryview)):
        value = bytes(value).decode("utf-8", errors="replace")
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else 0


class FileIOService:
    """
    Service implementing readfile/writefile/mkdir/symlink/lsmode.

    Holds no per-call state; every call is independent.
    """

    def __init__(self, fs: FSPort, config: Optional[FileIOConfig] = None):
        """
        Initialize the service.

        Args:
            fs: Filesystem adapter
            config: Defaults and umask; FileIOConfig() if omitted
        """
        self.fs = fs
        self.config = config or FileIOConfig()
        self.reader = FileReader(fs)
        self.ensurer = DirectoryEnsurer(fs, self.config.umask)
        self.writer = FileWriter(fs, self.ensurer)
        self.dir_maker = DirectoryMaker(fs, self.config.umask)
        self.symlink_maker = SymlinkMaker(fs)

    @staticmethod
    def _wrong_args(name: str) -> OperationResult:
        return OperationResult.failure(
            FailureKind.ARGUMENT_ERROR, f"wrong number of arguments to function {name}()"
        )

    def readfile(self, *args, max_size: int) -> OperationResult:
        """readfile(path) -> blob, or NULL if the file cannot be opened."""
        if len(args) != 1:
            return self._wrong_args("readfile")
        path = as_path(args[0])
        if path is None:
            return OperationResult.ok(None)
        if self.config.max_blob_size is not None:
            max_size = min(max_size, self.config.max_blob_size)
        return self.reader.read(path, max_size)

    def writefile(self, *args) -> OperationResult:
        """writefile(path, data[, perm[, mtime]]) -> number of bytes written."""
        if not 2 <= len(args) <= 4:
            return self._wrong_args("writefile")
        path = as_path(args[0])
        if path is None:
            return OperationResult.ok(None)

        perm = self.config.default_file_perm
        if len(args) >= 3:
            perm = as_int(args[2], perm)
        mtime = as_int(args[3]) if len(args) == 4 else None

        return self.writer.write(path, as_blob(args[1]), perm & _MODE_BITS, mtime)

    def mkdir(self, *args) -> OperationResult:
        """mkdir(path[, perm])."""
        if len(args) not in (1, 2):
            return self._wrong_args("mkdir")
        path = as_path(args[0])
        if path is None:
            return OperationResult.ok(None)

        perm = self.config.default_dir_perm
        if len(args) == 2:
            perm = as_int(args[1], perm)

        return self.dir_maker.make(path, perm & _MODE_BITS)

    def symlink(self, *args) -> OperationResult:
        """symlink(src, dst)."""
        if len(args) != 2:
            return self._wrong_args("symlink")
        src, dst = as_path(args[0]), as_path(args[1])
        if src is None or dst is None:
            return OperationResult.ok(None)
        return self.symlink_maker.make(src, dst)

    def lsmode(self, *args) -> OperationResult:
        """lsmode(mode) -> 10-character permission string."""
        if len(args) != 1:
            return self._wrong_args("lsmode")
        return OperationResult.ok(format_mode(as_int(args[0], 0)))
