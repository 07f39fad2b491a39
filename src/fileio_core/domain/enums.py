"""
Enumerations for the fileio domain.
"""

import errno
import stat as _stat
from enum import Enum

# File-type bits of st_mode (POSIX S_IFMT)
S_IFMT_MASK = 0o170000


class FailureKind(str, Enum):
    """Labels for a failed operation, as seen by the SQL caller."""
    TOO_LARGE = "too_large"             # File exceeds the blob size limit
    IO_ERROR = "io_error"               # Open/read/write count mismatch
    OUT_OF_MEMORY = "out_of_memory"     # Allocation failed
    ARGUMENT_ERROR = "argument_error"   # Wrong number of arguments
    OPERATION_FAILED = "operation_failed"  # mkdir/symlink/chmod/mtime


class FSErrorKind(str, Enum):
    """Errno families reported by the filesystem adapter."""
    NOT_FOUND = "not_found"             # ENOENT
    EXISTS = "exists"                   # EEXIST
    NOT_A_DIRECTORY = "not_a_directory"  # ENOTDIR
    PERMISSION = "permission"           # EACCES, EPERM
    UNSUPPORTED = "unsupported"         # ENOSYS, ENOTSUP
    OTHER = "other"

    @classmethod
    def from_errno(cls, errno_value: int) -> "FSErrorKind":
        """Map an errno value onto an error kind."""
        ERRNO_MAP = {
            errno.ENOENT: cls.NOT_FOUND,
            errno.EEXIST: cls.EXISTS,
            errno.ENOTDIR: cls.NOT_A_DIRECTORY,
            errno.EACCES: cls.PERMISSION,
            errno.EPERM: cls.PERMISSION,
            errno.ENOSYS: cls.UNSUPPORTED,
        }
        if hasattr(errno, "ENOTSUP"):
            ERRNO_MAP[errno.ENOTSUP] = cls.UNSUPPORTED

        return ERRNO_MAP.get(errno_value, cls.OTHER)


class FileType(str, Enum):
    """File type encoded in the high bits of a mode."""
    SYMLINK = "symlink"
    REGULAR = "regular"
    DIRECTORY = "directory"
    UNKNOWN = "unknown"

    @classmethod
    def from_mode(cls, mode: int) -> "FileType":
        """Determine the file type from a numeric st_mode."""
        # Masked by hand: S_ISLNK() and friends reject values wider than mode_t
        fmt = mode & S_IFMT_MASK
        if fmt == _stat.S_IFLNK:
            return cls.SYMLINK
        if fmt == _stat.S_IFREG:
            return cls.REGULAR
        if fmt == _stat.S_IFDIR:
            return cls.DIRECTORY
        return cls.UNKNOWN

    @property
    def symbol(self) -> str:
        """Leading character used by `ls -l`."""
        return {
            FileType.SYMLINK: "l",
            FileType.REGULAR: "-",
            FileType.DIRECTORY: "d",
        }.get(self, "?")
