"""
Domain models (DTOs) for fileio.

These are pure data classes with no filesystem or database dependencies.
"""

from dataclasses import dataclass
from typing import Any, Optional

from .enums import FailureKind, FileType


class FileIOError(Exception):
    """Raised when a failed OperationResult is unwrapped."""

    def __init__(self, message: str, kind: FailureKind = FailureKind.OPERATION_FAILED):
        super().__init__(message)
        self.kind = kind


@dataclass
class OperationResult:
    """Outcome of a single fileio call."""

    # Payload on success (bytes, int, str or None for "no value")
    value: Any = None

    # Whether the call succeeded
    success: bool = True

    # Failure label; None on success
    kind: Optional[FailureKind] = None

    # Human-readable message including the offending path
    error: Optional[str] = None

    @classmethod
    def ok(cls, value: Any = None) -> "OperationResult":
        """Create a successful result."""
        return cls(value=value)

    @classmethod
    def failure(cls, kind: FailureKind, error: str) -> "OperationResult":
        """Create a failed result."""
        return cls(success=False, kind=kind, error=error)

    def unwrap(self) -> Any:
        """Return the value, or raise FileIOError for a failure."""
        if not self.success:
            raise FileIOError(self.error or self.kind.value, self.kind)
        return self.value


@dataclass
class FileStat:
    """Metadata for a filesystem entry, times in Unix-epoch seconds."""
    mode: int
    size: int
    atime: int
    mtime: int
    ctime: int

    @property
    def file_type(self) -> FileType:
        return FileType.from_mode(self.mode)

    @property
    def is_dir(self) -> bool:
        return self.file_type == FileType.DIRECTORY

    @property
    def permissions(self) -> int:
        """Owner/group/other rwx bits."""
        return self.mode & 0o777
