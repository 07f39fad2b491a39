"""
Filesystem port interface.

Defines the contract for the filesystem calls the fileio services make.
Implementations report failures as FSError so callers can branch on the
errno family (e.g. retry a write only when the parent path is missing).
"""

from abc import ABC, abstractmethod
from typing import BinaryIO, Optional, Tuple

from ..domain.enums import FSErrorKind
from ..domain.models import FileStat


class FSError(Exception):
    """A failed filesystem call, classified by errno."""

    def __init__(self, kind: FSErrorKind, path: str, message: str = "",
                 errno: Optional[int] = None):
        super().__init__(message or f"{kind.value}: {path}")
        self.kind = kind
        self.path = path
        self.errno = errno

    @property
    def is_not_found(self) -> bool:
        return self.kind == FSErrorKind.NOT_FOUND


class FSPort(ABC):
    """
    Abstract interface for filesystem operations.

    Every method raises FSError on failure; nothing else escapes.
    """

    @property
    @abstractmethod
    def separators(self) -> Tuple[str, ...]:
        """Path separator characters recognised by this filesystem."""
        pass

    @property
    @abstractmethod
    def supports_symlinks(self) -> bool:
        """Whether symlink() has any effect on this platform."""
        pass

    @abstractmethod
    def stat(self, path: str) -> FileStat:
        """Get metadata for path (following symlinks), times in Unix seconds."""
        pass

    @abstractmethod
    def open_read(self, path: str) -> BinaryIO:
        """Open an existing file for binary reading."""
        pass

    @abstractmethod
    def open_write(self, path: str) -> BinaryIO:
        """
        Create or truncate a file for binary writing.

        The returned handle is unbuffered: write() reports the number of
        bytes the OS actually accepted.
        """
        pass

    @abstractmethod
    def mkdir(self, path: str, mode: int) -> None:
        """Create a single directory."""
        pass

    @abstractmethod
    def chmod(self, path: str, mode: int) -> None:
        """Change permission bits."""
        pass

    @abstractmethod
    def symlink(self, src: str, dst: str) -> None:
        """Create a symbolic link at dst pointing to src."""
        pass

    @abstractmethod
    def set_mtime(self, path: str, mtime: int) -> None:
        """
        Set the modification time (Unix seconds).

        The access time is set to the current time.
        """
        pass
