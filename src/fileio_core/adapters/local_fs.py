"""
Local Filesystem Adapter.

Implements the filesystem port on top of the os module. Every OSError (and
the ValueError raised for a path with an embedded NUL) is translated into an
FSError carrying the errno family and the path, so the services can tell
"path missing" apart from other failures.
"""

import logging
import os
import time
from typing import BinaryIO, NoReturn, Optional, Tuple

from ..domain.enums import FSErrorKind
from ..domain.models import FileStat
from ..ports.fs_port import FSError, FSPort
from ..ports.time_port import PlatformTime
from .platform_time import get_platform_time

logger = logging.getLogger(__name__)


class LocalFS(FSPort):
    """os-backed filesystem implementation."""

    def __init__(self, platform_time: Optional[PlatformTime] = None,
                 symlinks: Optional[bool] = None):
        """
        Initialize the local filesystem.

        Args:
            platform_time: Time normalizer for stat(). Defaults to the
                           running platform's implementation.
            symlinks: Whether symlink() is honoured. Defaults to False on
                      Windows and True elsewhere.
        """
        self.platform_time = platform_time or get_platform_time()
        self._symlinks = (os.name != "nt") if symlinks is None else symlinks

    def _fail(self, exc: Exception, path: str) -> NoReturn:
        # ValueError (embedded NUL) and OverflowError carry no errno
        errno_value = getattr(exc, "errno", None)
        kind = FSErrorKind.from_errno(errno_value or 0)
        logger.debug("%s failed on %s: %s", kind.value, path, exc)
        raise FSError(kind, path, str(exc), errno_value) from exc

    @property
    def separators(self) -> Tuple[str, ...]:
        return tuple(sep for sep in (os.sep, os.altsep) if sep)

    @property
    def supports_symlinks(self) -> bool:
        return self._symlinks

    def stat(self, path: str) -> FileStat:
        try:
            st = os.stat(path)
        except (OSError, ValueError) as e:
            self._fail(e, path)
        return self.platform_time.normalize(path, st)

    def open_read(self, path: str) -> BinaryIO:
        try:
            return open(path, "rb")
        except (OSError, ValueError) as e:
            self._fail(e, path)

    def open_write(self, path: str) -> BinaryIO:
        try:
            return open(path, "wb", buffering=0)
        except (OSError, ValueError) as e:
            self._fail(e, path)

    def mkdir(self, path: str, mode: int) -> None:
        try:
            os.mkdir(path, mode)
        except (OSError, ValueError) as e:
            self._fail(e, path)

    def chmod(self, path: str, mode: int) -> None:
        try:
            os.chmod(path, mode)
        except (OSError, ValueError) as e:
            self._fail(e, path)

    def symlink(self, src: str, dst: str) -> None:
        try:
            os.symlink(src, dst)
        except (OSError, ValueError) as e:
            self._fail(e, dst)

    def set_mtime(self, path: str, mtime: int) -> None:
        try:
            os.utime(path, (int(time.time()), mtime))
        except (OSError, OverflowError, ValueError) as e:
            self._fail(e, path)
