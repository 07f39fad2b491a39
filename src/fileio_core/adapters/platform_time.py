"""
Platform time adapters.

POSIX stat() already reports Unix-epoch seconds. On Windows the C runtime's
stat() may report local times, so WindowsTime re-reads the times directly
with FindFirstFileW and converts the NT FILETIME values. When that lookup is
not available the uncorrected values are returned unchanged.
"""

import ctypes
import logging
import os
from typing import Callable, Optional, Tuple

from ..domain.models import FileStat
from ..ports.time_port import PlatformTime

logger = logging.getLogger(__name__)

# 100ns intervals between 1601-01-01 and 1970-01-01
NT_EPOCH_OFFSET = 116444736000000000
TICKS_PER_SECOND = 10_000_000

# (ctime, atime, mtime) in Unix seconds, or None if the lookup failed
TimeLookup = Callable[[str], Optional[Tuple[int, int, int]]]


def filetime_to_unix(low: int, high: int = 0) -> int:
    """Convert a FILETIME (low/high DWORD pair) to Unix-epoch seconds."""
    ticks = (high << 32) | low
    return (ticks - NT_EPOCH_OFFSET) // TICKS_PER_SECOND


class PosixTime(PlatformTime):
    """Identity transform: stat() times are already Unix-epoch based."""

    def normalize(self, path: str, st: os.stat_result) -> FileStat:
        return self.from_stat(st)


class WindowsTime(PlatformTime):
    """Corrects stat() times using the Win32 find-file metadata."""

    def __init__(self, lookup: Optional[TimeLookup] = None):
        """
        Initialize the Windows time normalizer.

        Args:
            lookup: Override for the FindFirstFileW lookup. Defaults to the
                    kernel32 implementation, or None where kernel32 is absent.
        """
        self._lookup = lookup if lookup is not None else _load_find_first_file()

    @property
    def available(self) -> bool:
        """Whether the corrective lookup can run."""
        return self._lookup is not None

    def normalize(self, path: str, st: os.stat_result) -> FileStat:
        result = self.from_stat(st)
        if not self.available:
            logger.debug("No FindFirstFileW; keeping uncorrected times for %s", path)
            return result

        times = self._lookup(path)
        if times is None:
            logger.debug("Time lookup failed; keeping uncorrected times for %s", path)
            return result

        result.ctime, result.atime, result.mtime = times
        return result


def _load_find_first_file() -> Optional[TimeLookup]:
    """Bind FindFirstFileW/FindClose from kernel32, or None off Windows."""
    try:
        from ctypes import wintypes
        kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
    except (AttributeError, ImportError, OSError, ValueError):
        return None

    find_first = kernel32.FindFirstFileW
    find_first.argtypes = [wintypes.LPCWSTR, ctypes.POINTER(wintypes.WIN32_FIND_DATAW)]
    find_first.restype = wintypes.HANDLE

    find_close = kernel32.FindClose
    find_close.argtypes = [wintypes.HANDLE]
    find_close.restype = wintypes.BOOL

    invalid_handle = wintypes.HANDLE(-1).value

    def lookup(path: str) -> Optional[Tuple[int, int, int]]:
        data = wintypes.WIN32_FIND_DATAW()
        handle = find_first(path, ctypes.byref(data))
        if handle is None or handle == invalid_handle:
            return None
        try:
            return tuple(
                filetime_to_unix(ft.dwLowDateTime, ft.dwHighDateTime)
                for ft in (data.ftCreationTime, data.ftLastAccessTime, data.ftLastWriteTime)
            )
        finally:
            find_close(handle)

    return lookup


def get_platform_time() -> PlatformTime:
    """Pick the time normalizer for the running platform."""
    if os.name == "nt":
        return WindowsTime()
    return PosixTime()
