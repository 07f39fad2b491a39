"""
Platform time port.

Turns native stat() results into Unix-epoch timestamps.
"""

import os
from abc import ABC, abstractmethod

from ..domain.models import FileStat


class PlatformTime(ABC):
    """Normalizes file timestamps to seconds since the Unix epoch."""

    @abstractmethod
    def normalize(self, path: str, st: os.stat_result) -> FileStat:
        """
        Build a FileStat from a native stat result.

        Args:
            path: Path the stat result belongs to (used for corrective lookups)
            st: Result of os.stat()

        Returns:
            FileStat with atime/mtime/ctime in Unix-epoch seconds
        """
        pass

    @staticmethod
    def from_stat(st: os.stat_result) -> FileStat:
        """FileStat with the stat result's times taken as-is."""
        return FileStat(
            mode=st.st_mode,
            size=st.st_size,
            atime=int(st.st_atime),
            mtime=int(st.st_mtime),
            ctime=int(st.st_ctime),
        )
