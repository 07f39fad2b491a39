"""
Adapters for fileio.

Implementations of the port interfaces, plus the SQLite binding.
"""

from .fs_factory import create_service
from .local_fs import LocalFS
from .platform_time import PosixTime, WindowsTime, get_platform_time
from .sqlite_functions import SqliteFunctions, register_functions

__all__ = [
    "LocalFS",
    "PosixTime",
    "SqliteFunctions",
    "WindowsTime",
    "create_service",
    "get_platform_time",
    "register_functions",
]
