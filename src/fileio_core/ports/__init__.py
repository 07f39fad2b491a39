"""
Ports (interfaces) for fileio.

These define the contracts that adapters must implement.
This enables dependency injection and testing with fakes.
"""

from .fs_port import FSError, FSPort
from .time_port import PlatformTime

__all__ = ["FSError", "FSPort", "PlatformTime"]
