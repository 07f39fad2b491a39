"""
Domain models for fileio.

Contains result types, stat records and enums used throughout the package.
"""

from .models import (
    FileIOError,
    FileStat,
    OperationResult,
)
from .enums import (
    FailureKind,
    FileType,
    FSErrorKind,
)

__all__ = [
    # Models
    "FileIOError",
    "FileStat",
    "OperationResult",
    # Enums
    "FailureKind",
    "FileType",
    "FSErrorKind",
]
