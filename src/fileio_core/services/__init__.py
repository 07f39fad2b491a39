"""
Services for fileio.

The component services each implement one filesystem operation against an
FSPort; FileIOService bundles them behind the SQL-facing call surface.
"""

from .directories import DirectoryEnsurer, DirectoryMaker
from .fileio_service import FileIOService
from .mode_format import format_mode
from .reader import FileReader
from .symlinks import SymlinkMaker
from .writer import FileWriter

__all__ = [
    "DirectoryEnsurer",
    "DirectoryMaker",
    "FileIOService",
    "FileReader",
    "FileWriter",
    "SymlinkMaker",
    "format_mode",
]
