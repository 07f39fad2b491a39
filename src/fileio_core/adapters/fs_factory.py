"""
Factory - wires FileIOService to the local filesystem.
"""

from typing import Optional

from ..config import FileIOConfig
from ..ports.time_port import PlatformTime
from ..services.fileio_service import FileIOService
from .local_fs import LocalFS


def create_service(config: Optional[FileIOConfig] = None,
                   platform_time: Optional[PlatformTime] = None) -> FileIOService:
    """
    Create a FileIOService backed by LocalFS.

    Args:
        config: Service configuration; FileIOConfig() if omitted
        platform_time: Time normalizer override (defaults to the platform's)
    """
    config = config or FileIOConfig()
    fs = LocalFS(platform_time=platform_time, symlinks=config.symlinks)
    return FileIOService(fs, config)
