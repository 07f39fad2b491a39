"""
File reader - returns whole files as blobs, bounded by a size limit.
"""

import logging
import os

from ..domain.enums import FailureKind
from ..domain.models import OperationResult
from ..ports.fs_port import FSError, FSPort

logger = logging.getLogger(__name__)


class FileReader:
    """
    Reads a file's full contents.

    A file that cannot be opened yields a successful result with no value.
    Errors are only reported once a read has started.
    """

    def __init__(self, fs: FSPort):
        self.fs = fs

    def read(self, path: str, max_size: int) -> OperationResult:
        """
        Read the whole of path.

        Args:
            path: File to read
            max_size: Largest payload the caller accepts, in bytes

        Returns:
            OperationResult holding the bytes, or None if the file could not
            be opened. TOO_LARGE if the file exceeds max_size, IO_ERROR on a
            short or failed read.
        """
        try:
            handle = self.fs.open_read(path)
        except FSError as e:
            logger.debug("Cannot open %s (%s), returning NULL", path, e.kind.value)
            return OperationResult.ok(None)

        try:
            with handle:
                size = handle.seek(0, os.SEEK_END)
                handle.seek(0)
                if size > max_size:
                    logger.warning("File %s is %d bytes, limit is %d", path, size, max_size)
                    return OperationResult.failure(
                        FailureKind.TOO_LARGE,
                        f"file too large: {path} ({size} > {max_size} bytes)",
                    )
                data = handle.read(size)
        except MemoryError:
            return OperationResult.failure(
                FailureKind.OUT_OF_MEMORY, f"out of memory reading file: {path}"
            )
        except OSError as e:
            logger.warning("Read of %s failed: %s", path, e)
            return OperationResult.failure(FailureKind.IO_ERROR, f"failed to read file: {path}")

        if len(data) != size:
            logger.warning("Short read on %s: got %d of %d bytes", path, len(data), size)
            return OperationResult.failure(FailureKind.IO_ERROR, f"failed to read file: {path}")

        return OperationResult.ok(data)
