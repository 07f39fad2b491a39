"""
File writer - writes blobs to disk, creating parent directories on demand.
"""

import logging
from typing import Optional

from ..domain.enums import FailureKind
from ..domain.models import OperationResult
from ..ports.fs_port import FSError, FSPort
from .directories import DirectoryEnsurer

logger = logging.getLogger(__name__)


class FileWriter:
    """
    Writes a payload to a file, truncating any previous contents.

    If the file cannot be opened because part of its path is missing, the
    parent directories are created and the open is retried once.

    Setting the modification time is the last step. If it fails the call
    fails, but the file keeps the contents that were written.
    """

    def __init__(self, fs: FSPort, ensurer: DirectoryEnsurer):
        self.fs = fs
        self.ensurer = ensurer

    def write(self, path: str, data: bytes, perm: int = 0o666,
              mtime: Optional[int] = None) -> OperationResult:
        """
        Write data to path.

        Args:
            path: Target file
            data: Payload (may be empty)
            perm: Permission bits to apply; 0 leaves them as created
            mtime: Modification time in Unix seconds; None or negative = unset

        Returns:
            OperationResult holding the number of bytes written
        """
        try:
            handle = self.fs.open_write(path)
        except FSError as e:
            if not e.is_not_found:
                logger.warning("Cannot open %s for writing: %s", path, e)
                return self._failed(path, FailureKind.IO_ERROR)

            ensured = self.ensurer.ensure_parents(path)
            if not ensured.success:
                logger.warning("Cannot create parents of %s: %s", path, ensured.error)
                if ensured.kind == FailureKind.OUT_OF_MEMORY:
                    return ensured
                return self._failed(path, FailureKind.IO_ERROR)

            try:
                handle = self.fs.open_write(path)
            except FSError as e:
                logger.warning("Cannot open %s for writing after creating parents: %s", path, e)
                return self._failed(path, FailureKind.IO_ERROR)

        try:
            with handle:
                written = (handle.write(data) or 0) if data else 0
        except OSError as e:
            logger.warning("Write to %s failed: %s", path, e)
            return self._failed(path, FailureKind.IO_ERROR)

        if written != len(data):
            # Partial file stays on disk
            logger.warning("Short write to %s: %d of %d bytes", path, written, len(data))
            return self._failed(path, FailureKind.IO_ERROR)

        if perm:
            try:
                self.fs.chmod(path, perm)
            except FSError as e:
                logger.warning("chmod %s failed: %s", path, e)
                return self._failed(path, FailureKind.OPERATION_FAILED)

        if mtime is not None and mtime >= 0:
            try:
                self.fs.set_mtime(path, mtime)
            except FSError as e:
                logger.warning("Setting mtime of %s failed, contents kept: %s", path, e)
                return self._failed(path, FailureKind.OPERATION_FAILED)

        logger.debug("Wrote %d bytes to %s", written, path)
        return OperationResult.ok(written)

    @staticmethod
    def _failed(path: str, kind: FailureKind) -> OperationResult:
        return OperationResult.failure(kind, f"failed to write file: {path}")
