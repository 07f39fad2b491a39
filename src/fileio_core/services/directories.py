"""
Directory services - parent-directory ensuring and single-directory creation.
"""

import logging
from typing import List, Optional

from ..domain.enums import FailureKind, FSErrorKind
from ..domain.models import OperationResult
from ..ports.fs_port import FSError, FSPort

logger = logging.getLogger(__name__)


class DirectoryEnsurer:
    """
    Creates every missing ancestor directory of a file path.

    New directories get mode 0o777 filtered by the umask. With `umask` left
    as None the process umask applies; otherwise the given umask is applied
    explicitly so the result does not depend on process state.
    """

    def __init__(self, fs: FSPort, umask: Optional[int] = None):
        self.fs = fs
        self.umask = umask

    def ensure_parents(self, path: str) -> OperationResult:
        """
        Create the missing directories between the root and path's parent.

        The final component of path is never created.
        """
        try:
            prefixes = self.parent_prefixes(path)
        except MemoryError:
            return OperationResult.failure(
                FailureKind.OUT_OF_MEMORY,
                f"out of memory creating parent directories: {path}",
            )

        for prefix in prefixes:
            try:
                entry = self.fs.stat(prefix)
            except FSError:
                try:
                    self._create(prefix)
                except FSError as e:
                    logger.warning("Cannot create directory %s: %s", prefix, e)
                    return OperationResult.failure(
                        FailureKind.OPERATION_FAILED, f"failed to create directory: {prefix}"
                    )
                logger.debug("Created parent directory %s", prefix)
                continue

            if not entry.is_dir:
                logger.warning("Parent path %s exists and is not a directory", prefix)
                return OperationResult.failure(
                    FailureKind.OPERATION_FAILED, f"not a directory: {prefix}"
                )

        return OperationResult.ok()

    def parent_prefixes(self, path: str) -> List[str]:
        """Every prefix of path that ends just before a separator, shortest first."""
        separators = self.fs.separators
        return [path[:i] for i in range(1, len(path)) if path[i] in separators]

    def _create(self, prefix: str):
        if self.umask is None:
            self.fs.mkdir(prefix, 0o777)
            return
        mode = 0o777 & ~self.umask
        self.fs.mkdir(prefix, mode)
        self.fs.chmod(prefix, mode)


class DirectoryMaker:
    """
    Creates a single directory with the requested permissions.

    An existing directory is accepted when its permissions match, or can be
    changed to match.
    """

    def __init__(self, fs: FSPort, umask: Optional[int] = None):
        self.fs = fs
        self.umask = umask

    def make(self, path: str, mode: int) -> OperationResult:
        target = self._target_bits(mode)
        try:
            self.fs.mkdir(path, mode)
        except FSError as e:
            if e.kind == FSErrorKind.EXISTS and self._adopt_existing(path, target):
                return OperationResult.ok()
            logger.warning("mkdir %s failed: %s", path, e)
            return self._failed(path)

        if self.umask is not None:
            try:
                self.fs.chmod(path, target)
            except FSError as e:
                logger.warning("chmod %s failed: %s", path, e)
                return self._failed(path)

        logger.debug("Created directory %s (%o)", path, mode)
        return OperationResult.ok()

    def _target_bits(self, mode: int) -> int:
        bits = mode & 0o777
        if self.umask is not None:
            bits &= ~self.umask
        return bits

    def _adopt_existing(self, path: str, target: int) -> bool:
        """Accept a pre-existing directory, fixing its permissions if needed."""
        try:
            entry = self.fs.stat(path)
        except FSError:
            return False
        if not entry.is_dir:
            return False
        if entry.permissions == target:
            return True
        try:
            self.fs.chmod(path, target)
        except FSError:
            return False
        logger.debug("Changed permissions of existing directory %s to %o", path, target)
        return True

    @staticmethod
    def _failed(path: str) -> OperationResult:
        return OperationResult.failure(
            FailureKind.OPERATION_FAILED, f"failed to create directory: {path}"
        )
