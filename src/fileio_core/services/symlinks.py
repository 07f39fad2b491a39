"""
Symlink service.
"""

import logging

from ..domain.enums import FailureKind
from ..domain.models import OperationResult
from ..ports.fs_port import FSError, FSPort

logger = logging.getLogger(__name__)


class SymlinkMaker:
    """Creates symbolic links; a no-op where the platform has none."""

    def __init__(self, fs: FSPort):
        self.fs = fs

    def make(self, src: str, dst: str) -> OperationResult:
        """Create a link at dst pointing to src."""
        if not self.fs.supports_symlinks:
            logger.debug("Symlinks unsupported, skipping %s -> %s", dst, src)
            return OperationResult.ok()

        try:
            self.fs.symlink(src, dst)
        except FSError as e:
            logger.warning("symlink %s -> %s failed: %s", dst, src, e)
            return OperationResult.failure(
                FailureKind.OPERATION_FAILED, f"failed to create symlink to: {src}"
            )
        return OperationResult.ok()
