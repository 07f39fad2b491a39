"""
Tests for SymlinkMaker.
"""

import os
import sys
import tempfile
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from fileio_core.domain.enums import FailureKind
from fileio_core.services.symlinks import SymlinkMaker

from fake_fs import ScriptedFS

posix_only = pytest.mark.skipif(sys.platform == "win32", reason="needs symlink privileges")


@pytest.fixture
def temp_dir():
    with tempfile.TemporaryDirectory() as tmpdir:
        (Path(tmpdir) / "target.txt").write_text("target")
        yield Path(tmpdir)


class TestSymlinkMaker:

    @posix_only
    def test_creates_link(self, temp_dir):
        """Link points at the source and reads through."""
        link = temp_dir / "link.txt"
        result = SymlinkMaker(ScriptedFS()).make(str(temp_dir / "target.txt"), str(link))

        assert result.success
        assert link.is_symlink()
        assert os.readlink(link) == str(temp_dir / "target.txt")
        assert link.read_text() == "target"

    @posix_only
    def test_dangling_link_allowed(self, temp_dir):
        """The source does not have to exist."""
        link = temp_dir / "dangling"
        result = SymlinkMaker(ScriptedFS()).make("does/not/exist", str(link))

        assert result.success
        assert link.is_symlink()

    @posix_only
    def test_existing_destination_fails(self, temp_dir):
        src = str(temp_dir / "target.txt")
        result = SymlinkMaker(ScriptedFS()).make(src, str(temp_dir / "target.txt"))

        assert not result.success
        assert result.kind == FailureKind.OPERATION_FAILED
        assert result.error == f"failed to create symlink to: {src}"

    def test_unsupported_platform_is_noop(self, temp_dir):
        """Without symlink support the call succeeds and does nothing."""
        fs = ScriptedFS(symlinks=False)
        link = temp_dir / "never"
        result = SymlinkMaker(fs).make(str(temp_dir / "target.txt"), str(link))

        assert result.success
        assert not link.exists()
        assert fs.calls == []


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
