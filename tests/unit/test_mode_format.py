"""
Tests for the ls -l style mode formatter.
"""

import stat
import sys
from pathlib import Path

import pytest

sys.path.insert(0, str(Path(__file__).parent.parent.parent / "src"))

from fileio_core.domain.enums import FileType
from fileio_core.services.mode_format import format_mode


class TestFormatMode:
    """Test format_mode() output."""

    def test_regular_file(self):
        """Regular file 0754 renders as -rwxr-xr--."""
        assert format_mode(stat.S_IFREG | 0o754) == "-rwxr-xr--"

    def test_directory(self):
        """Directory 0777 renders as drwxrwxrwx."""
        assert format_mode(stat.S_IFDIR | 0o777) == "drwxrwxrwx"

    def test_symlink(self):
        """Symlink type gets an l."""
        assert format_mode(stat.S_IFLNK | 0o777) == "lrwxrwxrwx"

    def test_unknown_type(self):
        """Modes without a known type get a question mark."""
        assert format_mode(0o644) == "?rw-r--r--"
        assert format_mode(stat.S_IFIFO | 0o600) == "?rw-------"

    def test_no_permissions(self):
        """All permission bits clear."""
        assert format_mode(stat.S_IFREG) == "----------"

    def test_special_bits_ignored(self):
        """setuid/setgid/sticky do not change the output."""
        assert format_mode(stat.S_IFDIR | 0o1777) == "drwxrwxrwx"
        assert format_mode(stat.S_IFREG | 0o4755) == "-rwxr-xr-x"

    @pytest.mark.parametrize("mode", [0, 1, 0o100644, 0o40000, -1, 2 ** 40])
    def test_always_ten_characters(self, mode):
        """Any integer, including out-of-range ones, gives 10 characters."""
        assert len(format_mode(mode)) == 10


class TestFileType:
    """Test FileType.from_mode()."""

    def test_from_mode(self):
        assert FileType.from_mode(stat.S_IFREG | 0o644) == FileType.REGULAR
        assert FileType.from_mode(stat.S_IFDIR | 0o755) == FileType.DIRECTORY
        assert FileType.from_mode(stat.S_IFLNK | 0o777) == FileType.SYMLINK
        assert FileType.from_mode(stat.S_IFSOCK) == FileType.UNKNOWN

    def test_symbols(self):
        assert FileType.UNKNOWN.symbol == "?"
        assert FileType.REGULAR.symbol == "-"


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
